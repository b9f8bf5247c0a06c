"""Global constants for dashboard-writer.

These values serve as defaults for configuration.  Override the environment
variables rather than editing them here.
"""

import os

# Transport
HTTP_TIMEOUT_S = float(os.environ.get("HTTP_TIMEOUT_S", 10))
MCP_TRANSPORT = os.environ.get("MCP_TRANSPORT", "stdio")

# Tracker endpoints, relative to the repository path
ISSUES_PATH = "{repository}/issues"
ISSUE_PATH = "{repository}/issues/{number}"

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
