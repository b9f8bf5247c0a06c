"""Secret redaction for text sent to the issue tracker.

Secrets registered with :func:`add_secret` and common credential patterns are
replaced with ``"**redacted**"`` before an issue body leaves the process.
Generic long hex strings are left alone: commit SHAs appear in dashboard
bodies and must survive.
"""

from __future__ import annotations

import re

REDACTED = "**redacted**"

_TOKEN_PATTERNS = [
    # GitHub personal access tokens: ghp_xxx or github_pat_xxx
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}"),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}"),
    # GitLab personal access tokens
    re.compile(r"glpat-[A-Za-z0-9_\-]{20,}"),
    # Bearer tokens (JWT or opaque strings following 'Bearer ')
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    # Private key blocks (BEGIN/END markers)
    re.compile(r"-----BEGIN [A-Z ]+ PRIVATE KEY-----[\s\S]+?-----END [A-Z ]+ PRIVATE KEY-----"),
]

_secrets: set[str] = set()


def add_secret(secret: str | None) -> None:
    """Register ``secret`` so that :func:`sanitize` replaces it."""
    if secret:
        _secrets.add(secret)


def clear_secrets() -> None:
    _secrets.clear()


def sanitize(text: str | None) -> str | None:
    """Return ``text`` with registered secrets and token patterns redacted.

    Longer secrets are replaced first so a secret that contains another one
    is redacted as a whole.  Empty input is returned unchanged.
    """
    if not text:
        return text
    redacted = text
    for secret in sorted(_secrets, key=len, reverse=True):
        redacted = redacted.replace(secret, REDACTED)
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub(REDACTED, redacted)
    return redacted
