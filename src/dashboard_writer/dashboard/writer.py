"""Reconciliation of the dependency dashboard issue.

The writer keeps one issue per title in sync with the desired body.  Every
operation re-reads the repository's issue list and replaces the cached copy;
nothing is served from a stale list.  Read paths (ensure, find, get) never
raise: failures are logged and reported through ``ReconcileResult`` /
``IssueLookup``.  Closing issues is the exception and lets errors propagate.
"""

from __future__ import annotations

import logging

import httpx

from ..config import Config
from ..constants import ISSUE_PATH, ISSUES_PATH
from ..errors import (
    ISSUES_DISABLED_MESSAGE,
    REPOSITORY_UNAVAILABLE,
    SELF_HOSTED_DASHBOARD_URL_UNAVAILABLE,
    ConfigurationError,
    MalformedResponseError,
)
from ..http import Http
from ..sanitize import sanitize
from .models import (
    EnsureIssueConfig,
    EnsureIssueResult,
    Issue,
    IssueLookup,
    IssueSummary,
    ReconcileAction,
    ReconcileResult,
)

logger = logging.getLogger(__name__)


class DashboardWriter:
    """Creates, updates, closes and fetches dashboard issues for one repository."""

    def __init__(self, repository: str, base_url: str, http: Http) -> None:
        self.repository = repository
        self.base_url = base_url
        self._http = http
        self._issue_list: list[IssueSummary] = []

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> DashboardWriter:
        """Validate ``config`` and build a writer with its own HTTP client.

        Raises ``ConfigurationError`` when the dashboard URL or the repository
        is missing.  Self-hosted dashboards have no default URL.
        """
        if not config.dependency_dashboard_url:
            raise ConfigurationError(SELF_HOSTED_DASHBOARD_URL_UNAVAILABLE)
        if not config.repository:
            raise ConfigurationError(REPOSITORY_UNAVAILABLE)
        http = Http(
            "self-host",
            config.dependency_dashboard_url,
            timeout=config.http_timeout_s,
            transport=transport,
        )
        return cls(config.repository, config.dependency_dashboard_url, http)

    @property
    def issue_list(self) -> list[IssueSummary]:
        """Issue list as of the last refresh."""
        return list(self._issue_list)

    async def aclose(self) -> None:
        await self._http.aclose()

    def _issues_path(self) -> str:
        return ISSUES_PATH.format(repository=self.repository)

    def _issue_path(self, number: int) -> str:
        return ISSUE_PATH.format(repository=self.repository, number=number)

    async def list_issues(self) -> list[IssueSummary]:
        """Fetch the repository's issues and replace the cached list.

        A response that is not a JSON array is logged and treated as an empty
        list; the cache is cleared in that case too.
        """
        res = await self._http.get_json(self._issues_path(), base_url=self.base_url)
        if not isinstance(res.body, list):
            logger.warning(
                "Could not retrieve issue list",
                extra={"response_body": res.body},
            )
            self._issue_list = []
            return []
        self._issue_list = [IssueSummary(id=item["iid"], title=item["title"]) for item in res.body]
        return list(self._issue_list)

    async def _fetch_issue(self, number: int, *, use_cache: bool) -> Issue:
        res = await self._http.get_json(
            self._issue_path(number),
            base_url=self.base_url,
            use_cache=use_cache,
        )
        if not isinstance(res.body, dict):
            raise MalformedResponseError(f"Unexpected response body for issue {number}")
        return Issue(number=number, body=res.body.get("description"))

    async def reconcile_issue(self, config: EnsureIssueConfig) -> ReconcileResult:
        """Create or update the issue described by ``config``.

        The issue is matched on ``config.title`` first, then on
        ``config.reuse_title``.  A matched issue is updated only when its title
        or description differs from the desired one.
        """
        logger.debug("reconcile_issue(%s)", config.title)
        description = sanitize(config.body)
        try:
            issue_list = await self.list_issues()
            issue = next((i for i in issue_list if i.title == config.title), None)
            if issue is None and config.reuse_title is not None:
                issue = next((i for i in issue_list if i.title == config.reuse_title), None)

            if issue is None:
                await self._http.post_json(
                    self._issues_path(),
                    body={"title": config.title, "description": description},
                    base_url=self.base_url,
                )
                logger.info("Issue created", extra={"title": config.title})
                return ReconcileResult(ReconcileAction.CREATED)

            existing = await self._fetch_issue(issue.id, use_cache=False)
            if issue.title != config.title or existing.body != description:
                logger.debug("Updating issue", extra={"issue_number": issue.id})
                await self._http.put_json(
                    self._issue_path(issue.id),
                    body={"title": config.title, "description": description},
                    base_url=self.base_url,
                )
                return ReconcileResult(ReconcileAction.UPDATED)
            return ReconcileResult(ReconcileAction.UNCHANGED)
        except Exception as err:
            if str(err).startswith(ISSUES_DISABLED_MESSAGE):
                logger.debug("Could not create issue: %s", err)
                return ReconcileResult(ReconcileAction.DISABLED, error=err)
            logger.warning("Could not ensure issue: %s", err, exc_info=err)
            return ReconcileResult(ReconcileAction.FAILED, error=err)

    async def ensure_issue(
        self,
        *,
        title: str,
        body: str,
        reuse_title: str | None = None,
    ) -> EnsureIssueResult | None:
        """Create or update a dashboard issue.

        Returns ``EnsureIssueResult.CREATED`` or ``EnsureIssueResult.UPDATED``
        when a mutation was sent, ``None`` when the issue was already up to
        date or the operation failed.  Never raises.
        """
        result = await self.reconcile_issue(
            EnsureIssueConfig(title=title, body=body, reuse_title=reuse_title)
        )
        return result.to_ensure_result()

    async def ensure_issue_closing(self, title: str) -> None:
        """Close every issue whose title is exactly ``title``.

        Errors are not caught here.
        """
        logger.debug("ensure_issue_closing(%s)", title)
        issue_list = await self.list_issues()
        for issue in issue_list:
            if issue.title == title:
                logger.debug("Closing issue", extra={"issue_number": issue.id})
                await self._http.put_json(
                    self._issue_path(issue.id),
                    body={"state_event": "close"},
                    base_url=self.base_url,
                )

    async def lookup_issue(self, number: int, use_cache: bool = True) -> IssueLookup:
        try:
            return IssueLookup.found(await self._fetch_issue(number, use_cache=use_cache))
        except Exception as err:
            logger.warning(
                "Error getting issue #%s: %s",
                number,
                err,
                extra={"issue_number": number},
            )
            return IssueLookup.failed(err)

    async def get_issue(self, number: int, use_cache: bool = True) -> Issue | None:
        """Return issue ``number`` or ``None`` if it could not be fetched."""
        return (await self.lookup_issue(number, use_cache=use_cache)).issue

    async def lookup_issue_by_title(self, title: str) -> IssueLookup:
        logger.debug("lookup_issue_by_title(%s)", title)
        try:
            issue_list = await self.list_issues()
        except Exception as err:
            logger.warning("Error finding issue: %s", err, extra={"title": title})
            return IssueLookup.failed(err)
        issue = next((i for i in issue_list if i.title == title), None)
        if issue is None:
            return IssueLookup.missing()
        return await self.lookup_issue(issue.id)

    async def find_issue(self, title: str) -> Issue | None:
        """Return the first issue titled ``title``, or ``None``."""
        return (await self.lookup_issue_by_title(title)).issue
