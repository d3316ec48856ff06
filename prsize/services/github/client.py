"""Async GitHub API client using httpx."""

from logging import getLogger
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import SecretStr

from prsize.errors import RemoteRequestFailure

from .models import PullRequestStats

logger = getLogger(__name__)


class GitHubAPIClient:
    """Async GitHub API client for pull request and label endpoints."""

    def __init__(self, token: SecretStr, base_url: str = "https://api.github.com", timeout: float = 30.0) -> None:
        """Initialize GitHub API client.

        Args:
            token: GitHub token with pull request read and write access
            base_url: Base URL for GitHub API (default: https://api.github.com)
            timeout: Request timeout in seconds
        """
        self.token = token.get_secret_value()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubAPIClient":
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=httpx.Timeout(self.timeout, connect=10.0),
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        if self._client:
            await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: URL to request
            **kwargs: Additional arguments to pass to httpx request

        Returns:
            httpx.Response object

        Raises:
            RemoteRequestFailure: On any transport error or non-2xx response
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use async with context manager")

        logger.debug(f"{method} {url}")
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise RemoteRequestFailure(
                method, url, e.response.reason_phrase or "HTTP error", status_code=e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            raise RemoteRequestFailure(method, url, str(e) or type(e).__name__) from e

    def _issue_url(self, owner: str, repo: str, number: int) -> str:
        # Labels live on the issue backing a pull request
        return f"{self.base_url}/repos/{owner}/{repo}/issues/{number}"

    async def get_pull_request(self, owner: str, repo: str, number: int) -> dict[str, Any]:
        """Get a pull request.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            number: Pull request number

        Returns:
            Pull request data dictionary including additions, deletions and changed_files

        Raises:
            RemoteRequestFailure: If the request fails
        """
        response = await self._request("GET", f"{self.base_url}/repos/{owner}/{repo}/pulls/{number}")
        result: dict[str, Any] = response.json()
        return result

    async def get_pull_request_stats(self, owner: str, repo: str, number: int) -> PullRequestStats:
        """Get the changed-file and changed-line counts of a pull request."""
        data = await self.get_pull_request(owner, repo, number)
        return PullRequestStats.from_api(data, url=f"{self.base_url}/repos/{owner}/{repo}/pulls/{number}")

    async def add_labels(self, owner: str, repo: str, number: int, labels: list[str]) -> list[str]:
        """Add labels to a pull request.

        Adding a label that is already present is a no-op on GitHub's side.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            number: Pull request number
            labels: Label names to add

        Returns:
            Names of all labels on the pull request after the addition

        Raises:
            RemoteRequestFailure: If the request fails
        """
        response = await self._request(
            "POST",
            f"{self._issue_url(owner, repo, number)}/labels",
            json={"labels": labels},
        )
        data: list[dict[str, Any]] = response.json()
        return [label["name"] for label in data]

    async def remove_label(self, owner: str, repo: str, number: int, name: str) -> None:
        """Remove a single label from a pull request.

        Raises:
            RemoteRequestFailure: If the request fails
        """
        await self._request("DELETE", f"{self._issue_url(owner, repo, number)}/labels/{quote(name, safe='')}")
