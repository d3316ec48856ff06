import pytest
from pydantic import SecretStr

from prsize.errors import RemoteRequestFailure
from prsize.services.github.client import GitHubAPIClient
from prsize.services.github.models import PullRequestStats

CONFIG_ENV_VARS = ("TOKEN", "REPO_OWNER", "REPO_NAME", "PR_NUMBER", "GITHUB_API_URL", "GITHUB_TIMEOUT", "DEBUG")


class FakeLabelClient:
    """In-memory stand-in for GitHubAPIClient that records every call."""

    def __init__(self, labels: list[str] | None = None, additions: int = 0, deletions: int = 0, changed_files: int = 0):
        self.labels = list(labels or [])
        self.pull_request = {"additions": additions, "deletions": deletions, "changed_files": changed_files}
        self.calls: list[tuple] = []
        self.fail_on_remove: set[str] = set()

    async def __aenter__(self) -> "FakeLabelClient":
        return self

    async def __aexit__(self, *args) -> None:
        return None

    async def get_pull_request_stats(self, owner: str, repo: str, number: int):
        self.calls.append(("get_pull_request_stats", owner, repo, number))
        return PullRequestStats.from_api(self.pull_request)

    async def add_labels(self, owner: str, repo: str, number: int, labels: list[str]) -> list[str]:
        self.calls.append(("add_labels", owner, repo, number, list(labels)))
        for label in labels:
            if label not in self.labels:
                self.labels.append(label)
        return list(self.labels)

    async def remove_label(self, owner: str, repo: str, number: int, name: str) -> None:
        self.calls.append(("remove_label", owner, repo, number, name))
        if name in self.fail_on_remove:
            raise RemoteRequestFailure("DELETE", f"labels/{name}", "Internal Server Error", status_code=500)
        self.labels.remove(name)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment (e.g. a CI runner) from leaking into settings."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Prevent loading from .env file
    monkeypatch.setattr("pydantic_settings.sources.DotEnvSettingsSource.__call__", lambda *args, **kwargs: {})


@pytest.fixture
def mock_client() -> GitHubAPIClient:
    """Create a test GitHub API client for mocking."""
    return GitHubAPIClient(token=SecretStr("test_token"))


@pytest.fixture
def fake_client() -> FakeLabelClient:
    """Create an in-memory label client."""
    return FakeLabelClient()
