from dataclasses import dataclass

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from prsize.errors import ConfigurationMissing

from .github import GitHubSettings
from .pull_request import PullRequestSettings

PROJECT_NAME = "prsize"


@dataclass(frozen=True)
class PullRequestTarget:
    """Fully resolved configuration for one labeling run."""

    token: SecretStr
    owner: str
    repo: str
    number: int

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}#{self.number}"


class Settings(GitHubSettings, PullRequestSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", env_ignore_empty=True)

    project_name: str = PROJECT_NAME
    debug: bool = False

    def require_target(self) -> PullRequestTarget:
        """Return the labeling target, or fail if any required value is unset.

        Raises:
            ConfigurationMissing: Naming every absent environment variable
        """
        token, owner, repo, number = self.token, self.repo_owner, self.repo_name, self.pr_number
        if token is None or owner is None or repo is None or number is None:
            required = {"TOKEN": token, "REPO_OWNER": owner, "REPO_NAME": repo, "PR_NUMBER": number}
            raise ConfigurationMissing([name for name, value in required.items() if value is None])

        return PullRequestTarget(token=token, owner=owner, repo=repo, number=number)
