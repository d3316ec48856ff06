from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """GitHub API configuration and authentication settings."""

    model_config = SettingsConfigDict(env_ignore_empty=True)

    # Read from TOKEN, as provided by the workflow running the labeler
    token: SecretStr | None = Field(
        default=None,
        description="GitHub token with write access to pull requests",
    )

    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL for the GitHub REST API (set automatically inside GitHub Actions)",
    )

    github_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for each GitHub API request",
    )

    @field_validator("github_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate request timeout is positive."""
        if v <= 0:
            raise ValueError("GitHub timeout must be greater than zero")
        return v
