from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PullRequestSettings(BaseSettings):
    """Identifies the pull request to label."""

    model_config = SettingsConfigDict(env_ignore_empty=True)

    repo_owner: str | None = Field(
        default=None,
        description="Owner (user or organization) of the repository",
    )
    repo_name: str | None = Field(
        default=None,
        description="Name of the repository",
    )
    pr_number: int | None = Field(
        default=None,
        description="Number of the pull request to label",
    )

    @field_validator("pr_number")
    @classmethod
    def validate_pr_number(cls, v: int | None) -> int | None:
        """Validate pull request number is positive."""
        if v is not None and v < 1:
            raise ValueError("Pull request number must be a positive integer")
        return v
