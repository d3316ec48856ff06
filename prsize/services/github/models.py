from dataclasses import dataclass, field
from typing import Any

from prsize.errors import RemoteRequestFailure


@dataclass
class PullRequestStats:
    """Change counts for a single pull request."""

    files_changed: int
    lines_changed: int  # additions + deletions
    additions: int = 0
    deletions: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any], url: str = "") -> "PullRequestStats":
        """Build stats from a GitHub pull request payload.

        Args:
            data: Response body of GET /repos/{owner}/{repo}/pulls/{number}
            url: Request URL, used in error messages

        Returns:
            PullRequestStats for the pull request

        Raises:
            RemoteRequestFailure: If the payload lacks the change counts
        """
        missing = [key for key in ("additions", "deletions", "changed_files") if data.get(key) is None]
        if missing:
            raise RemoteRequestFailure("GET", url, f"response missing fields: {', '.join(missing)}")

        additions = int(data["additions"])
        deletions = int(data["deletions"])
        return cls(
            files_changed=int(data["changed_files"]),
            lines_changed=additions + deletions,
            additions=additions,
            deletions=deletions,
        )


@dataclass
class LabelChange:
    """Outcome of reconciling the size label on a pull request."""

    added: str
    removed: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)  # Label names left on the pull request
