"""Keep exactly one size label on a pull request."""

from collections.abc import Iterable
from logging import getLogger

from prsize.errors import InvalidSizeLabel

from .github.client import GitHubAPIClient
from .github.models import LabelChange
from .pr_size import SIZE_LABELS, is_size_label

logger = getLogger(__name__)


def stale_size_labels(current_labels: Iterable[str], desired_label: str) -> list[str]:
    """Return the size labels in current_labels other than desired_label, in size order."""
    current = set(current_labels)
    return [label for label in SIZE_LABELS if label != desired_label and label in current]


async def reconcile_size_label(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    number: int,
    desired_label: str,
) -> LabelChange:
    """Apply desired_label to a pull request and remove every other size label.

    The label is added first; the label list returned by that call decides what
    gets removed. Removals run one at a time and are not rolled back if a later
    one fails.

    Args:
        client: Open GitHub API client
        owner: Repository owner (user or organization)
        repo: Repository name
        number: Pull request number
        desired_label: Size label to apply

    Returns:
        LabelChange describing the added label, the removed labels and the final label set

    Raises:
        InvalidSizeLabel: If desired_label is not a size label (no request is made)
        RemoteRequestFailure: If adding or removing a label fails
    """
    if not is_size_label(desired_label):
        raise InvalidSizeLabel(desired_label)

    current_labels = await client.add_labels(owner, repo, number, [desired_label])
    logger.info(f"Added label {desired_label!r} to {owner}/{repo}#{number}")

    removed: list[str] = []
    for label in stale_size_labels(current_labels, desired_label):
        await client.remove_label(owner, repo, number, label)
        removed.append(label)
        logger.info(f"Removed stale label {label!r} from {owner}/{repo}#{number}")

    remaining = [label for label in current_labels if label not in removed]
    return LabelChange(added=desired_label, removed=removed, labels=remaining)
