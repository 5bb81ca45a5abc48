"""Reduce an issue's labels to a single status."""

from collections.abc import Iterable

from .status import DEFAULT_STATUS_REGISTRY, UNKNOWN_STATUS, StatusRegistry


def classify(
    labels: Iterable[str], registry: StatusRegistry = DEFAULT_STATUS_REGISTRY
) -> str:
    """Determine the status of an issue from its label names.

    Args:
        labels: Names of the labels attached to the issue
        registry: Recognised statuses

    Returns:
        The single recognised status label, or ``UNKNOWN_STATUS`` when the
        issue carries none or several conflicting ones.
    """
    matches = set(labels) & registry.status_labels
    if len(matches) != 1:
        return UNKNOWN_STATUS
    return matches.pop()
