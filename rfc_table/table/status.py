"""Status labels recognised on RFC issues and how they are displayed."""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_STATUS = "status/unknown"
STATUS_PREFIX = "status/"


class StatusEntry(BaseModel):
    """A status label paired with its display string."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Label name, e.g. 'status/done'")
    display: str = Field(..., description="Emoji-prefixed text shown in the table")


class StatusRegistry:
    """Immutable, ordered mapping from status label to display string.

    Order is significant: it is the order groups are rendered in when no
    explicit status filter is given.
    """

    def __init__(self, entries: Iterable[StatusEntry]):
        self._entries = tuple(entries)
        self._display = {entry.label: entry.display for entry in self._entries}

        if len(self._display) != len(self._entries):
            raise ValueError("Status registry contains duplicate labels")
        if UNKNOWN_STATUS not in self._display:
            raise ValueError(f"Status registry must contain '{UNKNOWN_STATUS}'")

    @property
    def labels(self) -> tuple[str, ...]:
        """All keys in registry order, the unknown sentinel included."""
        return tuple(entry.label for entry in self._entries)

    @property
    def status_labels(self) -> frozenset[str]:
        """Keys that are real GitHub labels."""
        return frozenset(label for label in self._display if label != UNKNOWN_STATUS)

    def display(self, label: str) -> str:
        """Display string for a status key."""
        return self._display[label]

    def __contains__(self, label: object) -> bool:
        return label in self._display

    def __iter__(self) -> Iterator[StatusEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# Sorted by how soon an RFC will be delivered: work in progress first, then
# planning and approval stages, with finished and abandoned RFCs last.
DEFAULT_STATUS_REGISTRY = StatusRegistry(
    [
        StatusEntry(label=UNKNOWN_STATUS, display="❓unknown"),
        StatusEntry(label="status/implementing", display="👷 implementing"),
        StatusEntry(label="status/planning", display="📆 planning"),
        StatusEntry(label="status/approved", display="👍 approved"),
        StatusEntry(label="status/final-comment-period", display="⏰ final comments"),
        StatusEntry(label="status/api-approved", display="📐 API approved"),
        StatusEntry(label="status/review", display="✍️ review"),
        StatusEntry(label="status/proposed", display="💡 proposed"),
        StatusEntry(label="status/done", display="✅ done"),
        StatusEntry(label="status/stale", display="🤷 stale"),
        StatusEntry(label="status/rejected", display="👎 rejected"),
    ]
)


def normalize_status(value: str) -> str:
    """Prefix a status with ``status/`` unless it already has it.

    Example:
        >>> normalize_status("done")
        "status/done"
    """
    return value if value.startswith(STATUS_PREFIX) else f"{STATUS_PREFIX}{value}"
