"""Tests for status classification."""

from rfc_table.table.classifier import classify
from rfc_table.table.status import UNKNOWN_STATUS, StatusEntry, StatusRegistry


class TestClassify:
    """Test classify function."""

    def test_single_status_label(self) -> None:
        """Test a single recognised label is the status."""
        assert classify({"status/done", "bug", "effort/small"}) == "status/done"

    def test_no_status_label(self) -> None:
        """Test issues without a status label are unknown."""
        assert classify({"bug"}) == UNKNOWN_STATUS
        assert classify(set()) == UNKNOWN_STATUS

    def test_conflicting_status_labels(self) -> None:
        """Test several status labels are unknown."""
        assert classify({"status/done", "status/proposed"}) == UNKNOWN_STATUS

    def test_sentinel_label_is_not_recognised(self) -> None:
        """Test a literal unknown label does not count as a status."""
        assert classify({UNKNOWN_STATUS, "status/review"}) == "status/review"

    def test_accepts_any_iterable(self) -> None:
        """Test label names can be given as a list."""
        assert classify(["status/stale", "status/stale"]) == "status/stale"

    def test_custom_registry(self) -> None:
        """Test classification against an injected registry."""
        registry = StatusRegistry(
            [
                StatusEntry(label=UNKNOWN_STATUS, display="?"),
                StatusEntry(label="stage/alpha", display="alpha"),
            ]
        )
        assert classify({"stage/alpha"}, registry) == "stage/alpha"
        assert classify({"status/done"}, registry) == UNKNOWN_STATUS
