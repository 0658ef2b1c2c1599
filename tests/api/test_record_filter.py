"""Tests for list filtering criteria."""

from boardroom.api.filters import (
    RecordFilter,
    action_item_filter,
    document_filter,
    member_filter,
    no_filter,
)
from boardroom.models import ActionItem, BoardMember, Document, Meeting


def member(name: str, email: str, role: str) -> BoardMember:
    return BoardMember(id=name.lower(), name=name, email=email, role=role)


def document(title: str, category: str) -> Document:
    return Document(
        id=title.lower(),
        title=title,
        type="pdf",
        category=category,
        uploaded_by="Priya",
        uploaded_at="2025-01-10",
        size="1 MB",
    )


class TestRecordFilter:
    """Tests for RecordFilter.matches."""

    def test_empty_filter_matches_everything(self):
        """No criteria means every record passes."""
        meeting = Meeting(id="m1", title="AGM", date="2025-12-04", time="14:00")
        assert no_filter().matches(meeting)

    def test_search_is_case_insensitive_substring(self):
        """Search matches any part of the field, ignoring case."""
        criteria = RecordFilter(search="BOARD", search_fields=("title",))
        assert criteria.matches(
            Meeting(id="m1", title="Q1 board meeting", date="2025-03-14", time="10:00")
        )
        assert not criteria.matches(
            Meeting(id="m2", title="Committee", date="2025-03-14", time="10:00")
        )

    def test_empty_search_matches(self):
        """An empty search string does not filter."""
        criteria = RecordFilter(search="", search_fields=("title",))
        assert criteria.matches(
            Meeting(id="m1", title="AGM", date="2025-12-04", time="14:00")
        )

    def test_all_bypasses_exact_filter(self):
        """The value 'all' disables a filter."""
        criteria = RecordFilter(exact={"status": "all"})
        assert criteria.matches(
            Meeting(
                id="m1", title="AGM", date="2025-12-04", time="14:00", status="completed"
            )
        )

    def test_exact_filter_is_case_sensitive_by_default(self):
        """Exact filters compare values as-is."""
        criteria = RecordFilter(exact={"status": "Scheduled"})
        assert not criteria.matches(
            Meeting(id="m1", title="AGM", date="2025-12-04", time="14:00")
        )

    def test_apply_preserves_order(self):
        """apply keeps matching records in their original order."""
        records = [
            ActionItem(id="a", title="Alpha", due_date="2025-01-01"),
            ActionItem(id="b", title="Beta", due_date="2025-01-01", priority="high"),
            ActionItem(id="c", title="Gamma", due_date="2025-01-01"),
        ]
        criteria = RecordFilter(exact={"priority": "medium"})
        assert [r.id for r in criteria.apply(records)] == ["a", "c"]


class TestKindFilters:
    """Tests for the per-kind filter factories."""

    def test_member_search_covers_name_and_email(self):
        """Member search matches the name or the email."""
        jane = member("Jane Doe", "jane@x.com", "Director")
        sam = member("Sam Lee", "treasury@x.com", "Treasurer")

        assert member_filter(search="jane", role=None).apply([jane, sam]) == [jane]
        assert member_filter(search="TREASURY", role=None).apply([jane, sam]) == [sam]

    def test_member_role_filter(self):
        """Role must match exactly."""
        jane = member("Jane Doe", "jane@x.com", "Director")
        sam = member("Sam Lee", "sam@x.com", "Treasurer")

        assert member_filter(search=None, role="Treasurer").apply([jane, sam]) == [sam]

    def test_document_category_ignores_case(self):
        """Document category compares case-insensitively."""
        minutes = document("March minutes", "Minutes")
        budget = document("Budget", "financial")

        criteria = document_filter(search=None, category="minutes")
        assert criteria.apply([minutes, budget]) == [minutes]

    def test_action_item_combines_all_criteria(self):
        """Search, status and priority must all match."""
        hit = ActionItem(id="1", title="Draft policy", due_date="2025-01-01")
        wrong_priority = ActionItem(
            id="2", title="Draft letter", due_date="2025-01-01", priority="low"
        )
        wrong_title = ActionItem(id="3", title="Call auditor", due_date="2025-01-01")

        criteria = action_item_filter(search="draft", status="pending", priority="medium")
        assert criteria.apply([hit, wrong_priority, wrong_title]) == [hit]
