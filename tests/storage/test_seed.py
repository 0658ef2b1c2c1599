"""Tests for demo data seeding."""

from boardroom.storage import MemoryStorage
from boardroom.storage.seed import seed_demo_data


async def test_seed_populates_every_kind(storage: MemoryStorage):
    """Seeding adds members, meetings, agenda, documents and actions."""
    await seed_demo_data(storage)

    assert await storage.members.count() == 3
    assert await storage.meetings.count() == 2
    assert await storage.agenda_items.count() == 3
    assert await storage.documents.count() == 1
    assert await storage.action_items.count() == 1


async def test_seeded_references_point_at_seeded_records(storage: MemoryStorage):
    """Seeded children reference the seeded meeting and member ids."""
    await seed_demo_data(storage)

    [action] = await storage.action_items.list_all()
    assert await storage.members.get(action.assignee_id) is not None
    assert await storage.meetings.get(action.meeting_id) is not None

    agenda = await storage.list_agenda_items_for_meeting(action.meeting_id)
    assert [item.order for item in agenda] == [0, 1, 2]
