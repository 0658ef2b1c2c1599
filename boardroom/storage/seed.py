"""Demo data for a freshly started portal.

Only loaded when ``SEED_DEMO_DATA`` is enabled; tests start empty.
"""

import structlog

from boardroom.models import (
    InsertActionItem,
    InsertAgendaItem,
    InsertBoardMember,
    InsertDocument,
    InsertMeeting,
)
from boardroom.storage.base import Storage

logger = structlog.get_logger()


async def seed_demo_data(storage: Storage) -> None:
    """Populate storage with a small example board."""
    chair = await storage.members.create(
        InsertBoardMember(
            name="Margaret Ellis",
            role="Chairperson",
            email="m.ellis@example.org",
        )
    )
    treasurer = await storage.members.create(
        InsertBoardMember(
            name="David Okafor",
            role="Treasurer",
            email="d.okafor@example.org",
            phone="+1 555 0142",
        )
    )
    await storage.members.create(
        InsertBoardMember(
            name="Priya Raman",
            role="Secretary",
            email="p.raman@example.org",
        )
    )

    meeting = await storage.meetings.create(
        InsertMeeting(
            title="Q3 Board Meeting",
            description="Quarterly review of operations and finances",
            date="2025-09-18",
            time="10:00",
            location="Main Boardroom",
        )
    )
    await storage.meetings.create(
        InsertMeeting(
            title="Annual General Meeting",
            date="2025-12-04",
            time="14:00",
            location="Conference Hall",
            meeting_type="annual",
        )
    )

    for order, (title, duration, presenter) in enumerate(
        [
            ("Approval of previous minutes", 10, chair.name),
            ("Financial report", 30, treasurer.name),
            ("Strategic plan update", 45, chair.name),
        ]
    ):
        await storage.agenda_items.create(
            InsertAgendaItem(
                meeting_id=meeting.id,
                title=title,
                duration=duration,
                order=order,
                presenter=presenter,
            )
        )

    await storage.documents.create(
        InsertDocument(
            title="Q2 Financial Statements",
            type="pdf",
            category="financial",
            uploaded_by=treasurer.name,
            uploaded_at="2025-07-30",
            size="1.2 MB",
            meeting_id=meeting.id,
        )
    )

    await storage.action_items.create(
        InsertActionItem(
            title="Circulate revised budget",
            assignee_id=treasurer.id,
            due_date="2025-09-30",
            priority="high",
            meeting_id=meeting.id,
        )
    )

    logger.info("demo_data_seeded", members=3, meetings=2)
