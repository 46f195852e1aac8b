from __future__ import annotations

from typing import List, Optional, Sequence

from santa.db import models, repo
from santa.db.session import get_session
from santa.services.records import Assignment, Participant, RelationEdge, RelationType


def to_participant(member: models.Member) -> Participant:
    return Participant(
        id=member.id,
        family_id=member.family_id,
        name=member.name,
        relations=tuple(
            RelationEdge(type=RelationType(edge.type), target_id=edge.target_member_id)
            for edge in member.relations
        ),
    )


def to_assignment(row: models.Assignment) -> Assignment:
    return Assignment(
        id=row.id,
        year=row.assignment_year,
        giver_id=row.giver_id,
        recipient_id=row.receiver_id,
    )


class SqlAssignmentStore:
    """``AssignmentStore`` backed by the SQLAlchemy session factory.

    Every call opens and commits its own session and hands back immutable
    records, so nothing returned here is bound to a session.
    """

    async def load_participants_with_relations(self) -> List[Participant]:
        with get_session() as session:
            return [to_participant(member) for member in repo.list_members_with_relations(session)]

    async def load_assignments_in_year_range(self, start_year: int, end_year: int) -> List[Assignment]:
        with get_session() as session:
            rows = repo.list_assignments_between(session, start_year, end_year)
            return [to_assignment(row) for row in rows]

    async def save_assignments(self, assignments: Sequence[Assignment]) -> List[Assignment]:
        with get_session() as session:
            rows = repo.create_assignments(
                session,
                ((item.year, item.giver_id, item.recipient_id) for item in assignments),
            )
            return [to_assignment(row) for row in rows]

    async def find_participant_by_id(self, participant_id: int) -> Optional[Participant]:
        with get_session() as session:
            member = repo.get_member_by_id(session, participant_id)
            return to_participant(member) if member else None
