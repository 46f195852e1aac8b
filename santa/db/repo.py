from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from santa.db.models import Assignment, Edge, Member
from santa.services.records import RelationType


def get_member_by_id(session, member_id: int) -> Optional[Member]:
    return session.scalar(
        select(Member).options(selectinload(Member.relations)).where(Member.id == member_id)
    )


def list_members_with_relations(session) -> List[Member]:
    return list(
        session.scalars(
            select(Member).options(selectinload(Member.relations)).order_by(Member.id)
        ).all()
    )


def add_member(session, family_id: int, name: str, member_id: Optional[int] = None) -> Member:
    member = Member(id=member_id, family_id=family_id, name=name)
    session.add(member)
    session.flush()
    return member


def add_relation(session, member_id: int, relation_type: RelationType, target_member_id: int) -> Edge:
    edge = Edge(member_id=member_id, type=relation_type, target_member_id=target_member_id)
    session.add(edge)
    session.flush()
    return edge


def list_assignments_between(session, start_year: int, end_year: int) -> List[Assignment]:
    return list(
        session.scalars(
            select(Assignment)
            .where(Assignment.assignment_year.between(start_year, end_year))
            .order_by(Assignment.assignment_year, Assignment.id)
        ).all()
    )


def create_assignments(session, rows: Iterable[tuple[int, int, int]]) -> List[Assignment]:
    assignments = [
        Assignment(assignment_year=year, giver_id=giver_id, receiver_id=receiver_id)
        for year, giver_id, receiver_id in rows
    ]
    session.add_all(assignments)
    session.flush()
    return assignments
