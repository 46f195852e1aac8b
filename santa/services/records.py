from __future__ import annotations

import enum
from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Set, Tuple


class RelationType(str, enum.Enum):
    IMMEDIATE_FAMILY = "immediate_family"
    EXTENDED_FAMILY = "extended_family"


@dataclass(frozen=True)
class RelationEdge:
    type: RelationType
    target_id: int


@dataclass(frozen=True)
class Participant:
    id: int
    family_id: int
    name: str
    relations: Tuple[RelationEdge, ...] = ()

    def has_relation(self, relation_type: RelationType) -> bool:
        return any(edge.type == relation_type for edge in self.relations)

    def is_related_to(self, other_id: int, relation_type: RelationType) -> bool:
        return any(
            edge.type == relation_type and edge.target_id == other_id for edge in self.relations
        )


@dataclass(frozen=True)
class Assignment:
    year: int
    giver_id: int
    recipient_id: int
    id: Optional[int] = None
    giver_name: Optional[str] = None
    recipient_name: Optional[str] = None

    def with_names(
        self,
        giver: Optional[Participant],
        recipient: Optional[Participant],
    ) -> "Assignment":
        return replace(
            self,
            giver_name=giver.name if giver else None,
            recipient_name=recipient.name if recipient else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "assignmentYear": self.year,
            "santaId": self.giver_id,
            "santaName": self.giver_name,
            "recipientId": self.recipient_id,
            "recipientName": self.recipient_name,
        }


# Giver id -> recipients that giver had within the history window.
HistoryIndex = Mapping[int, FrozenSet[int]]


def build_history_index(assignments: Iterable[Assignment]) -> HistoryIndex:
    grouped: Dict[int, Set[int]] = defaultdict(set)
    for assignment in assignments:
        grouped[assignment.giver_id].add(assignment.recipient_id)
    return {giver_id: frozenset(recipients) for giver_id, recipients in grouped.items()}
