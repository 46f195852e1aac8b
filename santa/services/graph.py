from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple

from santa.services.records import HistoryIndex, Participant, RelationType


class ImmediateFamilyRule(str, enum.Enum):
    # A giver with any immediate-family edge gets no recipients at all.
    ANY_EDGE = "any_edge"
    # Only pairs joined by an immediate-family edge (either direction) are excluded.
    TARGET_ONLY = "target_only"


@dataclass(frozen=True)
class CompatibilityGraph:
    """Directed graph of admissible giver -> recipient pairs.

    Nodes are dense indices into ``participants``; ``adjacency[i]`` lists the
    admissible recipients of participant ``i`` in input order.
    """

    participants: Tuple[Participant, ...]
    index_of: Mapping[int, int]
    adjacency: Tuple[Tuple[int, ...], ...]

    def __len__(self) -> int:
        return len(self.participants)

    def participant(self, index: int) -> Participant:
        return self.participants[index]

    def successors(self, index: int) -> Tuple[int, ...]:
        return self.adjacency[index]

    def has_edge(self, giver: int, recipient: int) -> bool:
        return recipient in self.adjacency[giver]

    def out_degree(self, index: int) -> int:
        return len(self.adjacency[index])

    def in_degrees(self) -> List[int]:
        degrees = [0] * len(self.participants)
        for successors in self.adjacency:
            for recipient in successors:
                degrees[recipient] += 1
        return degrees

    @property
    def edge_count(self) -> int:
        return sum(len(successors) for successors in self.adjacency)


def index_participants(participants: Sequence[Participant]) -> Dict[int, int]:
    index_of: Dict[int, int] = {}
    for index, participant in enumerate(participants):
        if participant.id in index_of:
            raise ValueError(f"Duplicate participant id {participant.id}")
        index_of[participant.id] = index
    return index_of


def is_admissible(
    giver: Participant,
    recipient: Participant,
    history: HistoryIndex,
    rule: ImmediateFamilyRule = ImmediateFamilyRule.ANY_EDGE,
) -> bool:
    if giver.id == recipient.id:
        return False
    if giver.family_id == recipient.family_id:
        return False
    if rule == ImmediateFamilyRule.ANY_EDGE:
        if giver.has_relation(RelationType.IMMEDIATE_FAMILY):
            return False
    elif giver.is_related_to(recipient.id, RelationType.IMMEDIATE_FAMILY) or recipient.is_related_to(
        giver.id, RelationType.IMMEDIATE_FAMILY
    ):
        return False
    return recipient.id not in history.get(giver.id, frozenset())


def build_compatibility_graph(
    participants: Sequence[Participant],
    history: HistoryIndex,
    rule: ImmediateFamilyRule = ImmediateFamilyRule.ANY_EDGE,
) -> CompatibilityGraph:
    ordered = tuple(participants)
    index_of = index_participants(ordered)
    adjacency = tuple(
        tuple(
            recipient_index
            for recipient_index, recipient in enumerate(ordered)
            if is_admissible(giver, recipient, history, rule)
        )
        for giver in ordered
    )
    return CompatibilityGraph(participants=ordered, index_of=index_of, adjacency=adjacency)
