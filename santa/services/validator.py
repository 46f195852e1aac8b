from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from santa.services.errors import AssignmentImpossibleError, InvalidParticipantsError
from santa.services.records import Participant


def _largest_family_size(participants: Sequence[Participant]) -> int:
    family_sizes = Counter(participant.family_id for participant in participants)
    return max(family_sizes.values(), default=0)


def validate_participants(participants: Sequence[Participant]) -> List[Participant]:
    """Reject participant sets that can never produce a valid assignment.

    The family check is only a necessary condition: members of the largest
    family must all give to someone outside it, so the rest of the group has
    to be at least as large. Relations and history can still make a set that
    passes here unsolvable.
    """
    if not participants:
        raise InvalidParticipantsError("No participants found")
    if len(participants) < 2:
        raise InvalidParticipantsError("Need at least 2 participants")

    largest = _largest_family_size(participants)
    if largest > len(participants) - largest:
        raise AssignmentImpossibleError(
            "Assignment impossible: largest family too big relative to participants"
        )

    return list(participants)
