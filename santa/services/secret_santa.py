from __future__ import annotations

import asyncio
from typing import List, Optional, Protocol, Sequence

from loguru import logger

from santa.services.assignment import AssignmentStrategy, HamiltonianCycleStrategy
from santa.services.records import Assignment, HistoryIndex, Participant, build_history_index
from santa.services.validator import validate_participants

HISTORY_WINDOW = 3


class AssignmentStore(Protocol):
    async def load_participants_with_relations(self) -> List[Participant]:
        ...

    async def load_assignments_in_year_range(self, start_year: int, end_year: int) -> List[Assignment]:
        ...

    async def save_assignments(self, assignments: Sequence[Assignment]) -> List[Assignment]:
        ...

    async def find_participant_by_id(self, participant_id: int) -> Optional[Participant]:
        ...


class SecretSantaService:
    """Runs one assignment request end to end.

    Each call loads fresh participants and history from the store; nothing is
    cached between calls. Two concurrent calls for the same year will both
    persist a full assignment set.
    """

    def __init__(self, store: AssignmentStore, strategy: Optional[AssignmentStrategy] = None) -> None:
        self.store = store
        self.strategy = strategy or HamiltonianCycleStrategy()

    async def load_history(self, year: int) -> HistoryIndex:
        history = await self.store.load_assignments_in_year_range(year - HISTORY_WINDOW, year - 1)
        return build_history_index(history)

    async def create_assignments(self, year: int) -> List[Assignment]:
        log = logger.bind(year=year)

        participants = await self.store.load_participants_with_relations()
        participants = validate_participants(participants)
        log.debug("Validated {count} participants", count=len(participants))

        history = await self.load_history(year)
        log.debug("Loaded history for {givers} givers", givers=len(history))

        assignments = self.strategy.generate_assignments(year, participants, history)

        saved = await self.store.save_assignments(assignments)
        result = await asyncio.gather(*(self._attach_names(assignment) for assignment in saved))
        log.info("Created {count} assignments", count=len(result))
        return list(result)

    async def _attach_names(self, assignment: Assignment) -> Assignment:
        giver = await self.store.find_participant_by_id(assignment.giver_id)
        recipient = await self.store.find_participant_by_id(assignment.recipient_id)
        if giver is None or recipient is None:
            logger.bind(assignment_id=assignment.id).warning("Assignment participant could not be resolved")
        return assignment.with_names(giver, recipient)
