from santa.services.assignment import AssignmentStrategy, HamiltonianCycleStrategy
from santa.services.errors import (
    AssignmentError,
    AssignmentImpossibleError,
    InvalidParticipantsError,
    NoAssignmentsError,
)

__all__ = [
    "AssignmentError",
    "AssignmentImpossibleError",
    "AssignmentStrategy",
    "HamiltonianCycleStrategy",
    "InvalidParticipantsError",
    "NoAssignmentsError",
]
