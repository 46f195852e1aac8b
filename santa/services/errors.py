from __future__ import annotations


class AssignmentError(RuntimeError):
    code = "ASSIGNMENT_ERROR"


class InvalidParticipantsError(AssignmentError):
    code = "INVALID_PARTICIPANTS"


class AssignmentImpossibleError(AssignmentError):
    code = "ASSIGNMENT_IMPOSSIBLE"


class NoAssignmentsError(AssignmentError):
    code = "NO_ASSIGNMENTS"
