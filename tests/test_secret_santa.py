import asyncio
from dataclasses import replace

import pytest

from santa.services.errors import AssignmentImpossibleError, InvalidParticipantsError
from santa.services.records import Assignment, Participant
from santa.services.secret_santa import HISTORY_WINDOW, SecretSantaService


class FakeStore:
    def __init__(self, participants, assignments=None):
        self.participants = list(participants)
        self.assignments = list(assignments or [])
        self.history_requests = []
        self.saved_batches = []

    async def load_participants_with_relations(self):
        return list(self.participants)

    async def load_assignments_in_year_range(self, start_year, end_year):
        self.history_requests.append((start_year, end_year))
        return [a for a in self.assignments if start_year <= a.year <= end_year]

    async def save_assignments(self, assignments):
        saved = [
            replace(assignment, id=len(self.assignments) + offset + 1)
            for offset, assignment in enumerate(assignments)
        ]
        self.assignments.extend(saved)
        self.saved_batches.append(saved)
        return saved

    async def find_participant_by_id(self, participant_id):
        return next((p for p in self.participants if p.id == participant_id), None)


class RecordingStrategy:
    def __init__(self):
        self.calls = []

    def generate_assignments(self, year, participants, history):
        self.calls.append((year, participants, history))
        ids = [participant.id for participant in participants]
        return [
            Assignment(year=year, giver_id=giver, recipient_id=ids[(i + 1) % len(ids)])
            for i, giver in enumerate(ids)
        ]


def three_families():
    return [
        Participant(1, 1, "A"),
        Participant(2, 1, "B"),
        Participant(3, 2, "C"),
        Participant(4, 2, "D"),
        Participant(5, 3, "E"),
        Participant(6, 3, "F"),
    ]


def test_no_participants_fails_before_history():
    store = FakeStore([])
    with pytest.raises(InvalidParticipantsError):
        asyncio.run(SecretSantaService(store).create_assignments(2024))
    assert store.history_requests == []


def test_single_family_fails_before_graph():
    store = FakeStore([Participant(1, 1, "A"), Participant(2, 1, "B"), Participant(3, 1, "C")])
    strategy = RecordingStrategy()
    with pytest.raises(AssignmentImpossibleError):
        asyncio.run(SecretSantaService(store, strategy).create_assignments(2024))
    assert strategy.calls == []
    assert store.saved_batches == []


def test_creates_named_assignments():
    store = FakeStore(three_families())
    result = asyncio.run(SecretSantaService(store).create_assignments(2024))

    assert len(result) == 6
    assert store.history_requests == [(2024 - HISTORY_WINDOW, 2023)]
    assert [a.id for a in result] == [1, 2, 3, 4, 5, 6]
    names = {p.id: p.name for p in three_families()}
    for assignment in result:
        assert assignment.year == 2024
        assert assignment.giver_name == names[assignment.giver_id]
        assert assignment.recipient_name == names[assignment.recipient_id]


def test_history_window_excludes_older_years():
    old = Assignment(year=2020, giver_id=1, recipient_id=3)
    recent = Assignment(year=2023, giver_id=1, recipient_id=4)
    store = FakeStore(three_families(), [old, recent])
    strategy = RecordingStrategy()

    asyncio.run(SecretSantaService(store, strategy).create_assignments(2024))

    _, _, history = strategy.calls[0]
    assert history == {1: frozenset({4})}


def test_consecutive_years_never_repeat_within_window():
    store = FakeStore(three_families())
    service = SecretSantaService(store)

    for year in range(2024, 2028):
        asyncio.run(service.create_assignments(year))

    pairs_by_year = {}
    for assignment in store.assignments:
        pairs_by_year.setdefault(assignment.year, set()).add(
            (assignment.giver_id, assignment.recipient_id)
        )
    assert sorted(pairs_by_year) == [2024, 2025, 2026, 2027]
    for year in range(2025, 2028):
        for previous_year in range(year - HISTORY_WINDOW, year):
            assert not pairs_by_year[year] & pairs_by_year.get(previous_year, set())


def test_custom_strategy_is_used():
    store = FakeStore(three_families())
    strategy = RecordingStrategy()
    result = asyncio.run(SecretSantaService(store, strategy).create_assignments(2024))
    assert len(strategy.calls) == 1
    assert [(a.giver_id, a.recipient_id) for a in result][0] == (1, 2)


def test_store_failure_propagates():
    class BrokenStore(FakeStore):
        async def save_assignments(self, assignments):
            raise RuntimeError("database unavailable")

    with pytest.raises(RuntimeError, match="database unavailable"):
        asyncio.run(SecretSantaService(BrokenStore(three_families())).create_assignments(2024))


def test_unresolved_participant_keeps_empty_name():
    class ForgetfulStore(FakeStore):
        async def find_participant_by_id(self, participant_id):
            if participant_id == 1:
                return None
            return await super().find_participant_by_id(participant_id)

    result = asyncio.run(SecretSantaService(ForgetfulStore(three_families())).create_assignments(2024))
    given_by_first = next(a for a in result if a.giver_id == 1)
    assert given_by_first.giver_name is None
    assert given_by_first.recipient_name is not None
