from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Sequence

from loguru import logger

from santa.services.errors import AssignmentImpossibleError
from santa.services.graph import (
    CompatibilityGraph,
    ImmediateFamilyRule,
    build_compatibility_graph,
)
from santa.services.records import Assignment, HistoryIndex, Participant


class AssignmentStrategy(Protocol):
    def generate_assignments(
        self,
        year: int,
        participants: Sequence[Participant],
        history: HistoryIndex,
    ) -> List[Assignment]:
        ...


class _CycleSearch:
    """Depth-first search state owned by a single ``find_hamiltonian_cycle`` call.

    ``path`` and ``visited`` are only changed through ``_push``/``_pop`` so every
    extension is undone before the next sibling is tried.
    """

    def __init__(self, graph: CompatibilityGraph) -> None:
        self.graph = graph
        self.size = len(graph)
        self.path: List[int] = []
        self.visited = [False] * self.size

    def _push(self, node: int) -> None:
        self.path.append(node)
        self.visited[node] = True

    def _pop(self) -> None:
        node = self.path.pop()
        self.visited[node] = False

    def _closes(self) -> bool:
        return self.graph.has_edge(self.path[-1], self.path[0])

    def run(self, start: int = 0) -> Optional[List[int]]:
        # pending[k] holds the untried successors of path[k].
        pending: List[Iterator[int]] = []
        self._push(start)
        pending.append(iter(self.graph.successors(start)))

        while pending:
            if len(self.path) == self.size:
                if self._closes():
                    return list(self.path)
                self._pop()
                pending.pop()
                continue

            for candidate in pending[-1]:
                if not self.visited[candidate]:
                    self._push(candidate)
                    pending.append(iter(self.graph.successors(candidate)))
                    break
            else:
                self._pop()
                pending.pop()
        return None


def _has_dead_end(graph: CompatibilityGraph) -> bool:
    if any(graph.out_degree(index) == 0 for index in range(len(graph))):
        return True
    return any(degree == 0 for degree in graph.in_degrees())


def find_hamiltonian_cycle(graph: CompatibilityGraph) -> Optional[List[int]]:
    """Return the first Hamiltonian cycle reachable from participant 0, or None.

    Successors are tried in adjacency order, so for a given graph the result is
    always the same cycle. The returned list holds node indices; the closing
    edge from the last node back to the first is implied.

    Worst case is exponential in the number of participants. Groups are
    expected to be tens of people, and constraint edges keep the graph sparse.
    """
    if len(graph) < 2 or _has_dead_end(graph):
        return None
    return _CycleSearch(graph).run()


def assignments_from_cycle(year: int, cycle: Sequence[Participant]) -> List[Assignment]:
    return [
        Assignment(
            year=year,
            giver_id=giver.id,
            recipient_id=cycle[(position + 1) % len(cycle)].id,
        )
        for position, giver in enumerate(cycle)
    ]


class HamiltonianCycleStrategy:
    name = "HAMILTONIAN_CYCLE"

    def __init__(self, rule: ImmediateFamilyRule = ImmediateFamilyRule.ANY_EDGE) -> None:
        self.rule = rule

    def generate_assignments(
        self,
        year: int,
        participants: Sequence[Participant],
        history: HistoryIndex,
    ) -> List[Assignment]:
        graph = build_compatibility_graph(participants, history, self.rule)
        log = logger.bind(year=year, participants=len(graph), edges=graph.edge_count)
        log.debug("Compatibility graph built")

        cycle = find_hamiltonian_cycle(graph)
        if cycle is None:
            log.warning("No Hamiltonian cycle found")
            raise AssignmentImpossibleError(
                "Failed to generate valid assignments due to family constraints"
            )

        log.info("Successfully generated assignments using {strategy} strategy", strategy=self.name)
        return assignments_from_cycle(year, [graph.participant(index) for index in cycle])
