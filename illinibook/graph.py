"""Relationship graph — connectivity queries between people.

Provides breadth-first queries over an undirected, labelled multigraph:
whether two people are related, how far apart they are, who sits exactly
N hops away, and how many disjoint groups the graph splits into.

The graph is built once in ``__init__`` and never mutated afterwards, so
every query is a read-only traversal and an instance can be shared freely.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from loguru import logger

from illinibook.models import Neighbor, Relation

NO_PATH = -1

EdgeFilter = Callable[[str], bool]


def _accept_all(relationship: str) -> bool:
    return True


def _label_equals(relationship: str) -> EdgeFilter:
    return lambda label: label == relationship


def _coerce_relation(raw: Any) -> Relation | None:
    """Turn a loader triple into a Relation, or None if it is malformed."""
    if isinstance(raw, Relation):
        raw = (raw.person_a, raw.person_b, raw.relationship)
    elif isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        return None
    if len(raw) != 3:
        return None
    person_a, person_b, relationship = raw
    try:
        return Relation(int(person_a), int(person_b), str(relationship))
    except (TypeError, ValueError):
        return None


class RelationshipGraph:
    """People keyed by integer ID, joined by symmetric labelled relations.

    Each relation is stored as two half-edges (A -> B and B -> A) with the
    same label. Parallel relations between the same pair are kept as
    separate half-edges. People from the explicit list with no relations
    still get an (empty) adjacency entry.

    Usage:
        graph = RelationshipGraph([1, 2, 3, 4], [(1, 2, "sibling"), (2, 3, "friend")])
        graph.get_related(1, 3)            # 2
        graph.count_groups("sibling")      # 3
    """

    def __init__(
        self,
        people: Iterable[int],
        relations: Iterable[Relation | Sequence[Any]],
    ) -> None:
        self._people: tuple[int, ...] = tuple(dict.fromkeys(people))
        self._relations: list[Relation] = []
        self._adjacency: dict[int, list[Neighbor]] = {
            person: [] for person in self._people
        }

        skipped = 0
        for raw in relations:
            relation = _coerce_relation(raw)
            if relation is None:
                skipped += 1
                logger.debug(f"Skipping malformed relation: {raw!r}")
                continue
            self._add_relation(relation)

        logger.info(
            f"Relationship graph built: {len(self._adjacency)} people, "
            f"{len(self._relations)} relations"
            + (f", {skipped} skipped" if skipped else "")
        )

    def _add_relation(self, relation: Relation) -> None:
        self._relations.append(relation)
        for half in (relation, relation.mirrored()):
            self._adjacency.setdefault(half.person_a, []).append(
                Neighbor(half.person_b, half.relationship)
            )

    # ── Accessors ─────────────────────────────────────────

    @property
    def people(self) -> tuple[int, ...]:
        """The explicit person list, first occurrence order, no repeats."""
        return self._people

    @property
    def edge_count(self) -> int:
        """Number of declared relations (not half-edges)."""
        return len(self._relations)

    def persons(self) -> list[int]:
        """Every known person: the explicit list plus all relation endpoints."""
        return list(self._adjacency)

    def neighbors(self, person_id: int) -> list[Neighbor]:
        """Half-edges leaving a person, in declaration order."""
        return list(self._adjacency.get(person_id, ()))

    def relationships(self) -> set[str]:
        """All relationship labels in use."""
        return {r.relationship for r in self._relations}

    def __contains__(self, person_id: object) -> bool:
        return person_id in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    # ── Pairwise queries ──────────────────────────────────

    def are_related(
        self, uin_1: int, uin_2: int, relationship: str | None = None
    ) -> bool:
        """True if a path joins the two people.

        With ``relationship``, only relations carrying that label count.
        A person is always related to themself, even when unknown.
        """
        return self.get_related(uin_1, uin_2, relationship) != NO_PATH

    def get_related(
        self, uin_1: int, uin_2: int, relationship: str | None = None
    ) -> int:
        """Length of the shortest path between two people (BFS).

        Returns 0 for a person and themself (known or not), and ``NO_PATH``
        if either person is unknown or no path exists under the filter.
        """
        if uin_1 == uin_2:
            return 0
        if uin_1 not in self._adjacency or uin_2 not in self._adjacency:
            return NO_PATH

        accept = _accept_all if relationship is None else _label_equals(relationship)

        visited = {uin_1}
        queue: deque[tuple[int, int]] = deque([(uin_1, 0)])

        while queue:
            current, depth = queue.popleft()
            for edge in self._adjacency[current]:
                if not accept(edge.relationship):
                    continue
                if edge.person_id == uin_2:
                    return depth + 1
                if edge.person_id not in visited:
                    visited.add(edge.person_id)
                    queue.append((edge.person_id, depth + 1))

        return NO_PATH

    # ── Neighbourhood queries ─────────────────────────────

    def get_steps(self, uin: int, n: int) -> list[int]:
        """People whose shortest distance from ``uin`` is exactly ``n``.

        Considers every relationship label. Results come back in BFS
        discovery order, without duplicates. Unknown people and negative
        ``n`` give an empty list.
        """
        if uin not in self._adjacency or n < 0:
            return []
        if n == 0:
            return [uin]

        result: list[int] = []
        visited = {uin}
        queue: deque[tuple[int, int]] = deque([(uin, 0)])

        while queue:
            current, depth = queue.popleft()
            # Nodes at depth n are leaves of the search
            if depth == n:
                result.append(current)
                continue
            for edge in self._adjacency[current]:
                if edge.person_id not in visited:
                    visited.add(edge.person_id)
                    queue.append((edge.person_id, depth + 1))

        return result

    # ── Group queries ─────────────────────────────────────

    def count_groups(self, relationships: str | Iterable[str] | None = None) -> int:
        """Number of connected components.

        ``None`` counts over every relation and every known person. A single
        label or a collection of labels restricts edges to those labels and
        seeds groups from the explicit person list only, so a listed person
        with no matching relation is a group of one.
        """
        return len(self.groups(relationships))

    def groups(
        self, relationships: str | Iterable[str] | None = None
    ) -> list[set[int]]:
        """The connected components themselves, same rules as count_groups."""
        if relationships is None:
            return self._components(self.persons(), self._full_view())

        if isinstance(relationships, str):
            accept: EdgeFilter = _label_equals(relationships)
        else:
            accept = frozenset(relationships).__contains__
        return self._components(self._people, self._filtered_view(accept))

    def _full_view(self) -> dict[int, list[int]]:
        return {
            person: [edge.person_id for edge in edges]
            for person, edges in self._adjacency.items()
        }

    def _filtered_view(self, accept: EdgeFilter) -> dict[int, list[int]]:
        """Adjacency restricted to accepted labels, mirrored both ways."""
        view: dict[int, list[int]] = {}
        for relation in self._relations:
            if not accept(relation.relationship):
                continue
            for half in (relation, relation.mirrored()):
                view.setdefault(half.person_a, []).append(half.person_b)
        return view

    @staticmethod
    def _components(
        seeds: Iterable[int], view: dict[int, list[int]]
    ) -> list[set[int]]:
        visited: set[int] = set()
        components: list[set[int]] = []

        for seed in seeds:
            if seed in visited:
                continue
            visited.add(seed)
            group = {seed}
            queue: deque[int] = deque([seed])

            while queue:
                current = queue.popleft()
                for neighbor in view.get(current, ()):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        group.add(neighbor)
                        queue.append(neighbor)

            components.append(group)

        return components
