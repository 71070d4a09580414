"""Value types for the relationship graph — relations and half-edges.

A person is a bare integer ID and has no type of its own. A declared
relation is undirected; the graph stores it as two ``Neighbor`` records,
one per endpoint, carrying the same label.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict


# ── Dataclasses ───────────────────────────────────────────


@dataclass(frozen=True)
class Relation:
    """One declared relationship between two people."""
    person_a: int
    person_b: int
    relationship: str  # "sibling", "friend", "roommate", etc.

    def endpoints(self) -> tuple[int, int]:
        return (self.person_a, self.person_b)

    def mirrored(self) -> Relation:
        """Same relation seen from the other endpoint."""
        return Relation(self.person_b, self.person_a, self.relationship)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> Relation:
        return cls(
            person_a=int(d["person_a"]),
            person_b=int(d["person_b"]),
            relationship=str(d["relationship"]),
        )


@dataclass(frozen=True)
class Neighbor:
    """A half-edge: the far end of a relation and its label."""
    person_id: int
    relationship: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> Neighbor:
        return cls(**d)
