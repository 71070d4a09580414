"""illinibook — a social graph of people joined by typed relationships.

People are integer IDs. Relationships are symmetric and labelled
("sibling", "friend", ...). The graph is built once from a person list
and a list of relation triples, then answers breadth-first queries:

- are_related / get_related — reachability and shortest distance,
  optionally through one relationship label
- get_steps — everyone exactly N hops away
- count_groups — connected components, optionally restricted to one
  label or a set of labels

Input files are read by the loader module; the graph itself never
touches the filesystem.
"""

from __future__ import annotations

from illinibook.config import BookConfig
from illinibook.graph import NO_PATH, RelationshipGraph
from illinibook.loader import BookLoadError, load_book, load_graph
from illinibook.models import Neighbor, Relation

__all__ = [
    "BookConfig",
    "BookLoadError",
    "NO_PATH",
    "Neighbor",
    "Relation",
    "RelationshipGraph",
    "load_book",
    "load_graph",
]
