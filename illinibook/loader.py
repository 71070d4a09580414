"""Loading a relationship book from its two text files.

The people file holds one integer ID per line. The relations file holds
one ``person_a,person_b,relationship`` triple per line. Blank lines are
ignored and malformed lines are skipped with a warning rather than
failing the whole load.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from illinibook.config import BookConfig
from illinibook.graph import RelationshipGraph
from illinibook.models import Relation


class BookLoadError(Exception):
    """Raised when one of the input files cannot be read."""


def parse_people(lines: Iterable[str]) -> list[int]:
    """Parse person IDs, one per non-blank line."""
    people: list[int] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            people.append(int(line))
        except ValueError:
            logger.warning(f"People line {lineno}: not an integer ID: {line!r}")
    return people


def parse_relations(lines: Iterable[str], delimiter: str = ",") -> list[Relation]:
    """Parse relation triples, skipping lines without exactly three fields."""
    relations: list[Relation] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue

        parts = line.split(delimiter)
        if len(parts) != 3:
            logger.warning(
                f"Relations line {lineno}: expected 3 fields, got {len(parts)}: {line!r}"
            )
            continue

        uin_a, uin_b, relationship = (p.strip() for p in parts)
        try:
            relations.append(Relation(int(uin_a), int(uin_b), relationship))
        except ValueError:
            logger.warning(f"Relations line {lineno}: bad person ID: {line!r}")
    return relations


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise BookLoadError(f"cannot read {path}: {e}") from e


def load_book(config: BookConfig) -> tuple[list[int], list[Relation]]:
    """Read both files named by ``config``.

    Returns:
        (people, relations) ready to hand to RelationshipGraph.

    Raises:
        BookLoadError: if either file is missing or unreadable.
    """
    people = parse_people(_read_lines(config.people_path))
    relations = parse_relations(
        _read_lines(config.relations_path), config.delimiter
    )
    logger.debug(
        f"Loaded {len(people)} people from {config.people_path}, "
        f"{len(relations)} relations from {config.relations_path}"
    )
    return people, relations


def load_graph(config: BookConfig) -> RelationshipGraph:
    """Read both files and build the graph."""
    people, relations = load_book(config)
    return RelationshipGraph(people, relations)
