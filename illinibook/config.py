"""Where the people and relations files live and how they are split."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PEOPLE_FILENAME = "people.txt"
RELATIONS_FILENAME = "relations.txt"


@dataclass
class BookConfig:
    """Input locations for one relationship book.

    ``people_path`` holds one person ID per line. ``relations_path`` holds
    one ``person_a<delim>person_b<delim>relationship`` triple per line.
    """

    people_path: Path
    relations_path: Path
    delimiter: str = ","

    def __post_init__(self) -> None:
        self.people_path = Path(self.people_path)
        self.relations_path = Path(self.relations_path)
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")

    def to_dict(self) -> dict:
        return {
            "people_path": str(self.people_path),
            "relations_path": str(self.relations_path),
            "delimiter": self.delimiter,
        }

    @classmethod
    def from_dict(cls, d: dict) -> BookConfig:
        return cls(
            people_path=Path(d["people_path"]),
            relations_path=Path(d["relations_path"]),
            delimiter=d.get("delimiter", ","),
        )

    @classmethod
    def from_dir(cls, directory: Path | str, delimiter: str = ",") -> BookConfig:
        """Config for ``people.txt`` and ``relations.txt`` inside a directory."""
        directory = Path(directory)
        return cls(
            people_path=directory / PEOPLE_FILENAME,
            relations_path=directory / RELATIONS_FILENAME,
            delimiter=delimiter,
        )
