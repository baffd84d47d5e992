"""Fake collaborators for resolver tests."""

from dataclasses import dataclass
from pathlib import Path


class CountingTemplateRegistry:
    """Template registry over a mutable extension set that records queries."""

    def __init__(self, extensions):
        self.extensions = set(extensions)
        self.queries: list[str] = []

    def is_template_extension(self, ext: str) -> bool:
        self.queries.append(ext)
        return ext in self.extensions


@dataclass
class FakeResource:
    """Site map resource with an optional backing file."""

    path: str
    source_file: Path | None = None

    @classmethod
    def backed_by(cls, source_file: str | Path) -> "FakeResource":
        source = Path(source_file)
        return cls(path=source.name, source_file=source)
