"""
Cue sheet output model.
"""

from dataclasses import dataclass
from typing import List

from ..core.config import CUESHEET_CONFIG


@dataclass
class Cuesheet:
    """A generated cue sheet for a single medium."""
    name: str
    lines: List[str]

    @property
    def text(self) -> str:
        """Cue sheet contents, every line newline-terminated."""
        return "".join(f"{line}\n" for line in self.lines)

    @property
    def filename(self) -> str:
        return f"{self.name}{CUESHEET_CONFIG['EXTENSION']}"
