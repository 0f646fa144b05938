from __future__ import annotations
"""Flag-file source model.

A small value object carrying where a flag file came from. The parser uses
it for log messages and to tag `ParseError` with the file name; positions
live on the error itself, and the source never affects the produced flag
arguments.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union


@dataclass(frozen=True)
class FlagSource:
    """Represents the origin of a flag file.

    Attributes:
        path: Path or label of the source if known.
    """
    path: Optional[Union[Path, str]] = None

    @property
    def name(self) -> str:
        """File label used in error messages ('' for anonymous streams)."""
        return str(self.path) if self.path else ""

    def format(self) -> str:
        """Return a human-readable source label."""
        return self.name or "<stream>"

    @classmethod
    def of_stream(cls, stream: Any) -> "FlagSource":
        """Build a source from a stream's ``name`` attribute when it has one."""
        name = getattr(stream, "name", None)
        if isinstance(name, (str, Path)) and str(name):
            return cls(path=name)
        return cls()
