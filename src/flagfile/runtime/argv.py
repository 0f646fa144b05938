from __future__ import annotations

"""Process integration for flag files.

`load_files` and `expand_argv` are pure: they return data and never touch
process state. `init` is the single boundary that rewrites ``sys.argv`` and
terminates the process when a flag file is malformed.
"""

import os
import sys
from pathlib import Path
from typing import Iterable, List, NoReturn, Optional, Sequence, Union

from flagfile.constants import ENV_FILES, EXIT_PARSE_ERROR
from flagfile.core.interfaces.logging import LoggerLikeProtocol
from flagfile.logging.helpers import get_logger
from flagfile.parsing.errors import FlagFileError
from flagfile.parsing.parser import FlagFileParser

PathLike = Union[str, Path]

logger = get_logger("runtime")


def default_files() -> List[str]:
    """Return the flag files listed in FLAGFILE_FILES (os.pathsep separated)."""
    raw = os.getenv(ENV_FILES, "")
    return [p for p in raw.split(os.pathsep) if p.strip()]


def load_files(
    names: Iterable[PathLike],
    *,
    skip_missing: bool = True,
    parser: Optional[FlagFileParser] = None,
    log: Optional[LoggerLikeProtocol] = None,
) -> List[str]:
    """Parse *names* in order and concatenate their flag arguments.

    Args:
        names: Flag files to read.
        skip_missing: Skip files that do not exist instead of raising.
        parser: Parser to use (a fresh one by default).
        log: Logger for skip notices.

    Returns:
        Flags of all processed files, in file-list order.

    Raises:
        ParseError: When a file is malformed or cannot be read.
        FileNotFoundError: For a missing file when ``skip_missing`` is False.
    """
    lg = log or logger
    p = parser or FlagFileParser()
    out: List[str] = []
    for name in names:
        try:
            args = p.parse_file(name)
        except FileNotFoundError:
            if not skip_missing:
                raise
            lg.debug("flag file %s not found, skipping", name)
            continue
        out.extend(args)
    return out


def expand_argv(names: Iterable[PathLike], argv: Sequence[str], **kwargs) -> List[str]:
    """Return *argv* with the flags from *names* inserted after the program name."""
    flags = load_files(names, **kwargs)
    if not argv:
        return flags
    return [argv[0], *flags, *argv[1:]]


def _fatal(msg: str, code: int = EXIT_PARSE_ERROR) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def init(*names: PathLike) -> None:
    """Prepend the flags from *names* to ``sys.argv[1:]`` in place.

    Without names, FLAGFILE_FILES is used. Missing files are skipped; any
    other failure is logged and the process exits with status 2.
    """
    files: Sequence[PathLike] = names or default_files()
    try:
        flags = load_files(files)
    except (FlagFileError, OSError) as exc:
        _fatal(str(exc))
    if flags:
        sys.argv[:] = [*sys.argv[:1], *flags, *sys.argv[1:]]
