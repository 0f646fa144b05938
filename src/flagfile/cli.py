from __future__ import annotations

import argparse
import json
import logging
import os
import shlex
import sys
from typing import List, NoReturn, Optional, Sequence

from flagfile.constants import ENV_JSON_LOGS, EXIT_PARSE_ERROR
from flagfile.logging.factory import DefaultLoggerFactory
from flagfile.logging.helpers import get_logger
from flagfile.parsing.errors import FlagFileError
from flagfile.rendering.renderer import render_flags
from flagfile.runtime.argv import default_files, load_files

logger = get_logger('flagfile')

FORMATS = ('lines', 'json', 'shell', 'file')


def _configure_logging(enable_json: bool, *, verbose: bool = False) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    level = logging.DEBUG if verbose else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('flagfile')


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='flagfile',
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            'flagfile – turn flag files into command-line flags\n'
            'Each line "name value ..." becomes "-name=value ...". Files are read '
            'in order; missing files are skipped unless --strict is given.'
        ),
    )
    p.add_argument(
        'files',
        metavar='FILE',
        nargs='*',
        help='Flag files to read. Defaults to the FLAGFILE_FILES list.',
    )
    p.add_argument(
        '-f',
        '--format',
        choices=FORMATS,
        default='lines',
        dest='fmt',
        help=(
            'Output format:\n'
            '  lines  one flag per line (default)\n'
            '  json   JSON array\n'
            '  shell  shell-quoted, single line\n'
            '  file   canonical flag-file text'
        ),
    )
    p.add_argument(
        '--strict',
        action='store_true',
        help='Treat a missing flag file as an error.',
    )
    p.add_argument(
        '--json-logs',
        action='store_true',
        dest='json_logs',
        help='Emit logs as JSON (also enabled by FLAGFILE_JSON_LOGS=1).',
    )
    p.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Enable debug logging.',
    )
    return p


def format_flags(flags: List[str], fmt: str) -> str:
    """Render *flags* in one of the CLI output formats."""
    if fmt == 'json':
        return json.dumps(flags, ensure_ascii=False) + '\n'
    if fmt == 'shell':
        return shlex.join(flags) + '\n' if flags else ''
    if fmt == 'file':
        return render_flags(flags)
    return ''.join(f'{f}\n' for f in flags)


class FlagFileCli:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with an argv-like sequence and return the output text."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv(ENV_JSON_LOGS) == '1'
        _configure_logging(json_logs, verbose=ns.verbose)

        files = ns.files or default_files()
        if not files:
            logger.warning('no flag files given')
        flags = load_files(files, skip_missing=not ns.strict)
        return format_flags(flags, ns.fmt)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `flagfile` and `python -m flagfile`."""
    try:
        sys.stdout.write(FlagFileCli.run(sys.argv[1:] if argv is None else argv))
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except (FlagFileError, FileNotFoundError) as exc:
        logger.error('%s', exc)
        raise SystemExit(EXIT_PARSE_ERROR)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
