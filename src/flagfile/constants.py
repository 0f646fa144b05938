from __future__ import annotations

"""Project-wide constants used across modules.

Grammar characters, the flag prefix, exit status and the environment
variable names live here so the tokenizer, renderer and runtime agree on a
single source of truth.
"""

# Grammar characters.
COMMENT_CHAR: str = '#'
QUOTE_CHAR: str = '"'
ESCAPE_CHAR: str = '\\'
CR: str = '\r'
LF: str = '\n'

# Prefix added to every assembled flag name.
FLAG_PREFIX: str = '-'
VALUE_SEP: str = '='

# Exit status used when a flag file cannot be parsed.
EXIT_PARSE_ERROR: int = 2

# Environment variables.
ENV_JSON_LOGS: str = 'FLAGFILE_JSON_LOGS'
ENV_TRACE_IO: str = 'FLAGFILE_TRACE_IO'
ENV_FILES: str = 'FLAGFILE_FILES'
ENV_VERSION: str = 'FLAGFILE_VERSION'

# Read size used by the character cursor.
READ_CHUNK: int = 4096
