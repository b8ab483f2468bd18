"""Batch text protocol — header parsing and command execution.

Quick start::

    import sys
    from gammie.batch import run_batch

    run_batch(["B 3 3 2 1\\n", "m 1 0 0\\n", "p\\n"], sys.stdout, sys.stderr)
"""

from gammie.batch.commands import (
    Command,
    CommandType,
    Header,
    Mode,
    has_valid_chars,
    is_ignored,
    parse_command,
    parse_header,
    parse_number,
)
from gammie.batch.interpreter import BatchInterpreter, Reply, execute, run_batch

__all__ = [
    # Parsing
    "Command",
    "CommandType",
    "Header",
    "Mode",
    "has_valid_chars",
    "is_ignored",
    "parse_command",
    "parse_header",
    "parse_number",
    # Execution
    "BatchInterpreter",
    "Reply",
    "execute",
    "run_batch",
]
