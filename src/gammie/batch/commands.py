"""Parsing of batch-protocol lines into headers and commands.

Parsers raise :class:`ValueError` for malformed input; the interpreter turns
that into an ``ERROR <line>`` report.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WHITESPACE = " \t\v\f\r\n"
COMMAND_CHARS = "BImgbfqp"
MAX_NUMBER = 2**32 - 1
MIN_HEADER_LENGTH = 10


class Mode(str, Enum):
    """Game mode selected by the header line."""

    BATCH = "B"
    INTERACTIVE = "I"


class CommandType(str, Enum):
    """Batch command letters and the number of arguments each takes."""

    MOVE = "m"
    GOLDEN_MOVE = "g"
    BUSY_FIELDS = "b"
    FREE_FIELDS = "f"
    GOLDEN_POSSIBLE = "q"
    PRINT_BOARD = "p"

    @property
    def arity(self) -> int:
        return _ARITY[self]


_ARITY: dict[CommandType, int] = {
    CommandType.MOVE: 3,
    CommandType.GOLDEN_MOVE: 3,
    CommandType.BUSY_FIELDS: 1,
    CommandType.FREE_FIELDS: 1,
    CommandType.GOLDEN_POSSIBLE: 1,
    CommandType.PRINT_BOARD: 0,
}


@dataclass(frozen=True, slots=True)
class Header:
    """First meaningful line: mode plus game parameters."""

    mode: Mode
    width: int
    height: int
    players: int
    areas: int


@dataclass(frozen=True, slots=True)
class Command:
    """A single batch command with its numeric arguments."""

    type: CommandType
    args: tuple[int, ...] = ()


# ── Line classification ─────────────────────────────────────────────────────


def is_ignored(line: str) -> bool:
    """Blank lines and ``#`` comments produce no output."""
    return line == "\n" or line.startswith("#")


def has_valid_chars(line: str) -> bool:
    """Only command letters, decimal digits and ASCII whitespace may appear."""
    return all(c in COMMAND_CHARS or c in "0123456789" or c in WHITESPACE for c in line)


def parse_number(token: str) -> int:
    """Parse an unsigned 32-bit decimal number."""
    if not token or not (token.isascii() and token.isdigit()):
        raise ValueError(f"Not a number: {token!r}")
    value = int(token)
    if value > MAX_NUMBER:
        raise ValueError(f"Number out of range: {token}")
    return value


def _tokens(line: str) -> list[str]:
    for ws in WHITESPACE[1:]:
        line = line.replace(ws, " ")
    return [tok for tok in line.split(" ") if tok]


def _check_shape(line: str, letters: str) -> None:
    if not line.endswith("\n"):
        raise ValueError("Line is not terminated by a newline")
    if len(line) < 2 or line[0] not in letters or line[1] not in WHITESPACE:
        raise ValueError(f"Unknown command: {line.rstrip()!r}")


# ── Parsers ─────────────────────────────────────────────────────────────────


def parse_header(line: str) -> Header:
    """Parse ``B|I width height players areas``."""
    if len(line) < MIN_HEADER_LENGTH:
        raise ValueError("Header line too short")
    _check_shape(line, "BI")
    tokens = _tokens(line)
    if len(tokens) != 5:
        raise ValueError(f"Header expects 4 numbers, got {len(tokens) - 1}")
    width, height, players, areas = (parse_number(tok) for tok in tokens[1:])
    return Header(Mode(line[0]), width, height, players, areas)


def parse_command(line: str) -> Command:
    """Parse one batch-phase command line."""
    _check_shape(line, "".join(ct.value for ct in CommandType))
    command_type = CommandType(line[0])
    tokens = _tokens(line)
    if len(tokens) - 1 != command_type.arity:
        raise ValueError(
            f"{command_type.name} expects {command_type.arity} arguments, "
            f"got {len(tokens) - 1}"
        )
    return Command(command_type, tuple(parse_number(tok) for tok in tokens[1:]))
