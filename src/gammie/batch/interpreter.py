"""BatchInterpreter — drives a game from protocol lines.

The interpreter is pure: it receives lines and returns the text destined for
standard output and standard error.  The entry point owns the real streams.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from gammie.batch.commands import (
    Command,
    CommandType,
    Mode,
    has_valid_chars,
    is_ignored,
    parse_command,
    parse_header,
)
from gammie.core.enums import MoveKind
from gammie.core.game import Game, new_game
from gammie.core.move import Move

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    """What one input line produced on each stream."""

    out: str = ""
    err: str = ""


def _flag(value: bool) -> str:
    return "1\n" if value else "0\n"


def execute(game: Game, command: Command) -> str:
    """Run *command* against *game* and return its printed answer."""
    ct = command.type
    args = command.args
    if ct in (CommandType.MOVE, CommandType.GOLDEN_MOVE):
        kind = MoveKind.NORMAL if ct == CommandType.MOVE else MoveKind.GOLDEN
        return _flag(Move(args[0], args[1], args[2], kind).play(game))
    if ct == CommandType.BUSY_FIELDS:
        return f"{game.busy_fields(args[0])}\n"
    if ct == CommandType.FREE_FIELDS:
        return f"{game.free_fields(args[0])}\n"
    if ct == CommandType.GOLDEN_POSSIBLE:
        return _flag(game.golden_possible(args[0]))
    return game.board_text()


class BatchInterpreter:
    """Line-by-line protocol state machine.

    Before a valid header every line is a header candidate.  A ``B`` header
    answers ``OK <n>`` and switches to command processing; an ``I`` header
    only records the game, leaving the interactive front-end to take over.
    """

    __slots__ = ("game", "mode", "line_number")

    def __init__(self) -> None:
        self.game: Game | None = None
        self.mode: Mode | None = None
        self.line_number = 0

    @property
    def interactive_requested(self) -> bool:
        return self.mode == Mode.INTERACTIVE

    def handle(self, line: str) -> Reply:
        """Process one raw input line (including its trailing newline)."""
        self.line_number += 1
        if is_ignored(line):
            return Reply()
        try:
            if not has_valid_chars(line):
                raise ValueError("Unexpected character")
            if self.game is None:
                return self._handle_header(line)
            return Reply(out=execute(self.game, parse_command(line)))
        except ValueError as exc:
            _LOGGER.debug("Line %d rejected: %s", self.line_number, exc)
            return self._error()

    def _handle_header(self, line: str) -> Reply:
        header = parse_header(line)
        game = new_game(header.width, header.height, header.players, header.areas)
        if game is None:
            return self._error()
        self.game = game
        self.mode = header.mode
        if header.mode == Mode.BATCH:
            return Reply(out=f"OK {self.line_number}\n")
        return Reply()

    def _error(self) -> Reply:
        return Reply(err=f"ERROR {self.line_number}\n")


def run_batch(lines: Iterable[str], out: TextIO, err: TextIO) -> BatchInterpreter:
    """Feed *lines* through an interpreter, writing replies to the streams.

    Stops early once an interactive header has been accepted; the caller
    inspects the returned interpreter to decide what comes next.
    """
    interpreter = BatchInterpreter()
    for line in lines:
        reply = interpreter.handle(line)
        if reply.out:
            out.write(reply.out)
        if reply.err:
            err.write(reply.err)
        if interpreter.interactive_requested:
            break
    return interpreter
