"""Application entry point.

Reads the protocol from standard input.  A ``B`` header runs the batch
interpreter over the rest of the input; an ``I`` header opens the
interactive window and prints the scoreboard once it is closed.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from gammie.batch.interpreter import run_batch
from gammie.core.game import Game
from gammie.core.notation import cell_width
from gammie.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def format_scoreboard(game: Game) -> str:
    """``PLAYER <id> <busy fields>`` for every player, one per line."""
    width = cell_width(game.players)
    return "".join(
        f"PLAYER {p:<{width}} {game.busy_fields(p)}\n"
        for p in range(1, game.players + 1)
    )


def _configure_logging(settings: AppSettings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run(
    lines: Iterable[str],
    out: TextIO,
    err: TextIO,
    settings: AppSettings | None = None,
) -> int:
    """Process *lines*; returns the process exit code."""
    interpreter = run_batch(lines, out, err)
    if interpreter.interactive_requested and interpreter.game is not None:
        from gammie.ui.bootstrap import run_application

        code = run_application(interpreter.game, settings)
        out.write(format_scoreboard(interpreter.game))
        return code
    return 0


def _prepare_stdin(stream: TextIO) -> None:
    """Keep undecodable bytes and bare CRs so the interpreter can reject them."""
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="surrogateescape", newline="\n")


def main() -> None:
    """Launch Gammie on standard input / output."""
    settings = AppSettings.from_env()
    _configure_logging(settings)
    _prepare_stdin(sys.stdin)
    _LOGGER.debug("Reading protocol from stdin")
    sys.exit(run(sys.stdin, sys.stdout, sys.stderr, settings))


if __name__ == "__main__":
    main()
