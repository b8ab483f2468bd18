"""Tests for the batch interpreter and stream driver."""

import io

import pytest

from gammie.batch.commands import Mode
from gammie.batch.interpreter import BatchInterpreter, Reply, run_batch


def _transcript(lines: list[str]) -> tuple[str, str]:
    out, err = io.StringIO(), io.StringIO()
    run_batch(lines, out, err)
    return out.getvalue(), err.getvalue()


class TestHeaderPhase:
    def test_batch_header_replies_ok_with_line_number(self) -> None:
        interpreter = BatchInterpreter()
        assert interpreter.handle("# hello\n") == Reply()
        assert interpreter.handle("\n") == Reply()
        assert interpreter.handle("B 3 3 2 1\n") == Reply(out="OK 3\n")
        assert interpreter.mode is Mode.BATCH
        assert interpreter.game is not None
        assert not interpreter.interactive_requested

    def test_interactive_header_is_silent(self) -> None:
        interpreter = BatchInterpreter()
        assert interpreter.handle("I 3 3 2 1\n") == Reply()
        assert interpreter.interactive_requested

    @pytest.mark.parametrize(
        "line",
        ["B 0 3 2 1\n", "B 3 3 0 1\n", "B 3 3 2 0\n", "m 1 0 0\n", "p\n", "B 3 3 2\n"],
    )
    def test_bad_header_reports_error_and_waits(self, line: str) -> None:
        interpreter = BatchInterpreter()
        assert interpreter.handle(line) == Reply(err="ERROR 1\n")
        assert interpreter.game is None
        assert interpreter.handle("B 2 2 2 2\n") == Reply(out="OK 2\n")

    def test_second_header_is_an_error(self) -> None:
        interpreter = BatchInterpreter()
        interpreter.handle("B 2 2 2 2\n")
        assert interpreter.handle("B 2 2 2 2\n") == Reply(err="ERROR 2\n")


class TestBatchTranscript:
    def test_full_session(self) -> None:
        out, err = _transcript(
            [
                "# comment\n",
                "\n",
                "B 3 2 2 1\n",
                "m 1 0 0\n",
                "m 1 2 1\n",
                "m 2 2 1\n",
                "b 1\n",
                "f 1\n",
                "q 2\n",
                "p\n",
                "x\n",
                "m 1 0\n",
                "g 2 0 0\n",
                "p\n",
            ]
        )
        board = "..2\n1..\n"
        assert out == "OK 3\n1\n0\n1\n1\n2\n0\n" + board + "0\n" + board
        assert err == "ERROR 11\nERROR 12\n"

    def test_golden_move_transcript(self) -> None:
        out, err = _transcript(
            [
                "B 3 1 2 2\n",
                "m 1 0 0\n",
                "m 1 1 0\n",
                "m 1 2 0\n",
                "q 2\n",
                "g 2 1 0\n",
                "q 2\n",
                "b 1\n",
                "b 2\n",
                "p\n",
            ]
        )
        assert out == "OK 1\n1\n1\n1\n1\n1\n0\n2\n1\n121\n"
        assert err == ""

    def test_number_limits(self) -> None:
        out, err = _transcript(
            [
                "B 2 2 2 2\n",
                "m 1 4294967295 0\n",
                "m 1 4294967296 0\n",
                "b 4294967295\n",
            ]
        )
        assert out == "OK 1\n0\n0\n"
        assert err == "ERROR 3\n"

    def test_unknown_player_ids_answer_zero(self) -> None:
        out, _ = _transcript(
            ["B 2 2 2 2\n", "m 0 0 0\n", "m 3 0 0\n", "f 3\n", "q 0\n"]
        )
        assert out == "OK 1\n0\n0\n0\n0\n"

    def test_missing_final_newline(self) -> None:
        out, err = _transcript(["B 2 2 2 2\n", "m 1 0 0"])
        assert out == "OK 1\n"
        assert err == "ERROR 2\n"

    def test_whitespace_variants(self) -> None:
        out, err = _transcript(["B\t2 2\v2 2\r\n", "m\f1 0  0\n", "p   \n"])
        assert out == "OK 1\n1\n..\n1.\n"
        assert err == ""

    def test_leading_whitespace_is_an_error(self) -> None:
        _, err = _transcript(["B 2 2 2 2\n", " p\n", " \n"])
        assert err == "ERROR 2\nERROR 3\n"


class TestRunBatch:
    def test_stops_after_interactive_header(self) -> None:
        lines = iter(["# x\n", "I 4 4 2 2\n", "m 1 0 0\n"])
        out, err = io.StringIO(), io.StringIO()
        interpreter = run_batch(lines, out, err)
        assert interpreter.interactive_requested
        assert interpreter.game is not None
        assert interpreter.game.width == 4
        assert next(lines) == "m 1 0 0\n"
        assert out.getvalue() == ""
        assert err.getvalue() == ""

    def test_empty_input(self) -> None:
        out, err = io.StringIO(), io.StringIO()
        interpreter = run_batch([], out, err)
        assert interpreter.game is None
        assert out.getvalue() == err.getvalue() == ""
