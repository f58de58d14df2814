"""
Tests for the text-mode CLI.
"""

import io

from ..cli import main
from .conftest import WINNING_GAME


class TestReplay:
    """Tests for the replay command."""

    def test_replay_prints_final_board(self, capsys):
        """Replaying moves prints the resulting board."""
        status = main(["replay", "--stones", "4", "3", "4"])
        out = capsys.readouterr().out

        assert status == 0
        assert "Player A to move" in out

    def test_replay_winning_game(self, capsys):
        """A full game ends with the winner printed."""
        status = main(["replay", "--stones", "4", *map(str, WINNING_GAME)])
        out = capsys.readouterr().out

        assert status == 0
        assert "player B wins" in out

    def test_replay_error_exit_status(self, capsys):
        """An engine error stops the replay with status 1."""
        status = main(["replay", "--stones", "4", "9"])
        out = capsys.readouterr().out

        assert status == 1
        assert "OUT_OF_RANGE" in out

    def test_bad_stone_count(self, capsys):
        """Unsupported stone counts are reported, not raised."""
        status = main(["replay", "--stones", "6", "0"])
        assert status == 1
        assert "Error" in capsys.readouterr().out


class TestPlay:
    """Tests for the interactive command."""

    def test_interactive_session(self, capsys, monkeypatch):
        """Commands are read line by line from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(
            "select 2\nundo\nundo\ncommit\nmove 5\nbogus\nquit\n"
        ))

        status = main(["play", "--stones", "4"])
        out = capsys.readouterr().out

        assert status == 0
        assert "Player A: select pit 2" in out
        assert "ILLEGAL_STATE" in out
        assert "Unknown command: bogus" in out

    def test_usage_for_missing_position(self, capsys, monkeypatch):
        """select without a number prints usage."""
        monkeypatch.setattr("sys.stdin", io.StringIO("select\nquit\n"))

        main(["play"])

        assert "Usage: select N" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        """Running without a subcommand shows help."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()
