"""Tests for SearchOutput."""

import json

import click
import pytest

from minigrep import Config, LineMatch, SearchOutput

CONFIG = Config(query="fast", path="poem.txt", case_insensitive=True)
RESULTS = [LineMatch(1, "safe, fast, productive."), LineMatch(4, "Faster [bold]than[/bold] light")]


class TestMatches:
    """Tests for matches method."""

    def test_display(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints one index-prefixed line per match."""
        SearchOutput(json_mode=False).matches(CONFIG, RESULTS)
        assert capsys.readouterr().out == "1: safe, fast, productive.\n4: Faster [bold]than[/bold] light\n"

    def test_display_keeps_tabs(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Line text is printed verbatim."""
        SearchOutput(json_mode=False).matches(CONFIG, [LineMatch(0, "a\tfast\tb")])
        assert capsys.readouterr().out == "0: a\tfast\tb\n"

    def test_display_no_matches(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints nothing when there are no matches."""
        SearchOutput(json_mode=False).matches(CONFIG, [])
        assert capsys.readouterr().out == ""

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Outputs a JSON envelope with config and matches."""
        SearchOutput(json_mode=True).matches(CONFIG, RESULTS)
        result = json.loads(capsys.readouterr().out)
        assert result == {
            "ok": True,
            "data": {
                "query": "fast",
                "path": "poem.txt",
                "case_insensitive": True,
                "matches": [
                    {"index": 1, "line": "safe, fast, productive."},
                    {"index": 4, "line": "Faster [bold]than[/bold] light"},
                ],
            },
        }

    def test_json_takes_precedence_over_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode wins when both modes are requested."""
        SearchOutput(json_mode=True, table_mode=True).matches(CONFIG, RESULTS)
        assert json.loads(capsys.readouterr().out)["ok"] is True

    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Renders a table with literal cell text."""
        SearchOutput(json_mode=False, table_mode=True).matches(CONFIG, RESULTS)
        captured = capsys.readouterr().out
        assert "Line" in captured
        assert "Text" in captured
        assert "safe, fast, productive." in captured
        assert "[bold]than[/bold]" in captured


class TestPrintErrorAndExit:
    """Tests for print_error_and_exit method."""

    def test_json_mode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Outputs JSON error envelope to stdout and exits with code 1."""
        out = SearchOutput(json_mode=True)
        with pytest.raises(click.exceptions.Exit, match="1"):
            out.print_error_and_exit("file_read_error", "can't read poem.txt")
        result = json.loads(capsys.readouterr().out)
        assert result == {"ok": False, "error": "file_read_error", "message": "can't read poem.txt"}

    def test_display_mode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Outputs error to stderr and exits with code 1."""
        out = SearchOutput(json_mode=False)
        with pytest.raises(click.exceptions.Exit, match="1"):
            out.print_error_and_exit("missing_query", "did not get a query string")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: did not get a query string\n"
