"""Tests for CLI argument handling."""
from __future__ import annotations

import sys
from unittest.mock import AsyncMock, patch

import pytest

from wotd.__main__ import _parse_flag, _positionals, main
from wotd.config import Settings
from wotd.entries import RegenerationReport


class TestArgs:
    def test_parse_flag(self):
        args = ["serendipity", "--adapter", "wiktionary", "--limit", "3"]
        assert _parse_flag(args, "--adapter", None) == "wiktionary"
        assert _parse_flag(args, "--limit", None) == "3"
        assert _parse_flag(args, "--port", "8765") == "8765"

    def test_flag_without_value(self):
        assert _parse_flag(["--adapter"], "--adapter", "wordnik") == "wordnik"

    def test_positionals_skip_flags(self):
        args = ["serendipity", "--adapter", "wiktionary", "20240116", "--overwrite"]
        assert _positionals(args, ("--adapter",)) == ["serendipity", "20240116"]


class TestMain:
    def test_unknown_command_exits(self, capsys):
        with patch.object(sys, "argv", ["wotd", "translate"]):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "Unknown command: translate" in capsys.readouterr().out

    def test_lookup_requires_word(self, capsys):
        with patch.object(sys, "argv", ["wotd", "lookup"]):
            with pytest.raises(SystemExit):
                main()
        assert "Usage: python -m wotd lookup" in capsys.readouterr().out


class TestRegenerateAll:
    def _run(self, argv, report):
        regenerate = AsyncMock(return_value=report)
        with patch.object(sys, "argv", ["wotd", "regenerate", *argv]), \
             patch("wotd.config.load_settings", return_value=Settings()), \
             patch("wotd.entries.regenerate_all_words", regenerate):
            main()
        return regenerate

    def test_dry_run(self, capsys):
        report = RegenerationReport(planned=["20240102", "20240101"])
        regenerate = self._run(["--all", "--dry-run"], report)

        kwargs = regenerate.await_args.kwargs
        assert kwargs["dry_run"] is True
        assert kwargs["delay"] == 1.0
        assert kwargs["rate_limit_delay"] == 65.0
        assert kwargs["batch_size"] == 4
        assert kwargs["batch_delay"] == 10.0
        assert "Dry run: 2 entries would be regenerated" in capsys.readouterr().out

    def test_timeouts_in_milliseconds(self, capsys):
        report = RegenerationReport(planned=["20240101"], succeeded=["20240101"])
        regenerate = self._run(
            ["--all", "--timeout", "250", "--rate-limit-timeout", "5000", "--batch-size", "2", "--batch-timeout", "0"],
            report,
        )

        kwargs = regenerate.await_args.kwargs
        assert kwargs["dry_run"] is False
        assert kwargs["delay"] == 0.25
        assert kwargs["rate_limit_delay"] == 5.0
        assert kwargs["batch_size"] == 2
        assert kwargs["batch_delay"] == 0.0
        assert "Regenerated 1/1 entries" in capsys.readouterr().out

    def test_failures_exit_nonzero(self, capsys):
        report = RegenerationReport(planned=["20240102", "20240101"], succeeded=["20240101"], failed=["20240102"])
        with pytest.raises(SystemExit) as exc:
            self._run(["--all"], report)
        assert exc.value.code == 1
        assert "Failed: 20240102" in capsys.readouterr().out

    def test_regenerate_requires_date(self, capsys):
        with patch.object(sys, "argv", ["wotd", "regenerate"]), \
             patch("wotd.config.load_settings", return_value=Settings()):
            with pytest.raises(SystemExit):
                main()
        assert "--all" in capsys.readouterr().out
