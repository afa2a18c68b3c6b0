"""Tests for the command-line interface."""

from __future__ import annotations

import io
import json
import re

import pytest

from spgen.cli import EXIT_INVALID_CONFIG, build_parser, config_from_args, main
from spgen.config import DEFAULT_CONFIG


def lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestGenerate:
    def test_default(self, capsys):
        assert main(["generate"]) == 0
        (pw,) = lines(capsys)
        assert len(pw) == DEFAULT_CONFIG.length

    def test_length_and_classes(self, capsys):
        assert main(["generate", "--length", "12", "--no-symbols", "--no-uppercase"]) == 0
        (pw,) = lines(capsys)
        assert re.fullmatch(r"[a-z0-9]{12}", pw)

    def test_count(self, capsys):
        assert main(["generate", "-n", "5"]) == 0
        assert len(lines(capsys)) == 5

    @pytest.mark.parametrize("count", ["0", "-3", "two"])
    def test_count_must_be_positive(self, capsys, count):
        with pytest.raises(SystemExit) as excinfo:
            main(["generate", "-n", count])
        assert excinfo.value.code == 2
        assert capsys.readouterr().out == ""

    def test_invalid_config_exits_with_errors(self, capsys):
        assert main(["generate", "--length", "4"]) == EXIT_INVALID_CONFIG
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "at least 8 characters" in captured.err

    def test_no_validate_bypasses_bounds(self, capsys):
        assert main(["generate", "--preset", "pin", "--no-validate"]) == 0
        (pw,) = lines(capsys)
        assert re.fullmatch(r"[0-9]{6}", pw)

    def test_json_output(self, capsys):
        assert main(["generate", "--json", "--length", "20"]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record["length"] == 20
        assert 0 <= record["score"] <= 10
        assert {"password", "bits", "label", "crack_time"} <= set(record)

    def test_show_strength(self, capsys):
        assert main(["generate", "--show-strength"]) == 0
        (line,) = lines(capsys)
        password, details = line.split("\t")
        assert len(password) == DEFAULT_CONFIG.length
        assert "/10" in details and "bits" in details


class TestConfigFromArgs:
    def parse(self, *argv):
        return config_from_args(build_parser().parse_args(["generate", *argv]))

    def test_defaults_to_default_config(self):
        assert self.parse() == DEFAULT_CONFIG

    def test_toggles_can_switch_off_defaults(self):
        cfg = self.parse("--allow-ambiguous", "--any-types", "--allow-repeat", "--allow-sequential")
        assert not any(
            (cfg.avoid_ambiguous, cfg.require_all_types,
             cfg.no_consecutive_repeat, cfg.no_sequential)
        )

    def test_preset_then_flags(self):
        cfg = self.parse("--preset", "banking", "--no-repeat", "--length", "30")
        assert cfg.length == 30
        assert cfg.no_consecutive_repeat
        assert not cfg.avoid_ambiguous

    def test_conflicting_toggles_rejected(self):
        with pytest.raises(SystemExit):
            self.parse("--no-repeat", "--allow-repeat")


class TestAnalyze:
    def test_text(self, capsys):
        assert main(["analyze", "pass123"]) == 0
        (line,) = lines(capsys)
        assert line.startswith("Weak (2/10")

    def test_json(self, capsys):
        assert main(["analyze", "--json", "Xk9$mP2&nQ5@wL8#"]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record["label"] == "Strong"
        assert record["bits"] == 64.0

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("abc\npassword\n"))
        assert main(["analyze", "-"]) == 0
        assert len(lines(capsys)) == 2


def test_presets_listing(capsys):
    assert main(["presets"]) == 0
    out = capsys.readouterr().out
    assert "Web Account" in out
    assert "PIN Code" in out


def test_tips(capsys):
    assert main(["tips"]) == 0
    assert len(lines(capsys)) == 6
