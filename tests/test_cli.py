"""
linetok — CLI Tests
===================
Run with: python -m pytest tests/ -v
"""

import sys
import os
import io
import json
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from linetok.cli import main


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv("LINETOK_CONFIG", raising=False)


class TestFindCommand:
    def test_prints_match(self, capsys):
        assert main(["-t", "number", "-q", "call 555 or 42 today"]) == 0
        assert capsys.readouterr().out == "555\n"

    def test_second_match(self, capsys):
        assert main(["-t", "number", "-n", "2", "-q", "call 555 or 42 today"]) == 0
        assert capsys.readouterr().out == "42\n"

    def test_no_match_exit_code(self, capsys):
        assert main(["-t", "number", "-n", "3", "call 555 or 42 today"]) == 1
        assert capsys.readouterr().out == ""

    def test_message_on_stderr(self, capsys):
        assert main(["-t", "number", "call 555"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "555\n"
        assert 'Copied number "555"' in captured.err

    def test_json_output(self, capsys):
        assert main(["--json", "contact a@b.com now"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"type": "email", "start": 8, "end": 15, "text": "a@b.com"}

    def test_reads_first_line_of_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("ping 10.0.0.1\nand 10.0.0.2\n"))
        assert main(["-q", "-n", "2", "-t", "ip"]) == 1
        monkeypatch.setattr(sys, "stdin", io.StringIO("ping 10.0.0.1\nand 10.0.0.2\n"))
        assert main(["-q", "-t", "ip"]) == 0
        assert capsys.readouterr().out == "10.0.0.1\n"

    def test_point_selects_line(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("first\ncall 555 or 42\n"))
        assert main(["--json", "--point", "8", "-t", "number", "-n", "2"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["text"] == "42"
        assert (payload["start"], payload["end"]) == (18, 20)


class TestErrors:
    def test_invalid_occurrence(self, capsys):
        assert main(["-n", "0", "call 555"]) == 2
        assert "Occurrence index" in capsys.readouterr().err

    def test_unknown_type(self, capsys):
        assert main(["-t", "uuid", "call 555"]) == 2
        assert "Unknown token type" in capsys.readouterr().err

    def test_point_out_of_range(self, capsys):
        assert main(["--point", "99", "short"]) == 2

    def test_missing_config(self, capsys):
        assert main(["--config", "no-such-preset", "x"]) == 2


class TestListTypes:
    def test_default_types(self, capsys):
        assert main(["--list-types"]) == 0
        assert capsys.readouterr().out.split() == ["ip", "email", "url", "date", "number"]

    def test_preset_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("LINETOK_CONFIG", "contact")
        assert main(["--list-types"]) == 0
        assert capsys.readouterr().out.split() == ["email", "url", "phone", "date"]
