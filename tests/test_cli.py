"""Tests for cli.py - Command line interface."""

import io
import json

import pytest

from ajemi import settings
from ajemi.cli import main

MI = "\U000F1934"
LUKIN = "\U000F192E"
LON = "\U000F192C"
TOMO = "\U000F196D"


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(settings, "SCHEMA", "sitelen")
    monkeypatch.setattr(settings, "LONG_GLYPH", True)
    monkeypatch.setattr(settings, "STRICT", False)
    monkeypatch.setattr(settings, "DICT_PATH", None)


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert "ajemi 0.1.0" in capsys.readouterr().out

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "sitelen pona" in capsys.readouterr().out

    def test_no_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main([]) == 1

    def test_detail_and_json_exclusive(self):
        with pytest.raises(SystemExit):
            main(["-d", "-j", "mi"])


class TestCLIConversion:
    """Tests for converting text."""

    def test_default_output(self, capsys):
        assert main(["milukin"]) == 0
        assert capsys.readouterr().out.strip() == MI + LUKIN

    def test_words_joined_with_remapped_space(self, capsys):
        assert main(["mi", "lukin"]) == 0
        assert capsys.readouterr().out.strip() == MI + "\u3000" + LUKIN

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("mi.\n"))
        assert main([]) == 0
        assert capsys.readouterr().out.strip() == MI + "\U000F199C"

    def test_long_glyph(self, capsys):
        assert main(["lontomo"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == LON + "\U000F1997" + TOMO + "\U000F1998"

    def test_plain(self, capsys):
        assert main(["--plain", "lontomo"]) == 0
        assert capsys.readouterr().out.strip() == LON + TOMO

    def test_emoji(self, capsys):
        assert main(["--emoji", "toki"]) == 0
        assert capsys.readouterr().out.strip() == "\U0001F4AC"

    def test_rime_dict(self, tmp_path, capsys):
        path = tmp_path / "custom.dict.yaml"
        path.write_text("X\tmi\n", encoding="utf-8")
        assert main(["--dict", str(path), "mi"]) == 0
        assert capsys.readouterr().out.strip() == "X"

    def test_missing_dict(self, tmp_path, capsys):
        assert main(["--dict", str(tmp_path / "nope.yaml"), "mi"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_strict_rejects_unknown_letters(self, capsys):
        assert main(["--strict", "Toki"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_lenient_drops_unknown_letters(self, capsys):
        assert main(["Tmi"]) == 0
        assert capsys.readouterr().out.strip() == MI


class TestCLIFormats:
    """Tests for --detail and --json."""

    def test_detail(self, capsys):
        assert main(["-d", "mi lukin"]) == 0
        out = capsys.readouterr().out
        assert f"mi → {MI}  [0:2]" in out
        assert f"lukin → {LUKIN}  [3:8]" in out
        assert "(punctuation)" in out

    def test_detail_shows_dropped(self, capsys):
        assert main(["-d", "miQ"]) == 0
        assert "(dropped)" in capsys.readouterr().out

    def test_json(self, capsys):
        assert main(["--json", "--plain", "mi luki"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [piece["type"] for piece in data] == ["letters", "punct", "letters"]
        assert data[0]["segments"] == [
            {"spelling": "mi", "glyph": MI, "start": 0, "end": 2},
        ]
        assert data[1] == {"type": "punct", "start": 2, "text": "\u3000"}
        assert data[2]["segments"] == [
            {"spelling": "luki", "glyph": LUKIN, "start": 3, "end": 7},
        ]
        assert data[2]["dropped"] == []
