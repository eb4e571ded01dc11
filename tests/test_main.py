"""
Command-line tests: exit codes and output of ``main.main``.
"""

from __future__ import annotations

import pytest

from main import main


class TestConvertCommand:
    def test_default_language(self, capsys):
        assert main(["1234"]) == 0
        assert capsys.readouterr().out.strip() == "one thousand two hundred and thirty-four"

    def test_negative_decimal(self, capsys):
        assert main(["-12.6", "--lang", "fr"]) == 0
        assert capsys.readouterr().out.strip() == "moins douze virgule six"

    def test_options(self, capsys):
        assert main(["1", "-l", "ru", "-o", "gender=feminine"]) == 0
        assert capsys.readouterr().out.strip() == "одна"

    def test_dashed_option_names(self, capsys):
        assert main(["21", "-l", "fr", "-o", "with-hyphen-separator=true"]) == 0
        assert capsys.readouterr().out.strip() == "vingt-et-un"

    def test_default_language_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("NUMERAL_WORDS_DEFAULT_LANG", "de")
        assert main(["21"]) == 0
        assert capsys.readouterr().out.strip() == "einundzwanzig"


class TestErrors:
    def test_malformed_number(self, capsys):
        assert main(["abc"]) == 1
        assert "INVALID_NUMBER_FORMAT" in capsys.readouterr().err

    def test_unknown_language(self, capsys):
        assert main(["1", "--lang", "xx"]) == 1
        assert "UNKNOWN_LANGUAGE" in capsys.readouterr().err

    def test_unknown_option(self, capsys):
        assert main(["1", "-o", "bogus=1"]) == 1
        assert "INVALID_OPTIONS" in capsys.readouterr().err

    def test_bad_setting(self, monkeypatch, capsys):
        monkeypatch.setenv("NUMERAL_WORDS_MAX_DIGITS", "lots")
        assert main(["1"]) == 1
        assert "CONFIGURATION_ERROR" in capsys.readouterr().err

    def test_missing_value(self, capsys):
        assert main([]) == 2
        assert "usage" in capsys.readouterr().err

    def test_option_without_equals(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["1", "-o", "gender"])
        assert exc_info.value.code == 2


class TestListLanguages:
    def test_lists_codes(self, capsys):
        assert main(["--list-languages"]) == 0
        out = capsys.readouterr().out
        assert "zh-Hant" in out
        assert "gender" in out
