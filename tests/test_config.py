"""Tests for command-line options and the derived wrap settings."""

import pytest
from pydantic import ValidationError

from texwrap.config import Cli, WrapConfig, min_wrap_width
from texwrap.types import Level


@pytest.mark.parametrize("wrap, expected", [
    (80, 70),
    (50, 40),
    (49, 49),
    (10, 10),
])
def test_min_wrap_width(wrap, expected):
    assert min_wrap_width(wrap) == expected


def test_wrap_config_from_width():
    config = WrapConfig.from_width(100, trace=True)
    assert config == WrapConfig(keep=False, wrap=100, wrap_min=90, trace=True)


class TestCli:

    def test_defaults(self):
        cli = Cli(files=["a.tex"])
        logs = []
        assert cli.resolve(logs) == 0
        assert logs == []
        assert cli.wrap == 80
        assert cli.wrap_min == 70
        assert cli.log_level == Level.WARN

    def test_no_files_is_an_error(self):
        logs = []
        assert Cli().resolve(logs) == 1
        assert [entry.level for entry in logs] == [Level.ERROR]
        assert "No files specified" in logs[0].message
        assert logs[0].linum_new is None

    def test_files_with_stdin_is_an_error(self):
        logs = []
        assert Cli(files=["a.tex"], stdin=True).resolve(logs) == 1
        assert logs[0].message == "Do not provide file name(s) when using --stdin."

    def test_stdin_implies_print(self):
        cli = Cli(stdin=True)
        assert cli.resolve([]) == 0
        assert cli.print

    def test_trace_implies_verbose(self):
        cli = Cli(files=["a.tex"], trace=True)
        cli.resolve([])
        assert cli.verbose
        assert cli.log_level == Level.TRACE

    @pytest.mark.parametrize("options, level", [
        ({"verbose": True}, Level.INFO),
        ({"quiet": True}, Level.ERROR),
        ({}, Level.WARN),
    ])
    def test_log_level(self, options, level):
        assert Cli(**options).log_level == level

    @pytest.mark.parametrize("wrap", [0, -5, 256])
    def test_wrap_out_of_range_is_rejected(self, wrap):
        with pytest.raises(ValidationError):
            Cli(wrap=wrap)

    def test_wrap_config(self):
        cli = Cli(files=["a.tex"], wrap=40, keep=True)
        cli.resolve([])
        assert cli.wrap_config() == WrapConfig(keep=True, wrap=40, wrap_min=40, trace=False)

    def test_wrap_min_cannot_be_set(self):
        with pytest.raises(ValidationError):
            Cli(files=["a.tex"], wrap_min=5)

    def test_wrap_min_follows_wrap(self):
        assert Cli(wrap=100).wrap_min == 90
        assert Cli(wrap=30).wrap_min == 30
