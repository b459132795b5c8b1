"""Tests for :module:`~pyfgjitter.__main__`

Motivation
~~~~~~~~~~

The idea is to run help on the main tools method (`-h`) as well as on
each tool (ex. `tool-name -h`).  This should force :module:`~defopt`
to parse the docstring for the method.  Since :module:`~defopt` uses
:module:`~argparse` underneath, `SystemExit`s are raised, which are
different than regular `Exceptions`.  The exit code returned by help
(the usage) is 0.
"""

import logging
from datetime import timedelta

import pytest

from pyfgjitter.__main__ import TOOLS
from pyfgjitter.__main__ import _parsers
from pyfgjitter.__main__ import main
from pyfgjitter.tests import test_tool_funcs as _test_tool_funcs


def test_tools_help() -> None:
    """ Tests that running fgjitter-tools with -h exits OK"""
    argv = ["-h"]
    with pytest.raises(SystemExit) as e:
        main(argv=argv)
    assert e.type == SystemExit
    assert e.value.code == 0  # code should be 0 for help


@pytest.mark.parametrize("tool", TOOLS)
def test_tool_funcs(tool) -> None:  # type: ignore
    _test_tool_funcs(tool, main)


def test_duration_parser_registered() -> None:
    assert _parsers()[timedelta]("250ms") == timedelta(milliseconds=250)


def test_bad_duration_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as e:
        main(argv=["sample-jitter", "--span", "soon"])
    assert e.value.code == 2  # code should be 2 for parse error


def test_main_runs_tool(capsys: pytest.CaptureFixture) -> None:
    main(argv=["sample-jitter", "--min", "1s", "--span", "0s", "--count", "2"])
    assert capsys.readouterr().out.splitlines() == ["1.000000s", "1.000000s"]


def test_main_log_level(
    caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture
) -> None:
    logger = logging.getLogger("pyfgjitter")
    argv = ["sample-jitter", "--span", "0s", "--count", "1"]
    try:
        main(argv=argv, log_level="WARNING")
        assert logger.level == logging.WARNING
        main(argv=argv)
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(logging.INFO)
    assert capsys.readouterr().out.splitlines() == ["0.000000s", "0.000000s"]
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert any(r.getMessage().startswith("Running command") for r in caplog.records)
