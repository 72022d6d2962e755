# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from siteglobe.utils.cli_helpers import (
    apply_verbosity_flags,
    configure_logging_from_env,
    trace,
    trace_enabled,
)
from siteglobe.utils.io_utils import open_input, write_text_output


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.mark.parametrize(
    "value,expected",
    [("debug", logging.DEBUG), ("quiet", logging.ERROR), ("bogus", logging.INFO)],
)
def test_configure_logging_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("SITEGLOBE_VERBOSITY", value)
    assert configure_logging_from_env() == expected
    assert logging.getLogger().level == expected


def test_verbosity_flags_set_environment(monkeypatch):
    monkeypatch.setenv("SITEGLOBE_VERBOSITY", "info")
    monkeypatch.setenv("SITEGLOBE_SHELL_TRACE", "0")
    apply_verbosity_flags(SimpleNamespace(verbose=True, quiet=True, trace=True))
    assert configure_logging_from_env() == logging.DEBUG
    assert trace_enabled()


def test_trace_writes_to_stderr_only_when_enabled(monkeypatch, capsys):
    monkeypatch.setenv("SITEGLOBE_SHELL_TRACE", "0")
    trace("hidden")
    monkeypatch.setenv("SITEGLOBE_SHELL_TRACE", "1")
    trace("fetch sheet")
    captured = capsys.readouterr()
    assert captured.err == "+ fetch sheet\n"
    assert captured.out == ""


def test_write_text_output_and_open_input(tmp_path):
    target = tmp_path / "nested" / "out.json"
    write_text_output(str(target), "{}\n")
    with open_input(str(target)) as fh:
        assert fh.read() == b"{}\n"
