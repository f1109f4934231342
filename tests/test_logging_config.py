from __future__ import annotations

import json
import logging
import sys

import pytest

from meta_collector.logging_config import configure


def test_configure_installs_single_stderr_handler() -> None:
    configure()
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr
    assert root.level == logging.WARNING


def test_json_output_for_stdlib_loggers(capsys: pytest.CaptureFixture[str]) -> None:
    configure(json_output=True, level="DEBUG")
    logging.getLogger("meta_collector.test").info("fetched page")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    data = json.loads(line)
    assert data["event"] == "fetched page"
    assert data["level"] == "info"
    assert data["logger"] == "meta_collector.test"


def test_console_output_names_the_event(capsys: pytest.CaptureFixture[str]) -> None:
    configure(level="INFO")
    logging.getLogger("meta_collector.test").warning("slow response")
    assert "slow response" in capsys.readouterr().err


@pytest.mark.parametrize("level", ["chatty", "basic_format"])
def test_unknown_level_falls_back_to_warning(level: str) -> None:
    configure(level=level)
    assert logging.getLogger().level == logging.WARNING
