"""Tests for logging setup."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from diskpersist import DiskPersist, close_logging, setup_logging
from diskpersist.log import LOGGER_NAME

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    close_logging()
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


def test_text_log_file_records_store_activity(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "store.log"
    setup_logging(log_file=log_file, level=logging.DEBUG)

    persist = DiskPersist.init_with_path(tmp_path / "value", int)
    persist.write(42)
    persist.read()
    (tmp_path / "value").unlink()
    persist.read()
    close_logging()

    content = log_file.read_text()
    assert "Wrote" in content
    assert "Read" in content
    assert "No data at" in content


def test_json_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "store.json"
    logger = setup_logging(log_file=log_file, level=logging.DEBUG)
    logger.info("hello")
    close_logging()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert records[-1]["message"] == "hello"
    assert records[-1]["level"] == "INFO"


def test_verbose_adds_console_handler() -> None:
    logger = setup_logging(verbose=True)
    assert len(logger.handlers) == 1


def test_setup_is_idempotent(tmp_path: Path) -> None:
    setup_logging(log_file=tmp_path / "a.log", verbose=True)
    logger = setup_logging(log_file=tmp_path / "b.log", verbose=True)
    assert len(logger.handlers) == 2


def test_close_logging_removes_handlers(tmp_path: Path) -> None:
    setup_logging(log_file=tmp_path / "a.log")
    close_logging()
    assert logging.getLogger(LOGGER_NAME).handlers == []


def test_logging_helpers_are_exported() -> None:
    import diskpersist

    assert "setup_logging" in diskpersist.__all__
    assert "close_logging" in diskpersist.__all__
