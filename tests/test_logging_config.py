from __future__ import annotations

import logging

import pytest

from logging_config import ContextualFormatter, configure_logging, resolve_level


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="relay",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="push failed",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extras() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    output = formatter.format(_record(stage="push", status_code=500, unrelated="x"))

    assert output == "push failed | stage=push status_code=500"


def test_formatter_without_extras_is_plain() -> None:
    formatter = ContextualFormatter(fmt="%(levelname)s %(message)s")

    assert formatter.format(_record()) == "ERROR push failed"


@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), (logging.ERROR, logging.ERROR)],
)
def test_resolve_level_accepts_known_levels(level, expected: int) -> None:
    assert resolve_level(level) == expected


def test_resolve_level_rejects_unknown_name() -> None:
    with pytest.raises(ValueError) as exc:
        resolve_level("loud")

    assert "loud" in str(exc.value)


def test_configure_logging_reads_env_level(monkeypatch) -> None:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setenv("LOG_LEVEL", "debug")

    try:
        configure_logging()
        assert root.level == logging.DEBUG
        configure_logging("error")
        assert root.level == logging.ERROR
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
