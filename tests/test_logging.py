import logging
from pathlib import Path

import pytest

from nabaztag.logging import NETWORK_LOGGERS, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    root_level = root.level
    names = ("nabaztag", *NETWORK_LOGGERS)
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(root_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_configure_logging_sets_package_level_and_quiets_network():
    configure_logging("debug")

    assert logging.getLogger("nabaztag").level == logging.DEBUG
    for name in NETWORK_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_configure_logging_log_network_enables_aiohttp_debug():
    configure_logging("INFO", log_network=True)

    assert logging.getLogger("nabaztag").level == logging.INFO
    for name in NETWORK_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG


def test_configure_logging_writes_to_file(tmp_path: Path):
    log_path = tmp_path / "logs" / "nabaztag.log"

    configure_logging("INFO", log_path=log_path)
    logging.getLogger("nabaztag.device").info("queued speech")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "| INFO | nabaztag.device | queued speech" in log_path.read_text(
        encoding="utf-8"
    )
