"""
Pytest configuration for the gitz test suite.

Provides:
- Loguru to standard logging bridge so ``caplog`` sees gitz log records
- Paths to the golden configuration files under ``tests/res/config``
- A fixture opening the bridge window for development configuration versions
- A hypothesis profile for the property-based tests
"""

import contextlib
import logging
from pathlib import Path

import pytest
from hypothesis import settings
from loguru import logger

from gitz.config import versions

RES_DIR = Path(__file__).parent / "res" / "config"

settings.register_profile("gitz", max_examples=50, deadline=None)
settings.load_profile("gitz")


@pytest.fixture(autouse=True, scope="function")
def capture_loguru_logs_globally(caplog):
    """Forward Loguru records to pytest's caplog for the duration of a test."""

    class PropagateHandler(logging.Handler):
        def emit(self, record):
            logging.getLogger(record.name or "gitz").handle(record)

    caplog.set_level(logging.DEBUG)
    handler_id = logger.add(
        PropagateHandler(),
        format="{message}",
        level="TRACE",
        enqueue=False,
    )

    yield

    with contextlib.suppress(ValueError):
        logger.remove(handler_id)


@pytest.fixture(scope="session")
def res_dir() -> Path:
    return RES_DIR


@pytest.fixture(scope="session")
def read_res():
    """Return a function reading a golden configuration file by name."""

    def _read(name: str) -> str:
        return (RES_DIR / name).read_text(encoding="utf-8")

    return _read


@pytest.fixture
def open_bridge(monkeypatch):
    """Pretend the running release is the one bridging the 0.2 development versions."""
    monkeypatch.setattr(versions, "RELEASE", "0.2.0")
    return "0.2.0"


@pytest.fixture
def config_path(tmp_path) -> Path:
    return tmp_path / "git-z.toml"
