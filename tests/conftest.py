"""Pytest configuration and fixtures."""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Keep test output free of log lines
os.environ.setdefault("UIPOLL_DISABLE_CONSOLE_LOGGING", "1")

# Mock PyAutoGUI for headless testing
sys.modules["pyautogui"] = MagicMock()
sys.modules["mouseinfo"] = MagicMock()
sys.modules["pyscreeze"] = MagicMock()

from uipoll.config import PollerSettings, reset_settings  # noqa: E402
from uipoll.find import RecognitionPoller  # noqa: E402
from uipoll.mock import MockRecognitionEngine, MockTime  # noqa: E402
from uipoll.model import Region  # noqa: E402


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from UIPOLL_* variables and the settings singleton."""
    for name in list(os.environ):
        if name.startswith("UIPOLL_") and name != "UIPOLL_DISABLE_CONSOLE_LOGGING":
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    """Settings with binary-exact timings so virtual clock sums stay exact."""
    return PollerSettings(
        _env_file=None,
        find_timeout=1.0,
        wait_timeout=1.0,
        poll_interval=0.125,
        ocr_attempts=3,
        pre_click_delay=0.25,
        post_click_delay=0.5,
    )


@pytest.fixture
def mock_time():
    """Virtual clock starting at zero."""
    return MockTime()


@pytest.fixture
def make_poller(settings, mock_time):
    """Build a poller around a scripted engine sharing the virtual clock."""

    def _make(*template_script, ocr_script=(), **engine_kwargs):
        engine_kwargs.setdefault("time", mock_time)
        engine = MockRecognitionEngine(template_script, ocr_script, **engine_kwargs)
        poller = RecognitionPoller(
            engine,
            default_region=Region(0, 0, 1920, 1080),
            time=mock_time,
            settings=settings,
        )
        return poller, engine

    return _make
