"""Test configuration and fixtures for the Library Desk.

Every test gets:
1. Isolated configuration - the global config is reset around each test
2. A fixed clock - due dates and fines never depend on the real date
3. A fresh desk - no registry state leaks between tests
"""

import io
import os
from collections.abc import Generator
from datetime import date

import logfire
import pytest
from rich.console import Console

from library_desk.config import DeskConfig, reset_config
from library_desk.services.circulation import CirculationDesk
from library_desk.services.clock import FixedClock

TODAY = date(2024, 3, 1)


# === Session Setup ===


@pytest.fixture(scope="session", autouse=True)
def local_tracing():
    """Keep logfire spans local for the whole test session."""
    logfire.configure(send_to_logfire=False, console=False)


# === Configuration Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment without LIBRARY_DESK_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("LIBRARY_DESK_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_config(clean_env) -> Generator[DeskConfig, None, None]:
    """Provide a configuration with the default circulation policy."""
    reset_config()

    config = DeskConfig(
        _env_file=None,
        loan_period_days=14,
        fine_per_day=0.50,
        load_sample_data=False,
        log_level="DEBUG",
    )

    yield config

    reset_config()


# === Desk Fixtures ===


@pytest.fixture
def today() -> date:
    """The date the fixed clock starts on."""
    return TODAY


@pytest.fixture
def clock(today: date) -> FixedClock:
    """A clock pinned to a known date."""
    return FixedClock(today)


@pytest.fixture
def desk(test_config: DeskConfig, clock: FixedClock) -> CirculationDesk:
    """An empty desk driven by the fixed clock."""
    return CirculationDesk(clock=clock, config=test_config)


@pytest.fixture
def stocked_desk(desk: CirculationDesk) -> CirculationDesk:
    """A desk with book X1 and member M1, the smallest useful catalog."""
    desk.add_book("X1", "Test Book", "Test Author")
    desk.register_member("M1", "Test Member")
    return desk


# === Console Fixtures ===


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """A rich console that writes plain text into ``output``."""
    return Console(file=output, width=200, color_system=None, highlight=False)


class ScriptedInput:
    """Feeds prepared lines to the shell and records the prompts it shows."""

    def __init__(self, lines: list[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput


# === Cleanup Fixtures ===


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Reset global configuration after every test."""
    yield
    reset_config()
