from __future__ import annotations

from typing import Iterator

import pytest

from live_markup import config
from live_markup.runtime import telemetry


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture(autouse=True, scope="session")
def quiet_telemetry() -> None:
    telemetry.configure(preset="quiet")


@pytest.fixture(autouse=True)
def reset_debug_mode() -> Iterator[None]:
    previous = config.is_debug_mode()
    config.set_debug_mode(False)
    yield
    config.set_debug_mode(previous)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
