import pytest

from libs.pricing.src.adapters.driven.memory.price_source_fake_adapter import (
    PriceSourceFakeAdapter,
)


class FakeClock:
    """可手動推進的時鐘 (秒)"""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_source() -> PriceSourceFakeAdapter:
    return PriceSourceFakeAdapter()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
