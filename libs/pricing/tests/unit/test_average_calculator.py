"""平均價計算器單元測試"""

import pytest

from libs.pricing.src.adapters.driven.memory.price_source_fake_adapter import (
    make_series,
)
from libs.pricing.src.domain.services.average_calculator import calculate_average


class TestCalculateAverage:
    """calculate_average 測試"""

    def test_three_point_scenario(self) -> None:
        """100 / 110 / 120 平均為 110"""
        series = make_series([(100.0, 0), (110.0, 60), (120.0, 120)])
        assert calculate_average(series) == pytest.approx(110.0)

    def test_empty_series_is_zero(self) -> None:
        """空序列定義為 0，不是錯誤"""
        assert calculate_average(()) == 0.0

    def test_single_sample(self) -> None:
        series = make_series([(42.5, 0)])
        assert calculate_average(series) == 42.5

    def test_order_does_not_matter(self) -> None:
        forward = make_series([(1.0, 0), (2.0, 60), (6.0, 120)])
        backward = tuple(reversed(forward))
        assert calculate_average(forward) == pytest.approx(calculate_average(backward))

    def test_matches_arithmetic_mean(self) -> None:
        prices = [231.95, 232.4, 229.87, 230.11, 233.0]
        series = make_series([(p, i * 30) for i, p in enumerate(prices)])
        assert calculate_average(series) == pytest.approx(sum(prices) / len(prices))

    def test_returns_python_float(self) -> None:
        series = make_series([(1.0, 0), (2.0, 60)])
        assert type(calculate_average(series)) is float
