"""Correlation Result DTO"""

from typing import TypedDict

from libs.shared.src.dtos.pricing.sample_dto import SampleSeries


class CorrelationResultDTO(TypedDict):
    """兩檔股票相關係數結果

    Corresponds to GetStockCorrelationPort.execute() return value
    """

    coefficient: float
    """Pearson coefficient (rounded to 4 decimals)"""

    per_series_average: dict[str, float]
    """Ticker → average price (rounded to 6 decimals)"""

    per_series_series: dict[str, SampleSeries]
    """Ticker → raw samples"""
