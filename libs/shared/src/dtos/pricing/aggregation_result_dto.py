"""Aggregation Result DTO"""

from typing import TypedDict

from libs.shared.src.dtos.pricing.sample_dto import SampleSeries


class AggregationResultDTO(TypedDict):
    """單一股票平均價結果

    Corresponds to GetAveragePricePort.execute() return value
    """

    average: float
    """Average price (rounded to 6 decimals)"""

    series: SampleSeries
    """Raw samples as received from the price source"""
