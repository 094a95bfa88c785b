"""單一股票平均價 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.pricing.aggregation_result_dto import AggregationResultDTO


class GetAveragePricePort(Protocol):
    """單一股票平均價

    HTTP Entry: GET /stocks/{ticker}
    CLI Entry: pricing average
    """

    def execute(
        self,
        ticker: str,
        minutes: int | str | None,
        aggregation: str | None = None,
    ) -> AggregationResultDTO:
        """計算時間窗內的平均價"""
        ...
