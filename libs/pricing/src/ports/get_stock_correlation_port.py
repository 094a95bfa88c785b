"""兩檔股票相關係數 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.pricing.correlation_result_dto import CorrelationResultDTO


class GetStockCorrelationPort(Protocol):
    """兩檔股票相關係數

    HTTP Entry: GET /stockcorrelation
    CLI Entry: pricing correlation
    """

    def execute(
        self, tickers: list[str], minutes: int | str | None
    ) -> CorrelationResultDTO:
        """計算時間窗內的 Pearson 相關係數"""
        ...
