"""取得兩檔股票相關係數 Query

實作 GetStockCorrelationPort Driving Port
流程：快取取樣 → 時間戳對齊 → Pearson 相關係數
"""

import logging

from libs.pricing.src.domain.services.average_calculator import calculate_average
from libs.pricing.src.domain.services.pearson_correlation import (
    calculate_correlation,
)
from libs.pricing.src.domain.services.request_validator import (
    parse_minutes,
    parse_ticker_pair,
)
from libs.pricing.src.domain.services.timestamp_aligner import align_series
from libs.pricing.src.ports.get_stock_correlation_port import (
    GetStockCorrelationPort,
)
from libs.pricing.src.ports.price_source_port import PriceSourcePort
from libs.shared.src.constants.price_source_settings import (
    AVERAGE_DECIMALS,
    CORRELATION_DECIMALS,
    MIN_ALIGNED_POINTS,
)
from libs.shared.src.dtos.pricing.correlation_result_dto import CorrelationResultDTO
from libs.shared.src.errors.internal_error import InternalError
from libs.shared.src.errors.not_found_error import NotFoundError
from libs.shared.src.errors.validation_error import ValidationError


class GetStockCorrelationQuery(GetStockCorrelationPort):
    """取得兩檔股票相關係數"""

    def __init__(self, price_source: PriceSourcePort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._price_source = price_source

    def execute(
        self, tickers: list[str], minutes: int | str | None
    ) -> CorrelationResultDTO:
        """計算時間窗內的 Pearson 相關係數

        Args:
            tickers: 恰好兩個不同的股票代號
            minutes: 時間窗 (分鐘，必填)

        Raises:
            ValidationError: 參數錯誤，或對齊後少於 2 個點
            NotFoundError: 任一序列為空
            UpstreamError: 任一價格來源失敗 (整個請求失敗，不回傳部分結果)
        """
        window = parse_minutes(minutes)
        ticker_a, ticker_b = parse_ticker_pair(tickers)

        series_a = self._price_source.get_price_history(ticker_a, window)
        series_b = self._price_source.get_price_history(ticker_b, window)

        if not series_a or not series_b:
            empty = ticker_a if not series_a else ticker_b
            raise NotFoundError(
                f"Insufficient data for correlation calculation: "
                f"no data found for {empty} in the last {window} minutes"
            )

        try:
            values_a, values_b = align_series(series_a, series_b)
        except Exception as e:
            self._logger.exception(f"Alignment failed for {ticker_a}/{ticker_b}")
            raise InternalError(f"Failed to align price series: {e}") from e

        if len(values_a) < MIN_ALIGNED_POINTS:
            raise ValidationError(
                "Insufficient aligned data points for correlation calculation"
            )

        self._logger.info(
            f"{ticker_a}/{ticker_b} ({window}m): {len(values_a)} aligned pairs"
        )

        try:
            coefficient = calculate_correlation(values_a, values_b)
            average_a = calculate_average(series_a)
            average_b = calculate_average(series_b)
        except Exception as e:
            self._logger.exception(f"Correlation failed for {ticker_a}/{ticker_b}")
            raise InternalError(f"Failed to calculate correlation: {e}") from e

        return {
            # + 0.0 normalises -0.0 to 0.0
            "coefficient": round(coefficient, CORRELATION_DECIMALS) + 0.0,
            "per_series_average": {
                ticker_a: round(average_a, AVERAGE_DECIMALS),
                ticker_b: round(average_b, AVERAGE_DECIMALS),
            },
            "per_series_series": {
                ticker_a: series_a,
                ticker_b: series_b,
            },
        }
