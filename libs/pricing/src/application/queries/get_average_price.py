"""取得單一股票平均價 Query

實作 GetAveragePricePort Driving Port
"""

import logging

from libs.pricing.src.domain.services.average_calculator import calculate_average
from libs.pricing.src.domain.services.request_validator import (
    check_aggregation,
    parse_minutes,
)
from libs.pricing.src.ports.get_average_price_port import GetAveragePricePort
from libs.pricing.src.ports.price_source_port import PriceSourcePort
from libs.shared.src.constants.price_source_settings import AVERAGE_DECIMALS
from libs.shared.src.dtos.pricing.aggregation_result_dto import AggregationResultDTO
from libs.shared.src.errors.internal_error import InternalError
from libs.shared.src.errors.not_found_error import NotFoundError


class GetAveragePriceQuery(GetAveragePricePort):
    """取得單一股票平均價"""

    def __init__(self, price_source: PriceSourcePort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._price_source = price_source

    def execute(
        self,
        ticker: str,
        minutes: int | str | None,
        aggregation: str | None = None,
    ) -> AggregationResultDTO:
        """計算時間窗內的平均價

        Args:
            ticker: 股票代號
            minutes: 時間窗 (分鐘，必填)
            aggregation: 聚合方式，只支援 average

        Raises:
            ValidationError: 參數缺漏或不支援的 aggregation
            NotFoundError: 時間窗內無樣本
            UpstreamError: 價格來源失敗
        """
        window = parse_minutes(minutes)
        check_aggregation(aggregation)

        series = self._price_source.get_price_history(ticker, window)
        if not series:
            raise NotFoundError(
                f"No data found for {ticker} in the last {window} minutes"
            )

        try:
            average = calculate_average(series)
        except Exception as e:
            self._logger.exception(f"Average calculation failed for {ticker}")
            raise InternalError(f"Failed to calculate average price: {e}") from e

        return {
            "average": round(average, AVERAGE_DECIMALS),
            "series": series,
        }
