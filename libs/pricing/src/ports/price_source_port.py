"""
PriceSourcePort - Driven Port

實作者: PriceSourceHttpAdapter, CachedPriceSourceAdapter, PriceSourceFakeAdapter
"""

from typing import Protocol, runtime_checkable

from libs.shared.src.dtos.pricing.price_history_item_dto import StockListDTO
from libs.shared.src.dtos.pricing.sample_dto import SampleSeries


@runtime_checkable
class PriceSourcePort(Protocol):
    """股票價格來源介面"""

    def get_price_history(self, ticker: str, minutes: int) -> SampleSeries:
        """取得最近 N 分鐘的價格樣本

        Args:
            ticker: 股票代號 (e.g. AAPL)
            minutes: 回看時間窗 (分鐘)

        Returns:
            樣本序列 (順序不保證)

        Raises:
            UpstreamError: 上游呼叫失敗
        """
        ...

    def list_stocks(self) -> StockListDTO:
        """取得上游提供的股票清單 (原樣回傳)"""
        ...
