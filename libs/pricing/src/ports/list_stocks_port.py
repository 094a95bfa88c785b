"""
ListStocksPort - Driving Port

實作者: ListStocksQuery
"""

from typing import Protocol

from libs.shared.src.dtos.pricing.price_history_item_dto import StockListDTO


class ListStocksPort(Protocol):
    """Driving Port for ListStocksQuery"""

    def execute(self) -> StockListDTO:
        """取得股票清單"""
        ...
