"""取得股票清單 Query

實作 ListStocksPort，上游清單原樣回傳
"""

from libs.pricing.src.ports.list_stocks_port import ListStocksPort
from libs.pricing.src.ports.price_source_port import PriceSourcePort
from libs.shared.src.dtos.pricing.price_history_item_dto import StockListDTO


class ListStocksQuery(ListStocksPort):
    """取得股票清單"""

    def __init__(self, price_source: PriceSourcePort) -> None:
        self._price_source = price_source

    def execute(self) -> StockListDTO:
        return self._price_source.list_stocks()
