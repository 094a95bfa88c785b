"""Pricing CLI Controller

Driving Adapter — 將 CLI 指令轉換為 Use Case 調用
"""

import json
import os

from injector import Injector

from apps.pricing.src.adapters.driving.http.stock_http_controller import (
    create_app,
    to_average_response,
    to_correlation_response,
)
from libs.pricing.src.ports.get_average_price_port import GetAveragePricePort
from libs.pricing.src.ports.get_stock_correlation_port import (
    GetStockCorrelationPort,
)
from libs.pricing.src.ports.list_stocks_port import ListStocksPort


class PricingController:
    """股價聚合 CLI 控制器"""

    def __init__(self, injector: Injector) -> None:
        self._injector = injector

    def serve(self, host: str = "0.0.0.0", port: int | None = None) -> None:
        """啟動 HTTP 服務

        Args:
            host: 綁定位址
            port: 埠號 (預設讀取 PORT 環境變數，否則 5000)
        """
        port = int(port or os.environ.get("PORT", 5000))
        app = create_app(self._injector)
        print(f"🚀 Stock Price Aggregation Microservice running on http://{host}:{port}")
        app.run(host=host, port=port, threaded=True)

    def stocks(self) -> None:
        """列出上游股票清單"""
        use_case = self._injector.get(ListStocksPort)
        print(json.dumps(use_case.execute(), ensure_ascii=False, indent=2))

    def average(self, ticker: str, minutes: int) -> None:
        """單一股票平均價

        Args:
            ticker: 股票代號
            minutes: 時間窗 (分鐘)
        """
        ticker_str = str(ticker)  # fire 會將純數字自動轉為 int
        use_case = self._injector.get(GetAveragePricePort)
        result = use_case.execute(ticker_str, minutes, "average")
        print(json.dumps(to_average_response(result), indent=2))

    def correlation(self, ticker1: str, ticker2: str, minutes: int) -> None:
        """兩檔股票相關係數

        Args:
            ticker1: 股票代號 1
            ticker2: 股票代號 2
            minutes: 時間窗 (分鐘)
        """
        use_case = self._injector.get(GetStockCorrelationPort)
        result = use_case.execute([str(ticker1), str(ticker2)], minutes)
        print(json.dumps(to_correlation_response(result), indent=2))
