"""Pricing HTTP Controller

Driving Adapter — 將 HTTP 請求轉換為 Use Case 調用 (Flask)
"""

import logging
from datetime import datetime, timezone

from flask import Flask, jsonify, request
from injector import Injector
from werkzeug.exceptions import HTTPException

from libs.pricing.src.ports.get_average_price_port import GetAveragePricePort
from libs.pricing.src.ports.get_stock_correlation_port import (
    GetStockCorrelationPort,
)
from libs.pricing.src.ports.list_stocks_port import ListStocksPort
from libs.shared.src.dtos.pricing.aggregation_result_dto import AggregationResultDTO
from libs.shared.src.dtos.pricing.correlation_result_dto import CorrelationResultDTO
from libs.shared.src.dtos.pricing.price_history_item_dto import PriceHistoryItemDTO
from libs.shared.src.dtos.pricing.sample_dto import SampleSeries
from libs.shared.src.errors.domain_error import DomainError
from libs.shared.src.errors.internal_error import InternalError
from libs.shared.src.errors.not_found_error import NotFoundError
from libs.shared.src.errors.upstream_error import UpstreamError
from libs.shared.src.errors.validation_error import ValidationError

logger = logging.getLogger("StockHttpController")

# DomainError → HTTP status
STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    UpstreamError: 500,
    InternalError: 500,
}


def to_price_history(series: SampleSeries) -> list[PriceHistoryItemDTO]:
    """樣本序列 → 回應格式 (保留上游原始順序與時間字串)"""
    return [
        {"price": sample["price"], "lastUpdatedAt": sample["last_updated_at"]}
        for sample in series
    ]


def to_average_response(result: AggregationResultDTO) -> dict:
    """AggregationResultDTO → GET /stocks/{ticker} 回應"""
    return {
        "averageStockPrice": result["average"],
        "priceHistory": to_price_history(result["series"]),
    }


def to_correlation_response(result: CorrelationResultDTO) -> dict:
    """CorrelationResultDTO → GET /stockcorrelation 回應"""
    stocks = {
        ticker: {
            "averagePrice": result["per_series_average"][ticker],
            "priceHistory": to_price_history(series),
        }
        for ticker, series in result["per_series_series"].items()
    }
    return {"correlation": result["coefficient"], "stocks": stocks}


def error_response(code: str, message: str, status: int):
    return jsonify({"error": code, "message": message}), status


def create_app(injector: Injector) -> Flask:
    """建立 Flask app，Use Case 由 injector 提供"""
    app = Flask(__name__)
    # /stocks 為上游 payload 原樣回傳，不重排 key
    app.json.sort_keys = False

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = STATUS_BY_ERROR.get(type(e), 500)
        if status >= 500:
            logger.error(f"{e.code}: {e.message}")
        return error_response(e.code, e.message, status)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if e.code == 404:
            return error_response("NOT_FOUND", "Endpoint not found", 404)
        return error_response(
            e.name.upper().replace(" ", "_"), e.description or e.name, e.code or 500
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Unhandled error")
        return error_response("INTERNAL_ERROR", f"Internal server error: {e}", 500)

    @app.route("/")
    def index():
        """Service info / health check"""
        return jsonify(
            {
                "message": "Stock Price Aggregation Microservice",
                "status": "running",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    @app.route("/stocks")
    def list_stocks():
        """上游股票清單 (pass-through)"""
        use_case = injector.get(ListStocksPort)
        return jsonify(use_case.execute())

    @app.route("/stocks/<ticker>")
    def get_average_price(ticker: str):
        """單一股票平均價"""
        use_case = injector.get(GetAveragePricePort)
        result = use_case.execute(
            ticker,
            request.args.get("minutes"),
            request.args.get("aggregation"),
        )
        return jsonify(to_average_response(result))

    @app.route("/stockcorrelation")
    def get_stock_correlation():
        """兩檔股票相關係數"""
        use_case = injector.get(GetStockCorrelationPort)
        result = use_case.execute(
            request.args.getlist("ticker"),
            request.args.get("minutes"),
        )
        return jsonify(to_correlation_response(result))

    return app
