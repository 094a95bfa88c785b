"""Price Source Fake Adapter

實作 PriceSourcePort，用於測試
"""

from datetime import datetime, timedelta, timezone

from libs.pricing.src.ports.price_source_port import PriceSourcePort
from libs.shared.src.dtos.pricing.price_history_item_dto import StockListDTO
from libs.shared.src.dtos.pricing.sample_dto import SampleDTO, SampleSeries

BASE_TIME = datetime(2025, 5, 8, 4, 0, 0, tzinfo=timezone.utc)


def make_sample(price: float, offset_seconds: float = 0.0) -> SampleDTO:
    """建立樣本 (以 BASE_TIME 為起點)"""
    observed_at = BASE_TIME + timedelta(seconds=offset_seconds)
    return {
        "price": float(price),
        "observed_at": observed_at,
        "last_updated_at": observed_at.isoformat().replace("+00:00", "Z"),
    }


def make_series(points: list[tuple[float, float]]) -> SampleSeries:
    """[(price, offset_seconds), ...] → SampleSeries"""
    return tuple(make_sample(price, offset) for price, offset in points)


class PriceSourceFakeAdapter(PriceSourcePort):
    """價格來源 Fake Adapter"""

    def __init__(self) -> None:
        self._histories: dict[str, SampleSeries] = {
            "AAPL": make_series([(100.0, 0), (110.0, 60), (120.0, 120)]),
            "MSFT": make_series([(200.0, 0), (220.0, 60), (240.0, 120)]),
        }
        self._stocks: StockListDTO = {
            "stocks": {"Apple Inc.": "AAPL", "Microsoft Corporation": "MSFT"}
        }
        self._errors: dict[str, Exception] = {}
        self._list_error: Exception | None = None
        self.calls: list[tuple[str, int]] = []

    # Setters for testing
    def set_history(self, ticker: str, series: SampleSeries) -> None:
        self._histories[ticker] = tuple(series)

    def set_error(self, ticker: str, error: Exception | None) -> None:
        if error is None:
            self._errors.pop(ticker, None)
        else:
            self._errors[ticker] = error

    def set_stocks(self, stocks: StockListDTO) -> None:
        self._stocks = stocks

    def set_list_error(self, error: Exception | None) -> None:
        self._list_error = error

    def get_price_history(self, ticker: str, minutes: int) -> SampleSeries:
        self.calls.append((ticker, minutes))
        if ticker in self._errors:
            raise self._errors[ticker]
        return self._histories.get(ticker, ())

    def list_stocks(self) -> StockListDTO:
        if self._list_error is not None:
            raise self._list_error
        return self._stocks
