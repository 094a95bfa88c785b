"""
PriceSourceHttpAdapter Unit Tests

Transport is replaced with a mocked requests.Session.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from libs.pricing.src.adapters.driven.http.price_source_http_adapter import (
    PriceSourceHttpAdapter,
)
from libs.shared.src.errors.upstream_error import UpstreamError

TOKEN = "secret-token"


def make_response(payload=None, status: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        error = requests.HTTPError(f"{status} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def adapter(session) -> PriceSourceHttpAdapter:
    return PriceSourceHttpAdapter(
        base_url="http://upstream.test/evaluation-service/",
        token=TOKEN,
        timeout=10,
        session=session,
    )


class TestGetPriceHistory:
    """Test get_price_history"""

    def test_parses_samples(self, adapter, session) -> None:
        """Test samples are parsed with tz-aware timestamps"""
        session.get.return_value = make_response(
            [
                {"price": 231.95, "lastUpdatedAt": "2025-05-08T04:26:27.4658491Z"},
                {"price": 232.4, "lastUpdatedAt": "2025-05-08T04:30:11Z"},
            ]
        )

        series = adapter.get_price_history("NVDA", 50)

        assert len(series) == 2
        assert series[0]["price"] == 231.95
        assert series[0]["last_updated_at"] == "2025-05-08T04:26:27.4658491Z"
        assert series[1]["observed_at"] == datetime(
            2025, 5, 8, 4, 30, 11, tzinfo=timezone.utc
        )

    def test_naive_timestamp_as_utc(self, adapter, session) -> None:
        session.get.return_value = make_response(
            [{"price": 1, "lastUpdatedAt": "2025-05-08T04:30:11"}]
        )
        series = adapter.get_price_history("NVDA", 50)
        assert series[0]["observed_at"].tzinfo == timezone.utc

    def test_request_shape(self, adapter, session) -> None:
        """Test URL, bearer header, window and timeout"""
        session.get.return_value = make_response([])

        adapter.get_price_history("NVDA", 50)

        args, kwargs = session.get.call_args
        assert args[0] == "http://upstream.test/evaluation-service/stocks/NVDA"
        assert kwargs["params"] == {"minutes": 50}
        assert kwargs["headers"]["Authorization"] == f"Bearer {TOKEN}"
        assert kwargs["timeout"] == 10

    def test_single_stock_payload(self, adapter, session) -> None:
        session.get.return_value = make_response(
            {"stock": {"price": 5.5, "lastUpdatedAt": "2025-05-08T04:30:11Z"}}
        )
        series = adapter.get_price_history("NVDA", 50)
        assert [s["price"] for s in series] == [5.5]

    def test_http_error(self, adapter, session) -> None:
        session.get.return_value = make_response(status=503)
        with pytest.raises(UpstreamError) as exc_info:
            adapter.get_price_history("NVDA", 50)
        assert exc_info.value.status_code == 503
        assert "503" in exc_info.value.message

    def test_timeout(self, adapter, session) -> None:
        session.get.side_effect = requests.Timeout("read timed out")
        with pytest.raises(UpstreamError, match="timed out"):
            adapter.get_price_history("NVDA", 50)

    def test_connection_error(self, adapter, session) -> None:
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(UpstreamError, match="refused"):
            adapter.get_price_history("NVDA", 50)

    def test_invalid_json(self, adapter, session) -> None:
        response = make_response()
        response.json.side_effect = ValueError("no json")
        session.get.return_value = response
        with pytest.raises(UpstreamError, match="invalid JSON"):
            adapter.get_price_history("NVDA", 50)

    def test_malformed_sample(self, adapter, session) -> None:
        session.get.return_value = make_response([{"price": 1.0}])
        with pytest.raises(UpstreamError, match="malformed"):
            adapter.get_price_history("NVDA", 50)

    def test_unexpected_payload(self, adapter, session) -> None:
        session.get.return_value = make_response({"message": "nope"})
        with pytest.raises(UpstreamError, match="list of samples"):
            adapter.get_price_history("NVDA", 50)

    @pytest.mark.parametrize(
        "ticker, expected_path",
        [
            ("AAPL?minutes=1#", "/stocks/AAPL%3Fminutes%3D1%23"),
            ("..", "/stocks/%2E%2E"),
            (".", "/stocks/%2E"),
            ("BRK/B", "/stocks/BRK%2FB"),
            ("BRK.B", "/stocks/BRK.B"),
        ],
    )
    def test_ticker_escaped_as_single_segment(
        self, adapter, session, ticker, expected_path
    ) -> None:
        """Test ticker cannot change the upstream path or query"""
        session.get.return_value = make_response([])

        adapter.get_price_history(ticker, 50)

        args, kwargs = session.get.call_args
        assert args[0] == f"http://upstream.test/evaluation-service{expected_path}"
        assert kwargs["params"] == {"minutes": 50}

    @pytest.mark.parametrize(
        "price", [float("nan"), float("inf"), float("-inf"), -1.0]
    )
    def test_non_finite_or_negative_price(self, adapter, session, price) -> None:
        """Test NaN / inf / negative prices are rejected"""
        session.get.return_value = make_response(
            [{"price": price, "lastUpdatedAt": "2025-05-08T04:30:11Z"}]
        )
        with pytest.raises(UpstreamError, match="invalid price"):
            adapter.get_price_history("NVDA", 50)

    def test_token_never_in_message(self, adapter, session) -> None:
        session.get.return_value = make_response(status=401)
        with pytest.raises(UpstreamError) as exc_info:
            adapter.get_price_history("NVDA", 50)
        assert TOKEN not in exc_info.value.message


class TestListStocks:
    """Test list_stocks"""

    def test_pass_through(self, adapter, session) -> None:
        payload = {"stocks": {"Nvidia Corporation": "NVDA"}}
        session.get.return_value = make_response(payload)

        assert adapter.list_stocks() == payload
        assert session.get.call_args[0][0] == "http://upstream.test/evaluation-service/stocks"

    def test_no_token_no_header(self, session) -> None:
        adapter = PriceSourceHttpAdapter(base_url="http://upstream.test", session=session)
        session.get.return_value = make_response({})
        adapter.list_stocks()
        assert "Authorization" not in session.get.call_args[1]["headers"]
