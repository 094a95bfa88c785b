"""ListStocksQuery 單元測試"""

import pytest

from libs.pricing.src.application.queries.list_stocks import ListStocksQuery
from libs.shared.src.errors.upstream_error import UpstreamError


class TestListStocksQuery:
    """股票清單查詢測試"""

    def test_pass_through(self, fake_source) -> None:
        result = ListStocksQuery(price_source=fake_source).execute()
        assert result == {
            "stocks": {"Apple Inc.": "AAPL", "Microsoft Corporation": "MSFT"}
        }

    def test_upstream_error(self, fake_source) -> None:
        fake_source.set_list_error(UpstreamError("down"))
        with pytest.raises(UpstreamError):
            ListStocksQuery(price_source=fake_source).execute()
