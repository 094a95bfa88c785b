"""Price Source HTTP Adapter - Real Implementation

Authenticated GET against the upstream evaluation service.
Every transport failure is reported as UpstreamError.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any

import requests

from libs.pricing.src.ports.price_source_port import PriceSourcePort
from libs.shared.src.constants.price_source_settings import (
    PRICE_SOURCE_BASE_URL,
    PRICE_SOURCE_TIMEOUT_SECONDS,
)
from libs.shared.src.dtos.pricing.price_history_item_dto import StockListDTO
from libs.shared.src.dtos.pricing.sample_dto import SampleDTO, SampleSeries
from libs.shared.src.errors.upstream_error import UpstreamError


class PriceSourceHttpAdapter(PriceSourcePort):
    """Price Source HTTP Adapter

    Data source: upstream stock exchange evaluation service
    Requires a bearer token (PRICE_SOURCE_TOKEN)
    """

    def __init__(
        self,
        base_url: str = PRICE_SOURCE_BASE_URL,
        token: str | None = None,
        timeout: float = PRICE_SOURCE_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._base_url = base_url.rstrip("/")
        self._token = token or ""
        self._timeout = timeout
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Authenticated GET, returns decoded JSON"""
        url = f"{self._base_url}{path}"
        try:
            response = self._session.get(
                url, headers=self._headers(), params=params, timeout=self._timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.Timeout:
            self._logger.warning(f"Upstream timeout after {self._timeout}s: {path}")
            raise UpstreamError(
                f"Failed to fetch data from price source: timed out after {self._timeout}s"
            ) from None
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            self._logger.warning(f"Upstream returned HTTP {status}: {path}")
            raise UpstreamError(
                f"Failed to fetch data from price source: HTTP {status}",
                status_code=status,
            ) from None
        except requests.JSONDecodeError:
            raise UpstreamError(
                "Failed to fetch data from price source: invalid JSON payload"
            ) from None
        except requests.RequestException as e:
            self._logger.warning(f"Upstream request failed: {path}: {type(e).__name__}")
            raise UpstreamError(
                f"Failed to fetch data from price source: {e}"
            ) from None
        except ValueError:
            raise UpstreamError(
                "Failed to fetch data from price source: invalid JSON payload"
            ) from None

    @staticmethod
    def _parse_timestamp(raw: str) -> datetime:
        """Parse ISO-8601; naive timestamps are taken as UTC"""
        observed_at = datetime.fromisoformat(raw.strip())
        if observed_at.tzinfo is None:
            observed_at = observed_at.replace(tzinfo=timezone.utc)
        return observed_at

    @staticmethod
    def _quote_ticker(ticker: str) -> str:
        """Escape the ticker as a single path segment

        Dot-only tickers are percent-encoded too, or "." and ".." would be
        resolved as path segments.
        """
        quoted = requests.utils.quote(ticker, safe="")
        if quoted and set(quoted) == {"."}:
            quoted = quoted.replace(".", "%2E")
        return quoted

    def _parse_sample(self, item: Any) -> SampleDTO:
        try:
            price = float(item["price"])
            raw_timestamp = str(item["lastUpdatedAt"])
            observed_at = self._parse_timestamp(raw_timestamp)
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(
                f"Failed to fetch data from price source: malformed sample ({e})"
            ) from None

        if not math.isfinite(price) or price < 0:
            raise UpstreamError(
                f"Failed to fetch data from price source: invalid price {price}"
            )

        return {
            "price": price,
            "observed_at": observed_at,
            "last_updated_at": raw_timestamp,
        }

    def get_price_history(self, ticker: str, minutes: int) -> SampleSeries:
        """Get samples of the last `minutes` minutes"""
        payload = self._get(
            f"/stocks/{self._quote_ticker(ticker)}", params={"minutes": minutes}
        )

        # Without a usable window the upstream answers {"stock": {...}}
        if isinstance(payload, dict) and "stock" in payload:
            payload = [payload["stock"]]

        if not isinstance(payload, list):
            raise UpstreamError(
                "Failed to fetch data from price source: expected a list of samples"
            )

        series = tuple(self._parse_sample(item) for item in payload)
        self._logger.info(f"Fetched {len(series)} samples for {ticker} ({minutes}m)")
        return series

    def list_stocks(self) -> StockListDTO:
        """Get upstream ticker list (pass-through)"""
        return self._get("/stocks")
