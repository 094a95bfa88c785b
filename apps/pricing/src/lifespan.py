"""Pricing App 生命週期管理

Apps 層的 DI 配置：從環境變數讀取上游設定，覆蓋 libs 預設的 PriceSourcePort
"""

import logging
import os

from injector import Injector, Module, provider, singleton

# Libs Modules
from libs.pricing.src.lifespan import configure as configure_pricing

# Driven Ports & Adapters
from libs.pricing.src.ports.price_source_port import PriceSourcePort
from libs.pricing.src.adapters.driven.http.price_source_http_adapter import (
    PriceSourceHttpAdapter,
)
from libs.pricing.src.adapters.driven.cache.cached_price_source_adapter import (
    CachedPriceSourceAdapter,
)
from libs.shared.src.constants.price_source_settings import (
    PRICE_SOURCE_BASE_URL,
    PRICE_SOURCE_TIMEOUT_SECONDS,
    SAMPLE_CACHE_TTL_SECONDS,
)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class PricingAppModule(Module):
    """Pricing App DI 配置

    PRICE_SOURCE_BASE_URL / PRICE_SOURCE_TOKEN / PRICE_SOURCE_TIMEOUT_SECONDS
    SAMPLE_CACHE_TTL_SECONDS
    """

    @singleton
    @provider
    def provide_price_source(self) -> PriceSourcePort:
        """覆蓋 libs 的 PriceSourcePort，套用部署設定"""
        upstream = PriceSourceHttpAdapter(
            base_url=os.environ.get("PRICE_SOURCE_BASE_URL", PRICE_SOURCE_BASE_URL),
            token=os.environ.get("PRICE_SOURCE_TOKEN"),
            timeout=_env_float(
                "PRICE_SOURCE_TIMEOUT_SECONDS", PRICE_SOURCE_TIMEOUT_SECONDS
            ),
        )
        if not os.environ.get("PRICE_SOURCE_TOKEN"):
            logging.getLogger(self.__class__.__name__).warning(
                "PRICE_SOURCE_TOKEN not set, upstream calls are unauthenticated"
            )
        return CachedPriceSourceAdapter(
            inner=upstream,
            ttl_seconds=_env_float("SAMPLE_CACHE_TTL_SECONDS", SAMPLE_CACHE_TTL_SECONDS),
        )


_injector: Injector | None = None


def startup() -> Injector:
    """啟動 DI 容器，組合所有必要的 Modules"""
    global _injector

    # 抑制噪音 logger
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    _injector = Injector(
        [
            configure_pricing,
            PricingAppModule(),
        ]
    )
    return _injector


def shutdown() -> None:
    """關閉並釋放資源"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """取得 DI 容器，若未初始化則自動啟動"""
    global _injector
    if _injector is None:
        startup()
    return _injector
