"""
Pricing Context 生命週期管理

遵循 P&A 架構：Driving Port → Application Service → Driven Port
"""

from injector import Module, provider, singleton

# Driving Ports
from libs.pricing.src.ports.get_average_price_port import GetAveragePricePort
from libs.pricing.src.ports.get_stock_correlation_port import (
    GetStockCorrelationPort,
)
from libs.pricing.src.ports.list_stocks_port import ListStocksPort

# Application Services
from libs.pricing.src.application.queries.get_average_price import (
    GetAveragePriceQuery,
)
from libs.pricing.src.application.queries.get_stock_correlation import (
    GetStockCorrelationQuery,
)
from libs.pricing.src.application.queries.list_stocks import ListStocksQuery

# Driven Ports
from libs.pricing.src.ports.price_source_port import PriceSourcePort

# Driven Adapters
from libs.pricing.src.adapters.driven.http.price_source_http_adapter import (
    PriceSourceHttpAdapter,
)
from libs.pricing.src.adapters.driven.cache.cached_price_source_adapter import (
    CachedPriceSourceAdapter,
)


class PricingModule(Module):
    """Pricing 依賴注入模組

    Driving Ports 共用同一個 PriceSourcePort (快取包裝後的上游來源)
    """

    @singleton
    @provider
    def provide_get_average_price(
        self, price_source: PriceSourcePort
    ) -> GetAveragePricePort:
        return GetAveragePriceQuery(price_source=price_source)

    @singleton
    @provider
    def provide_get_stock_correlation(
        self, price_source: PriceSourcePort
    ) -> GetStockCorrelationPort:
        return GetStockCorrelationQuery(price_source=price_source)

    @singleton
    @provider
    def provide_list_stocks(self, price_source: PriceSourcePort) -> ListStocksPort:
        return ListStocksQuery(price_source=price_source)

    # ============================================
    # Driven Ports → Real Adapters
    # ============================================

    @singleton
    @provider
    def provide_price_source(self) -> PriceSourcePort:
        return CachedPriceSourceAdapter(inner=PriceSourceHttpAdapter())


# Alias for libs composition
configure = PricingModule()
