"""Price History Item DTO

JSON shape returned to callers
"""

from typing import Any, TypedDict


class PriceHistoryItemDTO(TypedDict):
    """Single price history item"""

    price: float
    lastUpdatedAt: str


# Type alias for upstream ticker list (pass-through, dynamic keys)
# e.g. {"stocks": {"Apple Inc.": "AAPL", ...}}
StockListDTO = dict[str, Any]
