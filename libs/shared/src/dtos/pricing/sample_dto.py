"""Price Sample DTO"""

from datetime import datetime
from typing import TypedDict


class SampleDTO(TypedDict):
    """單筆價格樣本 (fetch 後不可變)"""

    price: float
    observed_at: datetime  # tz-aware
    last_updated_at: str  # 上游原始 ISO-8601 字串


# 單一 ticker 在單一時間窗內的樣本序列 (順序不保證)
SampleSeries = tuple[SampleDTO, ...]
