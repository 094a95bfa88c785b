"""Sample Cache Entry DTO"""

from typing import TypedDict

from libs.shared.src.dtos.pricing.sample_dto import SampleSeries


class CacheEntryDTO(TypedDict):
    """Cache entry, keyed by (ticker, minutes)

    Valid iff now - fetched_at < ttl; replaced wholesale on refresh.
    """

    series: SampleSeries
    fetched_at: float
