"""時間戳對齊器

將兩條獨立取樣的價格序列，依最接近的時間戳配對成等長數值序列。
最近鄰線性掃描為 O(n·m)，以幾分鐘內的樣本量而言可接受。
"""

from datetime import timedelta

from libs.shared.src.constants.price_source_settings import ALIGNMENT_TOLERANCE
from libs.shared.src.dtos.pricing.sample_dto import SampleDTO, SampleSeries


def _sort_by_time(series: SampleSeries) -> list[SampleDTO]:
    """依 observed_at 遞增排序 (回傳新 list，不動原序列)"""
    return sorted(series, key=lambda sample: sample["observed_at"])


def _find_nearest(
    sample: SampleDTO, candidates: list[SampleDTO]
) -> tuple[SampleDTO, timedelta]:
    """在 candidates 中找出時間差最小者

    同樣接近時保留最先掃描到的 (即較早的樣本)
    """
    nearest = candidates[0]
    min_diff = abs(nearest["observed_at"] - sample["observed_at"])

    for candidate in candidates[1:]:
        diff = abs(candidate["observed_at"] - sample["observed_at"])
        if diff < min_diff:
            min_diff = diff
            nearest = candidate

    return nearest, min_diff


def align_series(
    series_a: SampleSeries,
    series_b: SampleSeries,
    tolerance: timedelta = ALIGNMENT_TOLERANCE,
) -> tuple[list[float], list[float]]:
    """
    對齊兩條價格序列

    規則：
    - A 的每個樣本配對 B 中時間差最小的樣本
    - 時間差 <= tolerance 才納入，否則捨棄該 A 樣本 (不補值、不內插)
    - 同一個 B 樣本可配對多個 A 樣本
    - 輸出順序依 A 排序後的順序

    Args:
        series_a: 序列 A
        series_b: 序列 B
        tolerance: 最大容許時間差 (預設 5 分鐘)

    Returns:
        tuple: (A 的價格序列, B 的價格序列)，等長
    """
    if not series_a or not series_b:
        return [], []

    sorted_a = _sort_by_time(series_a)
    sorted_b = _sort_by_time(series_b)

    values_a: list[float] = []
    values_b: list[float] = []

    for sample in sorted_a:
        nearest, diff = _find_nearest(sample, sorted_b)
        if diff <= tolerance:
            values_a.append(sample["price"])
            values_b.append(nearest["price"])

    return values_a, values_b
