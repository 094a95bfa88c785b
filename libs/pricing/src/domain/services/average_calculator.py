"""平均價計算器"""

import numpy as np

from libs.shared.src.dtos.pricing.sample_dto import SampleSeries


def calculate_average(series: SampleSeries) -> float:
    """
    計算樣本序列的算術平均價

    Args:
        series: 價格樣本序列

    Returns:
        float: 平均價，空序列定義為 0.0 (非錯誤)
    """
    if not series:
        return 0.0

    prices = np.fromiter((sample["price"] for sample in series), dtype=float)
    return float(np.mean(prices))
