"""Pearson 相關係數計算器

r = (nΣxy − ΣxΣy) / (sqrt(nΣx² − (Σx)²) · sqrt(nΣy² − (Σy)²))

以等價的去均值形式計算，避免股價量級下 nΣx² 與 (Σx)² 相減的抵銷誤差。
"""

import numpy as np


def _is_constant(values: np.ndarray) -> bool:
    """所有值相同 → 變異數為 0"""
    return bool(np.all(values == values[0]))


def calculate_correlation(
    values_a: list[float] | np.ndarray, values_b: list[float] | np.ndarray
) -> float:
    """
    計算兩條等長序列的 Pearson 相關係數

    Args:
        values_a: 序列 A
        values_b: 序列 B (與 A 等長)

    Returns:
        float: 相關係數，落在 [-1, 1]
            - 長度不符或空序列 → 0.0
            - 任一序列變異數為 0 (例如價格不變) → 0.0，不回傳 NaN
    """
    x = np.asarray(values_a, dtype=float)
    y = np.asarray(values_b, dtype=float)

    if len(x) != len(y) or len(x) == 0:
        return 0.0

    if _is_constant(x) or _is_constant(y):
        return 0.0

    dx = x - x.mean()
    dy = y - y.mean()

    denominator_x = np.sqrt(np.sum(dx * dx))
    denominator_y = np.sqrt(np.sum(dy * dy))

    if denominator_x == 0 or denominator_y == 0:
        return 0.0

    r = np.sum(dx * dy) / (denominator_x * denominator_y)
    return float(np.clip(r, -1.0, 1.0))
