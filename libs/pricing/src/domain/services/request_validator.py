"""查詢參數驗證"""

from libs.shared.src.constants.price_source_settings import SUPPORTED_AGGREGATION
from libs.shared.src.errors.validation_error import ValidationError


def parse_minutes(minutes: int | str | None) -> int:
    """
    驗證並轉換時間窗參數

    Args:
        minutes: 時間窗 (分鐘)，HTTP 來源為字串

    Returns:
        int: 正整數分鐘數

    Raises:
        ValidationError: 缺少參數或非正整數
    """
    if minutes is None or (isinstance(minutes, str) and not minutes.strip()):
        raise ValidationError("Missing required parameter: minutes")

    if isinstance(minutes, bool):
        raise ValidationError(f"minutes must be a positive integer, got {minutes!r}")

    try:
        value = int(str(minutes).strip())
    except ValueError:
        raise ValidationError(
            f"minutes must be a positive integer, got {minutes!r}"
        ) from None

    if value <= 0:
        raise ValidationError(f"minutes must be a positive integer, got {minutes!r}")
    return value


def check_aggregation(aggregation: str | None) -> None:
    """aggregation 若有提供，只接受 average (空白值視同未提供)"""
    if aggregation is None or not aggregation.strip():
        return
    if aggregation.strip() != SUPPORTED_AGGREGATION:
        raise ValidationError(
            f"Only aggregation={SUPPORTED_AGGREGATION} is supported"
        )


def parse_ticker_pair(tickers: list[str] | None) -> tuple[str, str]:
    """
    驗證相關係數查詢的 ticker 參數

    Raises:
        ValidationError: 數量不是 2 或兩者相同
    """
    cleaned = [str(t).strip() for t in (tickers or []) if str(t).strip()]
    if len(cleaned) != 2:
        raise ValidationError(
            f"Exactly two ticker parameters are required, got {len(cleaned)}"
        )

    ticker_a, ticker_b = cleaned
    if ticker_a == ticker_b:
        raise ValidationError("The two ticker parameters must be distinct")
    return ticker_a, ticker_b
