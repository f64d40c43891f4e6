"""
파라미터 검증

요청을 만들기 전에 실행되는 순수 검사 함수.
"""

from typing import Any, Mapping

from binance_futures.core.constants import Limits
from binance_futures.rest.errors import InvalidParameterError, MissingParameterError


def is_missing(value: Any) -> bool:
    """None 또는 빈 문자열이면 누락으로 판단 (0, False는 유효)"""
    return value is None or value == ""


def validate_required_parameters(params: Mapping[str, Any]) -> None:
    """필수 파라미터 검증

    Args:
        params: 파라미터 이름 → 값

    Raises:
        MissingParameterError: 누락된 파라미터가 하나라도 있으면 전체 이름 포함
    """
    missing = [name for name, value in params.items() if is_missing(value)]
    if missing:
        raise MissingParameterError(missing)


def validate_recv_window(value: Any) -> None:
    """recvWindow 범위 검증 (1 ~ 60000ms)

    Raises:
        InvalidParameterError: 정수가 아니거나 범위를 벗어난 경우
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(
            f"recvWindow must be an integer, got {value!r}"
        )
    if not 0 < value <= Limits.MAX_RECV_WINDOW_MS:
        raise InvalidParameterError(
            f"recvWindow must be between 1 and {Limits.MAX_RECV_WINDOW_MS}, got {value}"
        )
