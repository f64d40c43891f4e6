"""
요청 서명

파라미터를 정규 쿼리 문자열로 직렬화하고 HMAC-SHA256 서명을 생성.
서명한 문자열이 그대로 전송되어야 서버 검증을 통과한다.
"""

import hashlib
import hmac
import json
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping
from urllib.parse import urlencode

from binance_futures.rest.errors import SigningError


def format_decimal(value: float | Decimal) -> str:
    """지수 표기 없는 십진 문자열 (예: 1e-05 → 0.00001)

    float는 repr 기준으로 변환해 사용자가 입력한 자릿수를 유지한다.
    """
    if isinstance(value, float):
        value = Decimal(repr(value))
    return format(value, "f")


def serialize_value(value: Any) -> str:
    """파라미터 값을 전송 문자열로 변환

    - bool: true/false
    - Enum: value
    - float/Decimal: 지수 표기 없는 십진수
    - list/tuple/dict: 공백 없는 JSON (batchOrders, symbols, orderIdList)
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (float, Decimal)):
        return format_decimal(value)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(_to_json(value), separators=(",", ":"))
    return str(value)


def _to_json(value: Any) -> Any:
    # json.dumps는 float를 default 없이 직접 인코딩하므로 먼저 변환
    if isinstance(value, bool):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (float, Decimal)):
        return format_decimal(value)
    if isinstance(value, dict):
        return {key: _to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    return value


def build_query_string(params: Mapping[str, Any]) -> str:
    """정규 쿼리 문자열 생성

    삽입 순서를 유지하며(정렬하지 않음) None 값은 제외.

    Args:
        params: 파라미터 (삽입 순서 유지)

    Returns:
        URL 인코딩된 쿼리 문자열
    """
    return urlencode(
        [(key, serialize_value(value)) for key, value in params.items() if value is not None]
    )


class RequestSigner:
    """HMAC-SHA256 요청 서명기

    Args:
        api_secret: API 시크릿 (빈 문자열이면 서명 시 SigningError)
    """

    def __init__(self, api_secret: str | None):
        self._secret = api_secret or ""

    def sign(self, query_string: str) -> str:
        """HMAC-SHA256 서명 생성

        Args:
            query_string: URL 인코딩된 파라미터 문자열

        Returns:
            16진수 서명 문자열

        Raises:
            SigningError: 시크릿이 없는 경우
        """
        if not self._secret:
            raise SigningError("API secret is required for signed endpoints")

        return hmac.new(
            self._secret.encode("utf-8"),
            query_string.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

    def signed_query(self, params: Mapping[str, Any]) -> str:
        """서명이 마지막 파라미터로 붙은 쿼리 문자열 반환"""
        query_string = build_query_string(params)
        signature = self.sign(query_string)
        if query_string:
            return f"{query_string}&signature={signature}"
        return f"signature={signature}"
