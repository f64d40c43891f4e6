"""
Binance Rate Limit 사용량

응답 헤더에서 Rate Limit 사용량을 추출.
요청 단위로 생성되는 불변 값이며 요청을 제한하지 않는다.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from binance_futures.core.constants import Headers, RateLimitThresholds


def _parse_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class RateLimitUsage:
    """Rate Limit 사용량

    Binance Rate Limit 헤더:
    - X-MBX-USED-WEIGHT-(intervalNum)(intervalLetter): 사용된 요청 가중치
    - X-MBX-ORDER-COUNT-(intervalNum)(intervalLetter): 주문 수
    - Retry-After: 429/418 응답 시 대기 시간 (초)

    Attributes:
        used_weight: 구간별 사용 가중치 (예: {"1m": 25})
        order_count: 구간별 주문 수 (예: {"10s": 1, "1m": 3})
        retry_after: Retry-After 값 (없으면 None)
    """

    used_weight: Mapping[str, int] = field(default_factory=dict)
    order_count: Mapping[str, int] = field(default_factory=dict)
    retry_after: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any]) -> "RateLimitUsage":
        """응답 헤더에서 사용량 추출

        Args:
            headers: HTTP 응답 헤더 (대소문자 무관)
        """
        used_weight: dict[str, int] = {}
        order_count: dict[str, int] = {}
        retry_after: int | None = None

        for key, value in headers.items():
            name = key.lower()
            if name.startswith(Headers.USED_WEIGHT_PREFIX):
                parsed = _parse_int(value)
                if parsed is not None:
                    used_weight[name[len(Headers.USED_WEIGHT_PREFIX):]] = parsed
            elif name.startswith(Headers.ORDER_COUNT_PREFIX):
                parsed = _parse_int(value)
                if parsed is not None:
                    order_count[name[len(Headers.ORDER_COUNT_PREFIX):]] = parsed
            elif name == Headers.RETRY_AFTER:
                retry_after = _parse_int(value)

        return cls(
            used_weight=used_weight,
            order_count=order_count,
            retry_after=retry_after,
        )

    @property
    def used_weight_1m(self) -> int:
        """1분간 사용된 요청 가중치"""
        return self.used_weight.get("1m", 0)

    @property
    def order_count_1m(self) -> int:
        """1분간 주문 수"""
        return self.order_count.get("1m", 0)

    @property
    def should_warn(self) -> bool:
        """경고 임계값 도달 여부"""
        return self.used_weight_1m >= RateLimitThresholds.WEIGHT_WARN

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (로깅용)"""
        return {
            "used_weight": dict(self.used_weight),
            "order_count": dict(self.order_count),
            "retry_after": self.retry_after,
        }
