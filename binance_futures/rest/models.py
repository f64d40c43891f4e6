"""
REST 데이터 모델

요청 기술자, 응답, 엔드포인트 계약(파라미터 스키마) 정의.
모두 불변 dataclass.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from binance_futures.core.types import HttpMethod
from binance_futures.rest.rate_limit import RateLimitUsage


def to_camel(name: str) -> str:
    """snake_case → camelCase (예: recv_window → recvWindow)"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@dataclass(frozen=True)
class Credentials:
    """API 인증 정보

    api_key는 X-MBX-APIKEY 헤더로 전송되고,
    api_secret은 서명에만 사용되며 전송되지 않는다.
    """

    api_key: str = ""
    api_secret: str = ""

    def __repr__(self) -> str:
        # 시크릿 노출 방지
        masked = "***" if self.api_secret else ""
        return f"Credentials(api_key={self.api_key!r}, api_secret={masked!r})"


@dataclass(frozen=True)
class Param:
    """엔드포인트 파라미터 정의

    Attributes:
        name: 파이썬 인자 이름 (snake_case)
        wire: 전송 이름 (None이면 name의 camelCase)
        upper: 대문자 정규화 여부 (symbol, side 등)
        item_required: 객체 리스트 파라미터의 항목별 필수 키 (전송 이름)
    """

    name: str
    wire: str | None = None
    upper: bool = False
    item_required: tuple[str, ...] = ()

    @property
    def wire_name(self) -> str:
        return self.wire or to_camel(self.name)

    def normalize(self, value: Any) -> Any:
        """upper 플래그에 따라 값 정규화 (문자열 또는 문자열 리스트)"""
        if not self.upper:
            return value
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            return value.upper()
        if isinstance(value, (list, tuple)):
            return [self._upper_item(v) for v in value]
        return value

    @staticmethod
    def _upper_item(value: Any) -> Any:
        if isinstance(value, Enum):
            value = value.value
        return value.upper() if isinstance(value, str) else value


# 서명 엔드포인트 공통 옵션
SIGNED_OPTIONS: tuple[Param, ...] = (
    Param("recv_window"),
    Param("timestamp"),
)


@dataclass(frozen=True)
class EndpointContract:
    """엔드포인트 계약 (정적 메타데이터)

    Attributes:
        name: 클라이언트 메서드 이름
        method: HTTP 메서드
        path: API 경로 (예: /fapi/v1/order)
        required: 필수 파라미터 (위치 인자 순서)
        optional: 선택 파라미터 (키워드 전용)
        signed: 서명 필요 여부
        summary: 한 줄 설명 (docstring용)
    """

    name: str
    method: HttpMethod
    path: str
    required: tuple[Param, ...] = ()
    optional: tuple[Param, ...] = ()
    signed: bool = False
    summary: str = ""

    @property
    def options(self) -> tuple[Param, ...]:
        """서명 엔드포인트는 recv_window/timestamp 옵션 포함"""
        if self.signed:
            return self.optional + SIGNED_OPTIONS
        return self.optional


@dataclass(frozen=True)
class RequestDescriptor:
    """요청 기술자 (호출마다 생성, 전송 후 폐기)"""

    method: HttpMethod
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)
    signed: bool = False


@dataclass(frozen=True)
class Response:
    """정규화된 응답

    Attributes:
        status_code: HTTP 상태 코드
        headers: 응답 헤더 (원본 그대로)
        data: JSON 본문 (JSON이 아니면 텍스트)
        rate_limit: 헤더에서 추출한 Rate Limit 사용량
    """

    status_code: int
    headers: Mapping[str, str]
    data: Any
    rate_limit: RateLimitUsage = field(default_factory=RateLimitUsage)
