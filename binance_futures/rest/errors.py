"""
에러 계층

요청 전 검증 실패, 서명 실패, API 에러 응답, 네트워크 실패를 구분.
모든 에러는 호출자에게 그대로 전달되며 재시도하지 않는다.
"""

from typing import Any, Iterable, Mapping


class BinanceFuturesError(Exception):
    """라이브러리 에러 최상위 클래스"""
    pass


class MissingParameterError(BinanceFuturesError, ValueError):
    """필수 파라미터 누락

    네트워크 요청 전에 발생. 누락된 파라미터 이름을 모두 포함.
    """

    def __init__(self, names: Iterable[str]):
        self.names = tuple(names)
        super().__init__(
            f"Missing required parameter(s): {', '.join(self.names)}"
        )


class InvalidParameterError(BinanceFuturesError, ValueError):
    """파라미터 값 오류 (예: recvWindow 범위 초과)"""
    pass


class SigningError(BinanceFuturesError):
    """서명 불가 (API 시크릿 없음)"""
    pass


class ApiError(BinanceFuturesError):
    """Binance API 에러 응답

    Attributes:
        status_code: HTTP 상태 코드
        code: 서버 에러 코드 (본문에 없으면 HTTP 상태 코드)
        message: 서버 에러 메시지
        headers: 응답 헤더 (원본)
        data: 디코딩된 응답 본문 (JSON이 아니면 텍스트)
    """

    def __init__(
        self,
        status_code: int,
        code: int,
        message: str,
        headers: Mapping[str, str] | None = None,
        data: Any = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.headers = headers if headers is not None else {}
        self.data = data
        super().__init__(
            f"Binance API Error [{code}]: {message} (HTTP {status_code})"
        )


class ClientError(ApiError):
    """4xx 응답"""
    pass


class RateLimitError(ClientError):
    """Rate Limit 초과 에러

    429 (또는 418 IP 차단) 응답 수신 시 발생.
    retry_after 초 후 재시도 필요 (재시도는 호출자 책임).
    """

    def __init__(
        self,
        status_code: int,
        code: int,
        message: str,
        headers: Mapping[str, str] | None = None,
        data: Any = None,
        retry_after: int | None = None,
    ):
        self.retry_after = retry_after
        super().__init__(status_code, code, message, headers=headers, data=data)


class ServerError(ApiError):
    """5xx 응답"""
    pass


class NetworkError(BinanceFuturesError):
    """네트워크 실패 (연결, DNS, 연결 끊김)

    응답이 없으므로 요청 정보만 포함.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
    ):
        self.message = message
        self.method = method
        self.url = url
        super().__init__(message)


class RequestTimeoutError(NetworkError):
    """요청 타임아웃"""
    pass
