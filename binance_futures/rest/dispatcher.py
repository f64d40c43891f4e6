"""
Binance Futures REST 요청 디스패처

HMAC-SHA256 서명, 응답 분류, Rate Limit 헤더 전달.
재시도하지 않으며 모든 에러는 호출자에게 그대로 전달.
"""

import asyncio
import logging
import time
from typing import Any, Mapping

import httpx

from binance_futures.core.constants import BinanceEndpoints, Defaults, Headers
from binance_futures.core.types import HttpMethod
from binance_futures.rest.errors import (
    ApiError,
    ClientError,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
)
from binance_futures.rest.models import Credentials, RequestDescriptor, Response
from binance_futures.rest.rate_limit import RateLimitUsage
from binance_futures.rest.signer import RequestSigner, build_query_string
from binance_futures.rest.validation import validate_recv_window

logger = logging.getLogger(__name__)


# Rate Limit 초과(429) 및 IP 차단(418)
RATE_LIMIT_STATUS_CODES = (418, 429)


class RestDispatcher:
    """REST 요청 디스패처

    생성 시점에만 설정되며 이후 base_url, 인증 정보, timeout은 변경 불가.
    호출 간 공유 상태는 HTTP 커넥션 풀뿐이다.

    Args:
        api_key: API 키 (있으면 모든 요청에 X-MBX-APIKEY 헤더 전송)
        api_secret: API 시크릿 (서명 엔드포인트에 필요)
        base_url: REST API 베이스 URL
        timeout: 요청 타임아웃 (초, 호출 단위)
        proxy: 프록시 URL (선택)
        recv_window: 기본 recvWindow (밀리초, 선택)
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = BinanceEndpoints.PROD_REST_URL,
        timeout: float = Defaults.TIMEOUT_SEC,
        proxy: str | None = None,
        recv_window: int | None = None,
    ):
        if recv_window is not None:
            validate_recv_window(recv_window)

        self._credentials = Credentials(api_key=api_key or "", api_secret=api_secret or "")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._proxy = proxy
        self._recv_window = recv_window

        self._signer = RequestSigner(self._credentials.api_secret)
        self._client: httpx.AsyncClient | None = None

    # -------------------------------------------------------------------------
    # 설정 (읽기 전용)
    # -------------------------------------------------------------------------

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def proxy(self) -> str | None:
        return self._proxy

    @property
    def recv_window(self) -> int | None:
        return self._recv_window

    # -------------------------------------------------------------------------
    # HTTP 클라이언트
    # -------------------------------------------------------------------------

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            if self._proxy:
                transport = httpx.AsyncHTTPTransport(proxy=self._proxy)
            else:
                transport = None
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=transport)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "RestDispatcher":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # 요청
    # -------------------------------------------------------------------------

    def _get_timestamp(self) -> int:
        """현재 타임스탬프 (밀리초)"""
        return int(time.time() * 1000)

    async def public_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> Response:
        """서명 없는 요청 (시장 데이터)"""
        descriptor = RequestDescriptor(
            method=HttpMethod(method),
            path=path,
            params=dict(params) if params else {},
            signed=False,
        )
        return await self.dispatch(descriptor)

    async def sign_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> Response:
        """서명 요청 (거래/계좌)

        recvWindow(기본값 설정 시)와 timestamp를 채운 뒤 서명한다.
        호출자가 recvWindow/timestamp를 직접 넘기면 그 값을 사용.
        """
        request_params = dict(params) if params else {}

        if request_params.get("recvWindow") is None:
            request_params.pop("recvWindow", None)
            if self._recv_window is not None:
                request_params["recvWindow"] = self._recv_window
        if "recvWindow" in request_params:
            validate_recv_window(request_params["recvWindow"])

        if request_params.get("timestamp") is None:
            request_params.pop("timestamp", None)
            request_params["timestamp"] = self._get_timestamp()

        descriptor = RequestDescriptor(
            method=HttpMethod(method),
            path=path,
            params=request_params,
            signed=True,
        )
        return await self.dispatch(descriptor)

    async def dispatch(self, request: RequestDescriptor) -> Response:
        """요청 기술자를 전송하고 응답 반환

        Raises:
            SigningError: 서명 요청인데 시크릿이 없는 경우
            ClientError: 4xx 응답 (429/418은 RateLimitError)
            ServerError: 5xx 응답
            RequestTimeoutError: 타임아웃
            NetworkError: 연결 실패
        """
        # 서명 실패는 네트워크 요청 전에 발생
        if request.signed:
            query_string = self._signer.signed_query(request.params)
        else:
            query_string = build_query_string(request.params)

        headers = {}
        if self._credentials.api_key:
            headers[Headers.API_KEY] = self._credentials.api_key

        url = f"{self._base_url}{request.path}"
        content: str | None = None

        if request.method.sends_body:
            headers["Content-Type"] = Headers.FORM_CONTENT_TYPE
            content = query_string
        elif query_string:
            url = f"{url}?{query_string}"

        logger.debug(
            "Request",
            extra={
                "method": request.method.value,
                "path": request.path,
                "signed": request.signed,
            },
        )

        client = await self._get_client()

        try:
            response = await asyncio.wait_for(
                client.request(
                    request.method.value,
                    url,
                    headers=headers,
                    content=content,
                ),
                timeout=self._timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(
                "Request timeout",
                extra={"path": request.path, "timeout": self._timeout},
            )
            raise RequestTimeoutError(
                f"Request timed out after {self._timeout}s",
                method=request.method.value,
                url=url,
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "Request error",
                extra={"path": request.path, "error": str(e)},
            )
            raise NetworkError(
                f"Request failed: {e}",
                method=request.method.value,
                url=url,
            ) from e

        return self._handle_response(request, response)

    def _handle_response(self, request: RequestDescriptor, response: httpx.Response) -> Response:
        """응답 분류: 2xx는 Response, 그 외는 에러"""
        headers = response.headers
        usage = RateLimitUsage.from_headers(headers)
        status = response.status_code

        if usage.should_warn:
            logger.warning(
                "Rate limit usage high",
                extra={"path": request.path, "rate_info": usage.to_dict()},
            )

        data = self._decode_body(response)

        if 200 <= status < 300:
            return Response(
                status_code=status,
                headers=headers,
                data=data,
                rate_limit=usage,
            )

        if isinstance(data, dict):
            code = data.get("code", status)
            message = data.get("msg", response.text)
        else:
            code = status
            message = data if isinstance(data, str) else response.text

        logger.warning(
            "Binance API error",
            extra={
                "path": request.path,
                "status": status,
                "code": code,
                "error_message": message,
            },
        )

        if status in RATE_LIMIT_STATUS_CODES:
            raise RateLimitError(
                status,
                code,
                message,
                headers=headers,
                data=data,
                retry_after=usage.retry_after,
            )
        if 400 <= status < 500:
            raise ClientError(status, code, message, headers=headers, data=data)
        if status >= 500:
            raise ServerError(status, code, message, headers=headers, data=data)
        raise ApiError(status, code, message, headers=headers, data=data)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """JSON 본문 디코딩 (실패 시 텍스트)"""
        try:
            return response.json()
        except ValueError:
            return response.text
