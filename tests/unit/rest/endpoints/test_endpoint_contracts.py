"""
엔드포인트 계약 공통 테스트

Futures에 등록된 모든 연산에 대해 필수 파라미터 검증, HTTP 메서드/경로,
서명 여부를 확인한다.
"""

from typing import Any
from urllib.parse import parse_qsl

import pytest

from binance_futures.client import Futures
from binance_futures.core.types import HttpMethod
from binance_futures.rest.errors import MissingParameterError
from binance_futures.rest.models import EndpointContract


OPERATIONS = sorted(Futures.operations().items())
WITH_REQUIRED = [(name, c) for name, c in OPERATIONS if c.required]
SINGLE_OMISSIONS = [(name, p.name) for name, c in WITH_REQUIRED for p in c.required]


def dummy_arguments(contract: EndpointContract) -> dict[str, Any]:
    """필수 파라미터를 채운 인자 생성"""
    arguments: dict[str, Any] = {}
    for param in contract.required:
        if param.item_required:
            arguments[param.name] = [{key: "1" for key in param.item_required}]
        else:
            arguments[param.name] = "1"
    return arguments


def sent_params(method: str, url: str, content: str | None) -> dict[str, str]:
    if content is not None:
        return dict(parse_qsl(content))
    if "?" in url:
        return dict(parse_qsl(url.split("?", 1)[1]))
    return {}


class TestRegistry:
    """등록 테이블 테스트"""

    def test_operation_counts(self) -> None:
        operations = Futures.operations()
        account = [c for c in operations.values() if c.path in {
            "/fapi/v3/balance", "/fapi/v2/balance", "/fapi/v3/account", "/fapi/v2/account",
        }]

        assert len(operations) == 64
        assert len(account) == 4

    def test_every_operation_is_callable(self) -> None:
        for name in Futures.operations():
            assert callable(getattr(Futures, name))


class TestRequiredParameters:
    """필수 파라미터 누락 시 네트워크 요청 없이 실패"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,contract", WITH_REQUIRED, ids=[n for n, _ in WITH_REQUIRED])
    async def test_missing_required(self, client, mock_http, name: str, contract) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            await getattr(client, name)()

        assert exc_info.value.names == tuple(p.name for p in contract.required)
        assert mock_http.request.await_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,omitted", SINGLE_OMISSIONS, ids=[f"{n}-{o}" for n, o in SINGLE_OMISSIONS])
    async def test_missing_one_required(self, client, mock_http, name: str, omitted: str) -> None:
        """필수 파라미터 하나만 빠져도 실패"""
        contract = Futures.operations()[name]
        arguments = dummy_arguments(contract)
        arguments[omitted] = None

        with pytest.raises(MissingParameterError) as exc_info:
            await getattr(client, name)(**arguments)

        assert exc_info.value.names == (omitted,)
        assert mock_http.request.await_count == 0


class TestWireFormat:
    """모든 연산의 메서드/경로/서명"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,contract", OPERATIONS, ids=[n for n, _ in OPERATIONS])
    async def test_request(self, client, mock_http, last_request, name: str, contract) -> None:
        await getattr(client, name)(**dummy_arguments(contract))

        method, url, _, content = last_request(mock_http)
        params = sent_params(method, url, content)

        assert method == contract.method.value
        assert url.split("?", 1)[0] == f"https://fapi.binance.com{contract.path}"
        if contract.signed:
            assert "timestamp" in params
            assert "signature" in params
        else:
            assert "signature" not in params
        if contract.method in (HttpMethod.POST, HttpMethod.PUT):
            assert "?" not in url
        for param in contract.required:
            assert param.wire_name in params
