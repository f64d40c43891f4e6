"""
시장 데이터 엔드포인트 테스트
"""

from unittest.mock import AsyncMock, patch
from urllib.parse import parse_qsl

import pytest

from binance_futures.core.constants import Headers
from binance_futures.core.types import ContractType
from binance_futures.rest.errors import MissingParameterError


def query_of(url: str) -> list[tuple[str, str]]:
    return parse_qsl(url.split("?", 1)[1]) if "?" in url else []


class TestMarketEndpoints:
    """Market 그룹 테스트"""

    @pytest.mark.asyncio
    async def test_ping(self, client, mock_http, last_request) -> None:
        response = await client.ping()

        _, url, _, _ = last_request(mock_http)
        assert url == "https://fapi.binance.com/fapi/v1/ping"
        assert response.data == {}

    @pytest.mark.asyncio
    async def test_depth_uppercases_symbol(self, client, mock_http, last_request) -> None:
        """소문자 symbol은 대문자로 전송"""
        await client.depth("btcusdt", limit=5)

        _, url, _, _ = last_request(mock_http)
        assert query_of(url) == [("symbol", "BTCUSDT"), ("limit", "5")]

    @pytest.mark.asyncio
    async def test_optional_none_omitted(self, client, mock_http, last_request) -> None:
        await client.klines("BTCUSDT", "1m", start_time=None, limit=100)

        _, url, _, _ = last_request(mock_http)
        assert query_of(url) == [("symbol", "BTCUSDT"), ("interval", "1m"), ("limit", "100")]

    @pytest.mark.asyncio
    async def test_exchange_info_symbols_list(self, client, mock_http, last_request) -> None:
        await client.exchange_info(symbols=["btcusdt", "ethusdt"])

        _, url, _, _ = last_request(mock_http)
        assert query_of(url) == [("symbols", '["BTCUSDT","ETHUSDT"]')]

    @pytest.mark.asyncio
    async def test_continuous_klines(self, client, mock_http, last_request) -> None:
        await client.continuous_klines("btcusdt", ContractType.PERPETUAL, "1h", end_time=1700000000000)

        _, url, _, _ = last_request(mock_http)
        assert query_of(url) == [
            ("pair", "BTCUSDT"),
            ("contractType", "PERPETUAL"),
            ("interval", "1h"),
            ("endTime", "1700000000000"),
        ]

    @pytest.mark.asyncio
    async def test_historical_trades_sends_api_key(self, client, mock_http, last_request) -> None:
        """MARKET_DATA 엔드포인트는 API 키 헤더 필요 (서명은 불필요)"""
        await client.historical_trades("BTCUSDT", from_id=100)

        _, url, headers, _ = last_request(mock_http)
        assert headers[Headers.API_KEY] == "test_api_key"
        assert query_of(url) == [("symbol", "BTCUSDT"), ("fromId", "100")]

    @pytest.mark.asyncio
    async def test_public_endpoint_without_credentials(
        self, public_client, make_response, last_request
    ) -> None:
        """인증 정보 없이 공개 엔드포인트 호출 가능"""
        with patch.object(public_client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = make_response(200, {"serverTime": 1})
            mock_get_client.return_value = mock_http_client

            response = await public_client.time()

        assert response.data == {"serverTime": 1}
        _, _, headers, _ = last_request(mock_http_client)
        assert Headers.API_KEY not in headers

    @pytest.mark.asyncio
    async def test_ratio_endpoint(self, client, mock_http, last_request) -> None:
        await client.top_long_short_position_ratio("btcusdt", "5m", limit=30)

        _, url, _, _ = last_request(mock_http)
        assert url.startswith("https://fapi.binance.com/futures/data/topLongShortPositionRatio?")
        assert query_of(url) == [("symbol", "BTCUSDT"), ("period", "5m"), ("limit", "30")]

    @pytest.mark.asyncio
    async def test_basis_requires_limit(self, client, mock_http) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            await client.basis("BTCUSDT", "PERPETUAL", "5m")

        assert exc_info.value.names == ("limit",)
        assert mock_http.request.await_count == 0
