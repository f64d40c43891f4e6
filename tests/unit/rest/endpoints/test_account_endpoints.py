"""
계좌 엔드포인트 테스트
"""

from unittest.mock import AsyncMock, patch
from urllib.parse import parse_qsl

import pytest

from binance_futures.client import Futures
from binance_futures.core.types import HttpMethod
from binance_futures.rest.endpoints import Account
from binance_futures.rest.errors import MissingParameterError


def query_of(url: str) -> dict[str, str]:
    return dict(parse_qsl(url.split("?", 1)[1]))


class TestAccountEndpoints:
    """Account 그룹 테스트"""

    def test_all_signed_get(self) -> None:
        """계좌 엔드포인트는 모두 서명된 GET"""
        contracts = Account.operations().values()

        assert len(contracts) == 14
        assert all(c.signed for c in contracts)
        assert all(c.method is HttpMethod.GET for c in contracts)

    @pytest.mark.asyncio
    async def test_balance_v3(self, client, mock_http, last_request, make_response) -> None:
        mock_http.request.return_value = make_response(
            200,
            [{"asset": "USDT", "balance": "100.0"}],
            headers={"x-mbx-used-weight-1m": "5"},
        )

        response = await client.futures_account_balance_v3()

        method, url, headers, _ = last_request(mock_http)
        assert method == "GET"
        assert url.startswith("https://fapi.binance.com/fapi/v3/balance?timestamp=")
        assert "signature" in query_of(url)
        assert headers["X-MBX-APIKEY"] == "test_api_key"
        assert response.data[0]["asset"] == "USDT"
        assert response.rate_limit.used_weight_1m == 5

    @pytest.mark.asyncio
    async def test_commission_rate(self, client, mock_http, last_request) -> None:
        await client.user_commission_rate("btcusdt")

        _, url, _, _ = last_request(mock_http)
        assert query_of(url)["symbol"] == "BTCUSDT"

    @pytest.mark.asyncio
    async def test_income_history_options(self, client, mock_http, last_request) -> None:
        await client.get_income_history(income_type="FUNDING_FEE", page=2, limit=100)

        _, url, _, _ = last_request(mock_http)
        params = query_of(url)
        assert params["incomeType"] == "FUNDING_FEE"
        assert params["page"] == "2"
        assert params["limit"] == "100"
        assert "symbol" not in params

    @pytest.mark.asyncio
    async def test_download_id_requires_range(self, client, mock_http) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            await client.get_download_id_transaction_history(start_time=1)

        assert exc_info.value.names == ("end_time",)

    @pytest.mark.asyncio
    async def test_default_recv_window_from_client(self, make_response, last_request) -> None:
        client = Futures(api_key="k", api_secret="s", recv_window=7000)
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = make_response(200, {})
            mock_get_client.return_value = mock_http_client

            await client.current_position_mode()

        _, url, _, _ = last_request(mock_http_client)
        assert query_of(url)["recvWindow"] == "7000"
