"""
rest/errors.py 테스트

에러 계층과 속성 확인
"""

import pytest

from binance_futures.rest.errors import (
    ApiError,
    BinanceFuturesError,
    ClientError,
    InvalidParameterError,
    MissingParameterError,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
    SigningError,
)


class TestHierarchy:
    """에러 계층 테스트"""

    @pytest.mark.parametrize(
        "error_class",
        [
            MissingParameterError,
            InvalidParameterError,
            SigningError,
            ApiError,
            ClientError,
            RateLimitError,
            ServerError,
            NetworkError,
            RequestTimeoutError,
        ],
    )
    def test_all_inherit_base(self, error_class: type) -> None:
        assert issubclass(error_class, BinanceFuturesError)

    def test_parameter_errors_are_value_errors(self) -> None:
        assert issubclass(MissingParameterError, ValueError)
        assert issubclass(InvalidParameterError, ValueError)

    def test_api_error_tree(self) -> None:
        assert issubclass(RateLimitError, ClientError)
        assert issubclass(ClientError, ApiError)
        assert issubclass(ServerError, ApiError)
        assert not issubclass(ServerError, ClientError)

    def test_timeout_is_network_error(self) -> None:
        assert issubclass(RequestTimeoutError, NetworkError)
        assert not issubclass(NetworkError, ApiError)


class TestMissingParameterError:
    """MissingParameterError 테스트"""

    def test_names(self) -> None:
        error = MissingParameterError(["symbol", "side"])

        assert error.names == ("symbol", "side")
        assert str(error) == "Missing required parameter(s): symbol, side"


class TestApiError:
    """ApiError 테스트"""

    def test_attributes(self) -> None:
        error = ClientError(
            400,
            -1102,
            "Mandatory parameter 'symbol' was not sent.",
            headers={"x-mbx-used-weight-1m": "5"},
            data={"code": -1102},
        )

        assert error.status_code == 400
        assert error.code == -1102
        assert error.message == "Mandatory parameter 'symbol' was not sent."
        assert error.headers == {"x-mbx-used-weight-1m": "5"}
        assert error.data == {"code": -1102}
        assert "[-1102]" in str(error)
        assert "HTTP 400" in str(error)

    def test_default_headers(self) -> None:
        error = ServerError(502, 502, "Bad Gateway")

        assert error.headers == {}
        assert error.data is None

    def test_rate_limit_retry_after(self) -> None:
        error = RateLimitError(429, -1003, "Too many requests", retry_after=30)

        assert error.retry_after == 30
        assert error.status_code == 429


class TestNetworkError:
    """NetworkError 테스트"""

    def test_attributes(self) -> None:
        error = RequestTimeoutError("timed out", method="GET", url="https://x/fapi/v1/ping")

        assert error.message == "timed out"
        assert error.method == "GET"
        assert error.url == "https://x/fapi/v1/ping"
        assert str(error) == "timed out"
