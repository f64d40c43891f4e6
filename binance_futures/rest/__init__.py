"""
REST 레이어

서명, 디스패치, 엔드포인트 계약, 에러 계층.
"""

from binance_futures.rest.composition import EndpointGroup
from binance_futures.rest.dispatcher import RestDispatcher
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
from binance_futures.rest.models import EndpointContract, Param, RequestDescriptor, Response
from binance_futures.rest.rate_limit import RateLimitUsage

__all__ = [
    "ApiError",
    "BinanceFuturesError",
    "ClientError",
    "EndpointContract",
    "EndpointGroup",
    "InvalidParameterError",
    "MissingParameterError",
    "NetworkError",
    "Param",
    "RateLimitError",
    "RateLimitUsage",
    "RequestDescriptor",
    "RequestTimeoutError",
    "Response",
    "RestDispatcher",
    "ServerError",
    "SigningError",
]
