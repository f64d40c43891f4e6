"""
Binance USDⓈ-M Futures REST 커넥터
"""

from binance_futures.client import Futures
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
from binance_futures.rest.models import Response
from binance_futures.rest.rate_limit import RateLimitUsage

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "BinanceFuturesError",
    "ClientError",
    "Futures",
    "InvalidParameterError",
    "MissingParameterError",
    "NetworkError",
    "RateLimitError",
    "RateLimitUsage",
    "RequestTimeoutError",
    "Response",
    "ServerError",
    "SigningError",
]
