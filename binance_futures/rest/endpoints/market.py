"""
시장 데이터 엔드포인트 (공개, 서명 불필요)

공식 문서: https://developers.binance.com/docs/derivatives/usds-margined-futures/market-data/rest-api
"""

from binance_futures.core.types import HttpMethod
from binance_futures.rest.composition import EndpointGroup
from binance_futures.rest.endpoints.common import (
    CONTRACT_TYPE,
    END_TIME,
    FROM_ID,
    INTERVAL,
    LIMIT,
    PAIR,
    PERIOD,
    START_TIME,
    SYMBOL,
    TIME_RANGE,
)
from binance_futures.rest.models import EndpointContract, Param


def _market(name: str, path: str, summary: str, **kwargs) -> EndpointContract:
    return EndpointContract(
        name=name,
        method=HttpMethod.GET,
        path=path,
        signed=False,
        summary=summary,
        **kwargs,
    )


def _ratio(name: str, path: str, summary: str) -> EndpointContract:
    """/futures/data 통계 엔드포인트 (symbol, period 필수)"""
    return _market(
        name,
        path,
        summary,
        required=(SYMBOL, PERIOD),
        optional=(LIMIT, START_TIME, END_TIME),
    )


class Market(EndpointGroup):
    """시장 데이터 엔드포인트 그룹"""

    contracts = (
        _market("ping", "/fapi/v1/ping", "Test Connectivity"),
        _market("time", "/fapi/v1/time", "Check Server Time"),
        _market(
            "exchange_info",
            "/fapi/v1/exchangeInfo",
            "Exchange Information",
            optional=(SYMBOL, Param("symbols", upper=True)),
        ),
        _market(
            "depth",
            "/fapi/v1/depth",
            "Order Book",
            required=(SYMBOL,),
            optional=(LIMIT,),
        ),
        _market(
            "trades",
            "/fapi/v1/trades",
            "Recent Trades List",
            required=(SYMBOL,),
            optional=(LIMIT,),
        ),
        _market(
            "historical_trades",
            "/fapi/v1/historicalTrades",
            "Old Trades Lookup (MARKET_DATA)",
            required=(SYMBOL,),
            optional=(LIMIT, FROM_ID),
        ),
        _market(
            "agg_trades",
            "/fapi/v1/aggTrades",
            "Compressed/Aggregate Trades List",
            required=(SYMBOL,),
            optional=(FROM_ID, START_TIME, END_TIME, LIMIT),
        ),
        _market(
            "klines",
            "/fapi/v1/klines",
            "Kline/Candlestick Data",
            required=(SYMBOL, INTERVAL),
            optional=TIME_RANGE,
        ),
        _market(
            "continuous_klines",
            "/fapi/v1/continuousKlines",
            "Continuous Contract Kline/Candlestick Data",
            required=(PAIR, CONTRACT_TYPE, INTERVAL),
            optional=TIME_RANGE,
        ),
        _market(
            "index_price_klines",
            "/fapi/v1/indexPriceKlines",
            "Index Price Kline/Candlestick Data",
            required=(PAIR, INTERVAL),
            optional=TIME_RANGE,
        ),
        _market(
            "mark_price_klines",
            "/fapi/v1/markPriceKlines",
            "Mark Price Kline/Candlestick Data",
            required=(SYMBOL, INTERVAL),
            optional=TIME_RANGE,
        ),
        _market(
            "premium_index_klines",
            "/fapi/v1/premiumIndexKlines",
            "Premium Index Kline Data",
            required=(SYMBOL, INTERVAL),
            optional=TIME_RANGE,
        ),
        _market(
            "premium_index",
            "/fapi/v1/premiumIndex",
            "Mark Price and Funding Rate",
            optional=(SYMBOL,),
        ),
        _market(
            "funding_rate_history",
            "/fapi/v1/fundingRate",
            "Get Funding Rate History",
            optional=(SYMBOL, START_TIME, END_TIME, LIMIT),
        ),
        _market("funding_info", "/fapi/v1/fundingInfo", "Get Funding Rate Info"),
        _market(
            "ticker_24hr",
            "/fapi/v1/ticker/24hr",
            "24hr Ticker Price Change Statistics",
            optional=(SYMBOL,),
        ),
        _market(
            "ticker_price",
            "/fapi/v1/ticker/price",
            "Symbol Price Ticker",
            optional=(SYMBOL,),
        ),
        _market(
            "ticker_price_v2",
            "/fapi/v2/ticker/price",
            "Symbol Price Ticker V2",
            optional=(SYMBOL,),
        ),
        _market(
            "book_ticker",
            "/fapi/v1/ticker/bookTicker",
            "Symbol Order Book Ticker",
            optional=(SYMBOL,),
        ),
        _market(
            "open_interest",
            "/fapi/v1/openInterest",
            "Open Interest",
            required=(SYMBOL,),
        ),
        _market(
            "delivery_price",
            "/futures/data/delivery-price",
            "Quarterly Contract Settlement Price",
            required=(PAIR,),
        ),
        _ratio(
            "open_interest_hist",
            "/futures/data/openInterestHist",
            "Open Interest Statistics",
        ),
        _ratio(
            "top_long_short_account_ratio",
            "/futures/data/topLongShortAccountRatio",
            "Top Trader Long/Short Ratio (Accounts)",
        ),
        _ratio(
            "top_long_short_position_ratio",
            "/futures/data/topLongShortPositionRatio",
            "Top Trader Long/Short Ratio (Positions)",
        ),
        _ratio(
            "global_long_short_account_ratio",
            "/futures/data/globalLongShortAccountRatio",
            "Long/Short Ratio",
        ),
        _ratio(
            "taker_long_short_ratio",
            "/futures/data/takerlongshortRatio",
            "Taker Buy/Sell Volume",
        ),
        _market(
            "basis",
            "/futures/data/basis",
            "Basis",
            required=(PAIR, CONTRACT_TYPE, PERIOD, LIMIT),
            optional=(START_TIME, END_TIME),
        ),
        _market(
            "lvt_klines",
            "/fapi/v1/lvtKlines",
            "Historical BLVT NAV Kline/Candlestick",
            required=(SYMBOL, INTERVAL),
            optional=TIME_RANGE,
        ),
        _market(
            "index_info",
            "/fapi/v1/indexInfo",
            "Composite Index Symbol Information",
            optional=(SYMBOL,),
        ),
        _market(
            "asset_index",
            "/fapi/v1/assetIndex",
            "Multi-Assets Mode Asset Index",
            optional=(SYMBOL,),
        ),
        _market(
            "constituents",
            "/fapi/v1/constituents",
            "Query Index Price Constituents",
            required=(SYMBOL,),
        ),
    )
