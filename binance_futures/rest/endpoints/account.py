"""
계좌 엔드포인트 (USER_DATA, 서명 필요)

공식 문서: https://developers.binance.com/docs/derivatives/usds-margined-futures/account/rest-api
"""

from binance_futures.core.types import HttpMethod
from binance_futures.rest.composition import EndpointGroup
from binance_futures.rest.endpoints.common import END_TIME, LIMIT, START_TIME, SYMBOL
from binance_futures.rest.models import EndpointContract, Param


def _account(name: str, path: str, summary: str, **kwargs) -> EndpointContract:
    return EndpointContract(
        name=name,
        method=HttpMethod.GET,
        path=path,
        signed=True,
        summary=summary,
        **kwargs,
    )


class Account(EndpointGroup):
    """계좌 조회 엔드포인트 그룹"""

    contracts = (
        _account(
            "futures_account_balance_v3",
            "/fapi/v3/balance",
            "Futures Account Balance V3 (USER_DATA)",
        ),
        _account(
            "futures_account_balance_v2",
            "/fapi/v2/balance",
            "Futures Account Balance V2 (USER_DATA)",
        ),
        _account(
            "account_information_v3",
            "/fapi/v3/account",
            "Account Information V3 (USER_DATA)",
        ),
        _account(
            "account_information_v2",
            "/fapi/v2/account",
            "Account Information V2 (USER_DATA)",
        ),
        _account(
            "user_commission_rate",
            "/fapi/v1/commissionRate",
            "User Commission Rate (USER_DATA)",
            required=(SYMBOL,),
        ),
        _account(
            "futures_account_configuration",
            "/fapi/v1/accountConfig",
            "Futures Account Configuration (USER_DATA)",
        ),
        _account(
            "futures_symbol_configuration",
            "/fapi/v1/symbolConfig",
            "Symbol Configuration (USER_DATA)",
            optional=(SYMBOL,),
        ),
        _account(
            "query_order_rate_limit",
            "/fapi/v1/rateLimit/order",
            "Query User Rate Limit (USER_DATA)",
        ),
        _account(
            "leverage_bracket",
            "/fapi/v1/leverageBracket",
            "Notional and Leverage Brackets (USER_DATA)",
            optional=(SYMBOL,),
        ),
        _account(
            "multi_assets_margin",
            "/fapi/v1/multiAssetsMargin",
            "Get Current Multi-Assets Mode (USER_DATA)",
        ),
        _account(
            "current_position_mode",
            "/fapi/v1/positionSide/dual",
            "Get Current Position Mode (USER_DATA)",
        ),
        _account(
            "get_income_history",
            "/fapi/v1/income",
            "Get Income History (USER_DATA)",
            # incomeType: TRANSFER, REALIZED_PNL, FUNDING_FEE, COMMISSION, ...
            optional=(SYMBOL, Param("income_type"), START_TIME, END_TIME, Param("page"), LIMIT),
        ),
        _account(
            "api_trading_status",
            "/fapi/v1/apiTradingStatus",
            "Futures Trading Quantitative Rules Indicators (USER_DATA)",
            optional=(SYMBOL,),
        ),
        _account(
            "get_download_id_transaction_history",
            "/fapi/v1/income/asyn",
            "Get Download Id For Futures Transaction History (USER_DATA)",
            required=(START_TIME, END_TIME),
        ),
    )
