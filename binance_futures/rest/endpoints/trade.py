"""
거래 엔드포인트 (TRADE / USER_DATA, 서명 필요)

공식 문서: https://developers.binance.com/docs/derivatives/usds-margined-futures/trade/rest-api

new_order 타입별 추가 필수값 (서버에서 검증):
    LIMIT => time_in_force, quantity, price
    MARKET => quantity
    STOP/TAKE_PROFIT => quantity, price, stop_price
    STOP_MARKET/TAKE_PROFIT_MARKET => stop_price
    TRAILING_STOP_MARKET => callback_rate
"""

from binance_futures.core.types import HttpMethod
from binance_futures.rest.composition import EndpointGroup
from binance_futures.rest.endpoints.common import (
    END_TIME,
    FROM_ID,
    LIMIT,
    ORDER_ID,
    ORIG_CLIENT_ORDER_ID,
    SIDE,
    START_TIME,
    SYMBOL,
)
from binance_futures.rest.models import EndpointContract, Param


GET = HttpMethod.GET
POST = HttpMethod.POST
PUT = HttpMethod.PUT
DELETE = HttpMethod.DELETE

ORDER_REF = (ORDER_ID, ORIG_CLIENT_ORDER_ID)
QUANTITY = Param("quantity")
PRICE = Param("price")
PRICE_MATCH = Param("price_match")


class Trade(EndpointGroup):
    """주문/포지션 설정 엔드포인트 그룹"""

    contracts = (
        EndpointContract(
            "new_order", POST, "/fapi/v1/order",
            required=(SYMBOL, SIDE, Param("order_type", wire="type", upper=True)),
            optional=(
                Param("position_side"),
                Param("time_in_force"),
                QUANTITY,
                Param("reduce_only"),
                PRICE,
                Param("new_client_order_id"),
                Param("stop_price"),
                Param("close_position"),
                Param("activation_price"),
                Param("callback_rate"),
                Param("working_type"),
                Param("price_protect"),
                Param("new_order_resp_type"),
                PRICE_MATCH,
                Param("self_trade_prevention_mode"),
                Param("good_till_date"),
            ),
            signed=True,
            summary="New Order (TRADE)",
        ),
        EndpointContract(
            "place_multiple_orders", POST, "/fapi/v1/batchOrders",
            required=(
                Param("batch_orders", item_required=("symbol", "side", "type", "quantity")),
            ),
            signed=True,
            summary="Place Multiple Orders (TRADE), max 5 orders",
        ),
        EndpointContract(
            "modify_order", PUT, "/fapi/v1/order",
            required=(SYMBOL, SIDE, QUANTITY, PRICE),
            optional=ORDER_REF + (PRICE_MATCH,),
            signed=True,
            summary="Modify Order (TRADE)",
        ),
        EndpointContract(
            "modify_multiple_orders", PUT, "/fapi/v1/batchOrders",
            required=(
                Param("batch_orders", item_required=("symbol", "side", "quantity", "price")),
            ),
            signed=True,
            summary="Modify Multiple Orders (TRADE)",
        ),
        EndpointContract(
            "order_modify_history", GET, "/fapi/v1/orderAmendment",
            required=(SYMBOL,),
            optional=ORDER_REF + (START_TIME, END_TIME, LIMIT),
            signed=True,
            summary="Get Order Modify History (USER_DATA)",
        ),
        EndpointContract(
            "cancel_order", DELETE, "/fapi/v1/order",
            required=(SYMBOL,),
            optional=ORDER_REF,
            signed=True,
            summary="Cancel Order (TRADE)",
        ),
        EndpointContract(
            "cancel_multiple_orders", DELETE, "/fapi/v1/batchOrders",
            required=(SYMBOL,),
            optional=(Param("order_id_list"), Param("orig_client_order_id_list")),
            signed=True,
            summary="Cancel Multiple Orders (TRADE)",
        ),
        EndpointContract(
            "cancel_all_open_orders", DELETE, "/fapi/v1/allOpenOrders",
            required=(SYMBOL,),
            signed=True,
            summary="Cancel All Open Orders (TRADE)",
        ),
        EndpointContract(
            "countdown_cancel_all", POST, "/fapi/v1/countdownCancelAll",
            required=(SYMBOL, Param("countdown_time")),
            signed=True,
            summary="Auto-Cancel All Open Orders (TRADE)",
        ),
        EndpointContract(
            "query_order", GET, "/fapi/v1/order",
            required=(SYMBOL,),
            optional=ORDER_REF,
            signed=True,
            summary="Query Order (USER_DATA)",
        ),
        EndpointContract(
            "query_all_orders", GET, "/fapi/v1/allOrders",
            required=(SYMBOL,),
            optional=(ORDER_ID, START_TIME, END_TIME, LIMIT),
            signed=True,
            summary="All Orders (USER_DATA)",
        ),
        EndpointContract(
            "query_current_all_open_orders", GET, "/fapi/v1/openOrders",
            optional=(SYMBOL,),
            signed=True,
            summary="Current All Open Orders (USER_DATA)",
        ),
        EndpointContract(
            "query_current_open_order", GET, "/fapi/v1/openOrder",
            required=(SYMBOL,),
            optional=ORDER_REF,
            signed=True,
            summary="Query Current Open Order (USER_DATA)",
        ),
        EndpointContract(
            "force_orders", GET, "/fapi/v1/forceOrders",
            optional=(SYMBOL, Param("auto_close_type"), START_TIME, END_TIME, LIMIT),
            signed=True,
            summary="User's Force Orders (USER_DATA)",
        ),
        EndpointContract(
            "query_user_trades", GET, "/fapi/v1/userTrades",
            required=(SYMBOL,),
            optional=(ORDER_ID, START_TIME, END_TIME, FROM_ID, LIMIT),
            signed=True,
            summary="Account Trade List (USER_DATA)",
        ),
        EndpointContract(
            "change_margin_type", POST, "/fapi/v1/marginType",
            required=(SYMBOL, Param("margin_type", upper=True)),
            signed=True,
            summary="Change Margin Type (TRADE)",
        ),
        EndpointContract(
            "change_position_mode", POST, "/fapi/v1/positionSide/dual",
            required=(Param("dual_side_position"),),
            signed=True,
            summary="Change Position Mode (TRADE)",
        ),
        EndpointContract(
            "change_initial_leverage", POST, "/fapi/v1/leverage",
            required=(SYMBOL, Param("leverage")),
            signed=True,
            summary="Change Initial Leverage (TRADE)",
        ),
        EndpointContract(
            "position_information", GET, "/fapi/v2/positionRisk",
            optional=(SYMBOL,),
            signed=True,
            summary="Position Information V2 (USER_DATA)",
        ),
    )
