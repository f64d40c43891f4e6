"""
엔드포인트 공통 파라미터 정의
"""

from binance_futures.rest.models import Param


SYMBOL = Param("symbol", upper=True)
PAIR = Param("pair", upper=True)
SIDE = Param("side", upper=True)
INTERVAL = Param("interval")
PERIOD = Param("period")
CONTRACT_TYPE = Param("contract_type")
LIMIT = Param("limit")
START_TIME = Param("start_time")
END_TIME = Param("end_time")
FROM_ID = Param("from_id")
ORDER_ID = Param("order_id")
ORIG_CLIENT_ORDER_ID = Param("orig_client_order_id")

# Kline 계열 조회 옵션
TIME_RANGE = (START_TIME, END_TIME, LIMIT)
