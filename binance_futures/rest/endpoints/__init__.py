"""
엔드포인트 그룹

Futures 클라이언트는 RESTFUL_GROUPS 순서대로 그룹을 합성한다.
"""

from binance_futures.rest.endpoints.account import Account
from binance_futures.rest.endpoints.market import Market
from binance_futures.rest.endpoints.trade import Trade

RESTFUL_GROUPS = (Account, Trade, Market)

__all__ = ["Account", "Market", "RESTFUL_GROUPS", "Trade"]
