"""
Binance USDⓈ-M Futures REST 클라이언트

Account, Trade, Market 엔드포인트 그룹을 디스패처 위에 합성한다.

사용 예:
    async with Futures(api_key, api_secret) as client:
        response = await client.depth("btcusdt", limit=5)
        print(response.data)
"""

from binance_futures.core.config import ClientConfig
from binance_futures.rest.dispatcher import RestDispatcher
from binance_futures.rest.endpoints import RESTFUL_GROUPS


class Futures(*RESTFUL_GROUPS, RestDispatcher):
    """USDⓈ-M Futures REST 클라이언트

    연산 목록은 Futures.operations()로 조회.
    설정(base_url, 인증 정보, timeout)은 생성 후 변경 불가.
    """

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Futures":
        """ClientConfig로 클라이언트 생성"""
        return cls(
            api_key=config.api_key,
            api_secret=config.api_secret,
            base_url=config.base_url,
            timeout=config.timeout,
            proxy=config.proxy,
            recv_window=config.recv_window,
        )
