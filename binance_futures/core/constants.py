"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


class BinanceEndpoints:
    """Binance API 엔드포인트 (고정값)

    공식 문서: https://developers.binance.com/docs/derivatives/usds-margined-futures/general-info
    """

    # Production (USDT-M Futures)
    PROD_REST_URL: str = "https://fapi.binance.com"

    # Testnet (USDT-M Futures)
    TEST_REST_URL: str = "https://demo-fapi.binance.com"


class Headers:
    """요청/응답 헤더 이름

    응답 헤더 키는 소문자로 비교한다.
    """

    API_KEY: str = "X-MBX-APIKEY"
    FORM_CONTENT_TYPE: str = "application/x-www-form-urlencoded"

    # 예: x-mbx-used-weight-1m, x-mbx-order-count-10s
    USED_WEIGHT_PREFIX: str = "x-mbx-used-weight-"
    ORDER_COUNT_PREFIX: str = "x-mbx-order-count-"
    RETRY_AFTER: str = "retry-after"


class Defaults:
    """기본값 상수"""

    TIMEOUT_SEC: float = 10.0
    LOG_LEVEL: str = "INFO"


class Limits:
    """거래소 제약값"""

    MAX_RECV_WINDOW_MS: int = 60000


class Paths:
    """기본 경로 (현재 작업 디렉토리 기준)"""

    CONFIG_DIR: Path = Path("config")
    LOGS_DIR: Path = Path("logs")

    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"


class RateLimitThresholds:
    """Rate Limit 임계값 (로깅용, 요청 제한은 하지 않음)"""

    WEIGHT_WARN: int = 1500  # 경고
