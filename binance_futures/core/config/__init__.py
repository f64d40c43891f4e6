"""설정 모듈"""

from binance_futures.core.config.loader import (
    ClientConfig,
    ConfigLoadError,
    Secrets,
    get_client_config,
    load_config,
    load_secrets,
)

__all__ = [
    "ClientConfig",
    "ConfigLoadError",
    "Secrets",
    "get_client_config",
    "load_config",
    "load_secrets",
]
