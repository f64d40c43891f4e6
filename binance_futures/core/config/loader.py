"""
설정 로더

secrets.yaml 로드 및 클라이언트 설정 생성
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from binance_futures.core.constants import BinanceEndpoints, Defaults, Limits, Paths
from binance_futures.core.types import TradingMode


@dataclass(frozen=True)
class Secrets:
    """보안 설정 (secrets.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    mode: TradingMode
    api_key: str
    api_secret: str


@dataclass(frozen=True)
class ClientConfig:
    """클라이언트 연결 설정

    API 키와 엔드포인트, 요청 옵션을 포함
    """

    base_url: str
    api_key: str
    api_secret: str
    timeout: float = Defaults.TIMEOUT_SEC
    proxy: str | None = None
    recv_window: int | None = None


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise ConfigLoadError("secrets.yaml이 비어 있습니다")
    if not isinstance(data, dict):
        raise ConfigLoadError("secrets.yaml 최상위는 매핑이어야 합니다")

    return data


def _parse_mode(data: dict[str, Any]) -> TradingMode:
    mode_str = data.get("mode")
    if mode_str is None:
        raise ConfigLoadError("secrets.yaml에 'mode' 필드가 없습니다")

    try:
        mode = TradingMode(mode_str)
    except ValueError as e:
        valid_modes = [m.value for m in TradingMode]
        raise ValueError(
            f"유효하지 않은 mode입니다: '{mode_str}'. "
            f"유효한 값: {valid_modes}"
        ) from e

    return mode


def _parse_secrets(data: dict[str, Any], mode: TradingMode | None = None) -> Secrets:
    # mode 검증 (mode 인자가 주어지면 파일의 mode 대신 사용)
    if mode is None:
        mode = _parse_mode(data)

    # 해당 모드의 API 키 로드
    mode_config = data.get(mode.value)
    if mode_config is None:
        raise ConfigLoadError(
            f"secrets.yaml에 '{mode.value}' 설정이 없습니다"
        )
    if not isinstance(mode_config, dict):
        raise ConfigLoadError(
            f"secrets.yaml의 {mode.value} 섹션은 매핑이어야 합니다"
        )

    api_key = mode_config.get("api_key")
    api_secret = mode_config.get("api_secret")

    if not api_key:
        raise ConfigLoadError(
            f"secrets.yaml의 {mode.value} 섹션에 'api_key'가 없습니다"
        )
    if not api_secret:
        raise ConfigLoadError(
            f"secrets.yaml의 {mode.value} 섹션에 'api_secret'가 없습니다"
        )

    return Secrets(mode=mode, api_key=str(api_key), api_secret=str(api_secret))


def load_secrets(path: Path | None = None, mode: TradingMode | None = None) -> Secrets:
    """secrets.yaml 파일 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)
        mode: 사용할 모드 (None이면 파일의 mode)

    Returns:
        Secrets 인스턴스

    Raises:
        ConfigLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 mode인 경우
    """
    if path is None:
        path = Paths.SECRETS_FILE

    return _parse_secrets(_read_yaml(path), mode)


def get_base_url(mode: TradingMode) -> str:
    """모드에 따른 REST 베이스 URL"""
    if mode == TradingMode.PRODUCTION:
        return BinanceEndpoints.PROD_REST_URL
    return BinanceEndpoints.TEST_REST_URL


def get_client_config(
    secrets: Secrets,
    options: dict[str, Any] | None = None,
) -> ClientConfig:
    """모드와 client 섹션에 따른 클라이언트 설정 반환

    Args:
        secrets: Secrets 인스턴스
        options: secrets.yaml의 client 섹션 (timeout, proxy, recv_window, base_url)

    Returns:
        ClientConfig 인스턴스

    Raises:
        ConfigLoadError: client 섹션 값이 잘못된 경우
    """
    options = options or {}

    base_url = options.get("base_url") or get_base_url(secrets.mode)

    try:
        timeout = float(options.get("timeout", Defaults.TIMEOUT_SEC))
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"client.timeout 값이 잘못되었습니다: {e}") from e
    if timeout <= 0:
        raise ConfigLoadError("client.timeout은 0보다 커야 합니다")

    recv_window = options.get("recv_window")
    if recv_window is not None:
        if (
            isinstance(recv_window, bool)
            or not isinstance(recv_window, int)
            or not 0 < recv_window <= Limits.MAX_RECV_WINDOW_MS
        ):
            raise ConfigLoadError(
                f"client.recv_window는 1~{Limits.MAX_RECV_WINDOW_MS} 사이 정수여야 합니다: "
                f"{recv_window!r}"
            )

    return ClientConfig(
        base_url=str(base_url),
        api_key=secrets.api_key,
        api_secret=secrets.api_secret,
        timeout=timeout,
        proxy=options.get("proxy") or None,
        recv_window=recv_window,
    )


def load_config(path: Path | None = None, mode: TradingMode | None = None) -> ClientConfig:
    """secrets.yaml에서 ClientConfig 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)
        mode: 사용할 모드 (None이면 파일의 mode). 파일의 mode와 다르면
            client.base_url은 무시하고 해당 모드의 기본 URL 사용

    Returns:
        ClientConfig 인스턴스
    """
    if path is None:
        path = Paths.SECRETS_FILE

    data = _read_yaml(path)
    secrets = _parse_secrets(data, mode)

    options = data.get("client")
    if options is not None and not isinstance(options, dict):
        raise ConfigLoadError("secrets.yaml의 client 섹션은 매핑이어야 합니다")

    if options and mode is not None and data.get("mode") != mode.value:
        options = {key: value for key, value in options.items() if key != "base_url"}

    return get_client_config(secrets, options)
