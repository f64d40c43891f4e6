"""
pytest 공통 fixture 정의

HTTP 응답 모킹, 테스트 클라이언트, 임시 secrets.yaml
"""

import tempfile
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from binance_futures.client import Futures


TEST_BASE_URL = "https://fapi.binance.com"
TEST_API_KEY = "test_api_key"
TEST_API_SECRET = "test_api_secret"


def build_mock_response(
    status_code: int = 200,
    data: Any = None,
    headers: dict[str, str] | None = None,
    text: str | None = None,
) -> MagicMock:
    """httpx.Response 대역 생성

    data가 None이고 text가 주어지면 json()은 ValueError를 던진다.
    """
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.headers = headers or {}
    if data is None and text is not None:
        mock_response.json.side_effect = ValueError("not json")
        mock_response.text = text
    else:
        mock_response.json.return_value = {} if data is None else data
        mock_response.text = text if text is not None else str(data)
    return mock_response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """응답 대역 팩토리"""
    return build_mock_response


@pytest.fixture
def client() -> Futures:
    """서명 가능한 테스트 클라이언트"""
    return Futures(
        api_key=TEST_API_KEY,
        api_secret=TEST_API_SECRET,
        base_url=TEST_BASE_URL,
    )


@pytest.fixture
def public_client() -> Futures:
    """인증 정보 없는 클라이언트"""
    return Futures(base_url=TEST_BASE_URL)


@pytest.fixture
def mock_http(client: Futures):
    """client의 HTTP 클라이언트를 AsyncMock으로 교체

    기본 응답은 200 {}. mock_http.request.return_value로 변경 가능.
    """
    with patch.object(client, "_get_client") as mock_get_client:
        mock_http_client = AsyncMock()
        mock_http_client.request.return_value = build_mock_response(200, {})
        mock_get_client.return_value = mock_http_client
        yield mock_http_client


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
mode: testnet

production:
  api_key: "prod_api_key_12345"
  api_secret: "prod_api_secret_67890"

testnet:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_production(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (production 모드 + client 섹션)"""
    secrets_content = """mode: production

production:
  api_key: "prod_api_key_12345"
  api_secret: "prod_api_secret_67890"

testnet:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"

client:
  timeout: 5
  proxy: "http://127.0.0.1:7890"
  recv_window: 5000
"""
    secrets_path = temp_dir / "secrets_prod.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


def sent_request(mock_http_client: AsyncMock) -> tuple[str, str, dict[str, str], str | None]:
    """마지막 request 호출의 (method, url, headers, content)"""
    call = mock_http_client.request.call_args
    method, url = call.args
    return method, url, call.kwargs["headers"], call.kwargs["content"]


@pytest.fixture
def last_request() -> Callable[[AsyncMock], tuple[str, str, dict[str, str], str | None]]:
    """마지막 전송 요청 추출 함수"""
    return sent_request
