"""
커맨드라인 진입점

실행 방법:
    python -m binance_futures ping
    python -m binance_futures --testnet depth symbol=btcusdt limit=5
    python -m binance_futures --config config/secrets.yaml query_order symbol=BTCUSDT order_id=123

값은 JSON으로 해석 가능하면 JSON으로, 아니면 문자열로 전달된다.
종료 코드: 0 성공, 1 API/설정 에러, 2 잘못된 연산/인자
"""

import argparse
import asyncio
import inspect
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Sequence

from binance_futures.client import Futures
from binance_futures.core.config import ConfigLoadError, load_config
from binance_futures.core.constants import BinanceEndpoints, Defaults, Paths
from binance_futures.core.logging import get_log_file_path, setup_logging
from binance_futures.core.types import TradingMode
from binance_futures.rest.errors import BinanceFuturesError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binance_futures",
        description="Binance USDⓈ-M Futures REST 호출",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"secrets.yaml 경로 (기본: {Paths.SECRETS_FILE}, 없으면 공개 엔드포인트만)",
    )
    parser.add_argument(
        "--testnet",
        action="store_true",
        help="Testnet 사용 (설정 파일이 있으면 testnet 섹션의 키 사용)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=Defaults.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="콘솔 로그 레벨",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        nargs="?",
        const=get_log_file_path("cli"),
        default=None,
        help="로그 파일 경로 (값 없이 지정하면 logs/cli.log)",
    )
    parser.add_argument("operation", help="연산 이름 (예: ping, depth, new_order)")
    parser.add_argument("params", nargs="*", help="name=value 형식의 파라미터")
    return parser


def parse_value(raw: str) -> Any:
    """JSON으로 해석 가능하면 JSON 값, 아니면 원본 문자열

    소수는 Decimal로 읽어 입력한 자릿수 그대로 전송한다.
    """
    try:
        return json.loads(raw, parse_float=Decimal)
    except ValueError:
        return raw


def parse_params(pairs: Sequence[str]) -> dict[str, Any]:
    """name=value 목록 → 키워드 인자

    Raises:
        ValueError: '='가 없거나 이름이 비어 있는 경우
    """
    params: dict[str, Any] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"파라미터는 name=value 형식이어야 합니다: {pair!r}")
        params[name] = parse_value(raw)
    return params


def create_client(args: argparse.Namespace) -> Futures:
    """설정 파일이 있으면 인증 클라이언트, 없으면 공개 클라이언트 생성

    --testnet이면 설정 파일의 mode와 관계없이 testnet 섹션과 Testnet URL 사용.

    Raises:
        ConfigLoadError: 설정 파일을 읽을 수 없거나 형식이 잘못된 경우
    """
    config_path = args.config
    if config_path is None and Paths.SECRETS_FILE.exists():
        config_path = Paths.SECRETS_FILE

    if config_path is not None:
        mode = TradingMode.TESTNET if args.testnet else None
        config = load_config(config_path, mode=mode)
        logger.info(f"설정 로드 완료: {config_path} ({config.base_url})")
        return Futures.from_config(config)

    base_url = BinanceEndpoints.TEST_REST_URL if args.testnet else BinanceEndpoints.PROD_REST_URL
    return Futures(base_url=base_url)


async def run(args: argparse.Namespace) -> int:
    """연산 실행 후 응답 본문을 JSON으로 출력"""
    if args.operation not in Futures.operations():
        logger.error(f"알 수 없는 연산: {args.operation}")
        return EXIT_USAGE

    try:
        params = parse_params(args.params)
    except ValueError as e:
        logger.error(str(e))
        return EXIT_USAGE

    try:
        client = create_client(args)
    except (ConfigLoadError, ValueError) as e:
        logger.error(f"설정 로드 실패: {e}")
        return EXIT_ERROR

    async with client:
        operation = getattr(client, args.operation)
        try:
            inspect.signature(operation).bind(**params)
        except TypeError as e:
            logger.error(f"{args.operation} 인자 오류: {e}")
            return EXIT_USAGE

        try:
            response = await operation(**params)
        except BinanceFuturesError as e:
            logger.error(f"{args.operation} 실패: {e}")
            return EXIT_ERROR

    print(json.dumps(response.data, ensure_ascii=False, indent=2))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(
        "cli",
        console_level=getattr(logging, args.log_level),
        log_file=args.log_file,
    )
    return asyncio.run(run(args))
