"""sdp-decode - SDP 디코더 명령줄 진입점

SDP 파일(또는 stdin)을 파싱하여 JSON으로 출력
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from sdp_decoder import __version__
from sdp_decoder.config.config_loader import load_config
from sdp_decoder.config.models import Config
from sdp_decoder.common.logger import setup_logging, get_logger
from sdp_decoder.common.exceptions import ConfigurationError, SDPParsingError
from sdp_decoder.sdp.parser import SDPParser
from sdp_decoder.sdp.serializer import to_json

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """명령줄 인자 파싱"""
    parser = argparse.ArgumentParser(
        prog="sdp-decode",
        description="Decode an SDP document into JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 파일 디코딩
  sdp-decode offer.sdp

  # stdin에서 읽기
  cat offer.sdp | sdp-decode -

  # 커스텀 설정 파일 지정
  sdp-decode offer.sdp --config config/sdp_decoder.yaml
"""
    )

    parser.add_argument(
        'path',
        nargs='?',
        default='-',
        help='SDP 파일 경로 (기본: stdin)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='설정 파일 경로 (기본: config/sdp_decoder.yaml)'
    )

    parser.add_argument(
        '--indent',
        type=int,
        default=None,
        help='JSON 들여쓰기 (설정 파일 오버라이드)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help='로그 레벨 (설정 파일 오버라이드)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def load_configuration(config_path: Optional[str] = None) -> Config:
    """설정 로드

    Raises:
        ConfigurationError: 설정 로드 실패 시
    """
    try:
        return load_config(config_path)
    except FileNotFoundError as e:
        raise ConfigurationError(str(e)) from e


def apply_cli_overrides(config: Config, args: argparse.Namespace) -> Config:
    """CLI 인자로 설정 오버라이드

    Raises:
        ConfigurationError: 오버라이드 값이 설정 범위를 벗어난 경우
    """
    try:
        if args.indent is not None:
            config.output.indent = args.indent
        if args.log_level:
            config.logging.level = args.log_level
    except ValidationError as e:
        errors = [f"  - {err['loc'][0]}: {err['msg']}" for err in e.errors()]
        raise ConfigurationError("Invalid command line override:\n" + "\n".join(errors)) from e
    return config


def read_input(path: str) -> str:
    """SDP 텍스트 읽기 ('-'이면 stdin)"""
    if path == '-':
        return sys.stdin.read()
    return Path(path).read_text(encoding='utf-8')


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수

    Returns:
        int: 종료 코드 (0 = 성공, 1 = 파싱 실패, 2 = 설정 오류)
    """
    args = parse_args(argv)

    try:
        config = apply_cli_overrides(load_configuration(args.config), args)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(
        level=config.logging.level,
        format_type=config.logging.format,
        output=config.logging.output,
    )
    logger = get_logger(__name__).bind(source=args.path)

    try:
        text = read_input(args.path)
    except OSError as e:
        logger.error("sdp_read_failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    try:
        session = SDPParser.parse(text, config.parser)
    except SDPParsingError as e:
        logger.error("sdp_decode_failed",
                     line_number=e.line_number,
                     error_kind=e.kind,
                     error=e.message)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    print(to_json(session, indent=config.output.indent))
    logger.info("sdp_decoded", media_count=len(session.media))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
