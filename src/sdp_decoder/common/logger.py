"""구조화된 로깅 설정

structlog을 사용한 JSON 구조화 로깅
"""

import sys
import json
import structlog
from typing import Any, Dict, Optional, TextIO, Union
from pathlib import Path
from datetime import datetime, timezone

from sdp_decoder.config.models import LogLevel, LogFormat

# setup_logging이 연 로그 파일 (stderr/stdout이면 None)
_log_file: Optional[TextIO] = None


def add_timestamp(logger: Any, method_name: str, event_dict: Dict) -> Dict:
    """UTC 타임스탬프를 추가하는 프로세서 (밀리초 3자리까지)"""
    now = datetime.now(timezone.utc)
    timestamp = now.strftime("%Y-%m-%dT%H:%M:%S")
    milliseconds = str(now.microsecond // 1000).zfill(3)
    event_dict["timestamp"] = f"{timestamp}.{milliseconds}Z"
    return event_dict


def reorder_keys(logger: Any, method_name: str, event_dict: Dict) -> Dict:
    """로그 키 순서를 가독성 좋게 재정렬하는 프로세서

    순서:
    1. timestamp
    2. level
    3. event
    4. 파싱 위치 (source, line_number, error_kind)
    5. 나머지 필드들 (알파벳 순)
    """
    priority_keys = [
        "timestamp",
        "level",
        "event",
        "source",
        "line_number",
        "error_kind",
    ]

    ordered = {}
    for key in priority_keys:
        if key in event_dict:
            ordered[key] = event_dict[key]

    remaining_keys = sorted([k for k in event_dict.keys() if k not in priority_keys])
    for key in remaining_keys:
        ordered[key] = event_dict[key]

    return ordered


def _json_serializer(event_dict, **kwargs):
    # 비ASCII 문자를 이스케이프하지 않고 그대로 출력
    return json.dumps(event_dict, ensure_ascii=False, default=str)


def setup_logging(
    level: Union[str, LogLevel] = "INFO",
    format_type: Union[str, LogFormat] = "json",
    output: str = "stderr",
) -> None:
    """로깅 설정 초기화

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 로그 포맷 (json, text)
        output: 로그 출력 (stderr, stdout, 또는 파일 경로)
    """
    global _log_file

    level = _enum_value(level)
    format_type = _enum_value(format_type)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        add_timestamp,
        reorder_keys,
    ]

    if format_type == LogFormat.JSON.value:
        processors.append(structlog.processors.JSONRenderer(serializer=_json_serializer))
    else:
        # 개발용 컬러 텍스트 포맷
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # 재설정 시 이전에 연 로그 파일 닫기
    stream = _open_stream(output)
    if _log_file is not None and _log_file is not stream:
        _log_file.close()
    _log_file = None if stream in (sys.stderr, sys.stdout) else stream

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            _log_level_to_int(level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def _enum_value(value: Any) -> str:
    return value.value if isinstance(value, (LogLevel, LogFormat)) else str(value)


def _open_stream(output: str) -> TextIO:
    """로그 출력 스트림 반환"""
    if output == "stderr":
        return sys.stderr
    if output == "stdout":
        return sys.stdout

    log_file_path = Path(output)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    # 라인 버퍼링, append 모드
    return open(log_file_path, "a", encoding="utf-8", buffering=1)


def _log_level_to_int(level: str) -> int:
    """로그 레벨 문자열을 정수로 변환"""
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 20)  # 기본값: INFO


def get_logger(name: str) -> structlog.BoundLogger:
    """로거 인스턴스 반환

    Args:
        name: 로거 이름 (일반적으로 __name__)

    Returns:
        structlog.BoundLogger: 바운드 로거 인스턴스

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("sdp_parsed", media_count=2)
    """
    _ensure_configured()
    return structlog.get_logger(name)


def log_with_context(**context: Any) -> structlog.BoundLogger:
    """컨텍스트가 바인딩된 로거 반환

    Args:
        **context: 로그에 포함할 컨텍스트 정보

    Returns:
        structlog.BoundLogger: 컨텍스트가 바인딩된 로거

    Example:
        >>> logger = log_with_context(source="offer.sdp")
        >>> logger.info("sdp_loaded")
        # {"event": "sdp_loaded", "source": "offer.sdp", ...}
    """
    _ensure_configured()
    return structlog.get_logger().bind(**context)


def _ensure_configured() -> None:
    """setup_logging 호출 전이면 WARNING 이상만 stderr로 출력

    structlog 기본 설정(모든 레벨, stdout) 대신 사용.
    호스트가 이미 structlog을 설정했으면 건드리지 않는다.
    """
    if not structlog.is_configured():
        setup_logging(level=LogLevel.WARNING, format_type=LogFormat.JSON, output="stderr")
