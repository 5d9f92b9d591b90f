"""SDP Parser

Session Description Protocol 파싱 (RFC 4566)
"""

from typing import List, Optional

from sdp_decoder.sdp import decoders
from sdp_decoder.sdp.lines import split_attribute, split_line
from sdp_decoder.sdp.models import SessionDescription
from sdp_decoder.sdp.router import MediaAttributeRouter
from sdp_decoder.config.models import ParserConfig
from sdp_decoder.common.exceptions import (
    MalformedLineError,
    SDPParsingError,
    UnsupportedLineTypeError,
)
from sdp_decoder.common.logger import get_logger

logger = get_logger(__name__)


class SDPParser:
    """SDP 파서

    RFC 4566 기반 SDP 파싱. 라인 순서대로 한 번만 읽으며,
    첫 번째 에러에서 즉시 중단한다 (부분 결과 없음).
    """

    @staticmethod
    def parse(sdp: str, config: Optional[ParserConfig] = None) -> SessionDescription:
        """SDP 문자열 파싱

        Args:
            sdp: SDP 문자열 (CRLF 또는 LF 구분)
            config: 파서 설정 (None이면 기본값)

        Returns:
            SessionDescription 객체

        Raises:
            SDPParsingError: 파싱 실패 (line_number, line 포함)
        """
        if not sdp or not sdp.strip():
            raise SDPParsingError("Empty SDP string")

        config = config or ParserConfig()
        session = SessionDescription()

        for line_number, raw_line in enumerate(_split_lines(sdp), start=1):
            try:
                line = raw_line.strip()
                if not line:
                    if config.skip_blank_lines:
                        continue
                    raise MalformedLineError(raw_line, "blank line")

                if len(line) > config.max_line_length:
                    raise MalformedLineError(
                        line, f"longer than {config.max_line_length} characters"
                    )

                SDPParser._parse_line(session, line)
            except SDPParsingError as e:
                e.with_line(line_number, raw_line)
                logger.warning("sdp_parse_failed",
                               line_number=line_number,
                               error_kind=e.kind,
                               error=e.message)
                raise

        logger.debug("sdp_parsed",
                     media_count=session.open_media_index,
                     candidate_count=sum(len(m.candidates) for m in session.media),
                     has_fingerprint=session.fingerprint is not None)

        return session

    @staticmethod
    def _parse_line(session: SessionDescription, line: str) -> None:
        """한 줄을 타입 태그로 분류하여 세션에 반영"""
        field_type, field_value = split_line(line)

        if field_type == 'v':
            session.version = decoders.decode_unsigned(field_value)

        elif field_type == 'o':
            session.origin = decoders.decode_origin(field_value)

        elif field_type == 's':
            session.session_name = field_value

        elif field_type == 't':
            session.timing = decoders.decode_timing(field_value)

        elif field_type == 'c':
            session.connection = decoders.decode_connection(field_value)

        elif field_type == 'm':
            # 새 미디어 블록 시작, 이후 a= 라인의 대상이 됨
            session.media.append(decoders.decode_media(field_value))

        elif field_type == 'a':
            SDPParser._parse_attribute(session, field_value)

        else:
            raise UnsupportedLineTypeError(field_type)

    @staticmethod
    def _parse_attribute(session: SessionDescription, value: str) -> None:
        """속성 라인 처리

        ice-ufrag, ice-pwd, fingerprint는 위치와 관계없이 세션 레벨.
        나머지는 현재 미디어 블록으로 라우팅.
        """
        attr_name, attr_value = split_attribute(value)

        if attr_value is not None and attr_name == 'ice-ufrag':
            session.ice_ufrag = attr_value

        elif attr_value is not None and attr_name == 'ice-pwd':
            session.ice_pwd = attr_value

        elif attr_value is not None and attr_name == 'fingerprint':
            session.fingerprint = decoders.decode_fingerprint(attr_value)

        else:
            MediaAttributeRouter.route(session, attr_name, attr_value)


def _split_lines(sdp: str) -> List[str]:
    """LF 기준으로 라인 분리, 라인 끝 CR 제거

    U+0085, U+2028 등은 라인 구분자로 보지 않는다 (값의 일부).
    마지막 LF 뒤의 빈 조각은 라인으로 세지 않는다.
    """
    lines = sdp.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def parse(sdp: str) -> SessionDescription:
    """SDP 파싱 편의 함수 (기본 설정)"""
    return SDPParser.parse(sdp)
