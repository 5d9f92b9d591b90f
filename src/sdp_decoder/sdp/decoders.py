"""SDP 필드 디코더

고정 위치 필드를 가진 라인 값을 타입이 있는 레코드로 변환.
모든 디코더는 문서 상태를 참조하지 않는 순수 함수이며,
구분자(' ', '/', ':')로만 분리한다 (정규식 미사용).

위치(position)는 1부터 시작하는 필드 번호.
"""

from typing import List, Optional

from sdp_decoder.sdp.models import (
    Candidate,
    CodecMapping,
    Connection,
    FeedbackRule,
    Fingerprint,
    FormatParameter,
    MediaBlock,
    Origin,
    SynchronizationSource,
    Timing,
)
from sdp_decoder.common.exceptions import InvalidNumberError, MissingFieldError

# 64-bit unsigned 상한
MAX_UNSIGNED = 2 ** 64 - 1


def parse_str(tokens: List[str], index: int, position: int) -> str:
    """tokens[index] 반환, 없거나 비어 있으면 MissingFieldError"""
    if index >= len(tokens) or tokens[index] == "":
        raise MissingFieldError(position)
    return tokens[index]


def parse_number(tokens: List[str], index: int, position: int) -> int:
    """tokens[index]를 64-bit unsigned 정수로 변환"""
    token = parse_str(tokens, index, position)
    return to_unsigned(token, position)


def to_unsigned(token: str, position: int) -> int:
    # int()는 '+1', ' 1', '1_000'도 받아들이므로 ASCII 숫자만 허용
    if not (token.isascii() and token.isdigit()):
        raise InvalidNumberError(token, position)
    number = int(token)
    if number > MAX_UNSIGNED:
        raise InvalidNumberError(token, position)
    return number


def decode_unsigned(value: str) -> int:
    """단일 unsigned 정수 (v=, a=ptime)"""
    return parse_number([value], 0, 1)


def decode_origin(value: str) -> Origin:
    """o=<username> <sess-id> <sess-version> <nettype> <addrtype> <unicast-address>"""
    tokens = value.split(' ')
    return Origin(
        username=parse_str(tokens, 0, 1),
        session_id=parse_number(tokens, 1, 2),
        session_version=parse_number(tokens, 2, 3),
        network_type=parse_str(tokens, 3, 4),
        address_type=parse_str(tokens, 4, 5),
        address=parse_str(tokens, 5, 6),
    )


def decode_connection(value: str) -> Connection:
    """c=<nettype> <addrtype> <connection-address>"""
    tokens = value.split(' ')
    return Connection(
        network_type=parse_str(tokens, 0, 1),
        address_type=parse_str(tokens, 1, 2),
        address=parse_str(tokens, 2, 3),
    )


def decode_timing(value: str) -> Timing:
    """t=<start-time> <stop-time>"""
    tokens = value.split(' ')
    return Timing(
        start_time=parse_number(tokens, 0, 1),
        stop_time=parse_number(tokens, 1, 2),
    )


def decode_fingerprint(value: str) -> Fingerprint:
    """a=fingerprint:<hash-func> <fingerprint>"""
    tokens = value.split(' ')
    return Fingerprint(
        algorithm=parse_str(tokens, 0, 1),
        value=parse_str(tokens, 1, 2),
    )


def decode_media(value: str) -> MediaBlock:
    """m=<media> <port> <proto> <fmt> ...

    payload 목록은 분리하지 않고 원문 그대로 보관.
    """
    tokens = value.split(' ', 3)
    return MediaBlock(
        media_type=parse_str(tokens, 0, 1),
        port=parse_number(tokens, 1, 2),
        protocol=parse_str(tokens, 2, 3),
        payloads=parse_str(tokens, 3, 4).strip(),
    )


def decode_candidate(value: str) -> Candidate:
    """a=candidate:<component> <foundation> <transport> <priority> <ip> <port> typ <type> ...

    port와 type 사이의 토큰("typ")은 값 검증 없이 건너뛴다.
    type 이후 토큰(generation, raddr 등)은 무시.
    """
    tokens = value.split(' ')
    return Candidate(
        component=parse_number(tokens, 0, 1),
        foundation=parse_str(tokens, 1, 2),
        transport=parse_str(tokens, 2, 3),
        priority=parse_number(tokens, 3, 4),
        ip=parse_str(tokens, 4, 5),
        port=parse_number(tokens, 5, 6),
        type=parse_str(tokens, 7, 7),
    )


def decode_rtpmap(value: str) -> CodecMapping:
    """a=rtpmap:<payload> <codec>/<rate>[/<channels>]"""
    tokens = value.split(' ', 1)
    payload = parse_str(tokens, 0, 1)

    encoding = parse_str(tokens, 1, 2).split('/')
    channels: Optional[int] = None
    if len(encoding) > 2:
        channels = parse_number(encoding, 2, 4)

    return CodecMapping(
        payload=payload,
        codec=parse_str(encoding, 0, 2),
        rate=parse_number(encoding, 1, 3),
        channels=channels,
    )


def decode_fmtp(value: str) -> FormatParameter:
    """a=fmtp:<payload> <config>

    config는 payload 이후 전체 원문 (';' 하위 키 미분해).
    """
    tokens = value.split(' ', 1)
    return FormatParameter(
        payload=parse_number(tokens, 0, 1),
        config=parse_str(tokens, 1, 2).strip(),
    )


def decode_rtcp_feedback(value: str) -> FeedbackRule:
    """a=rtcp-fb:<payload> <type> [<parameter>]

    예: "97 trr-int 100" → type="trr-int", parameter="100"
    """
    tokens = value.split(' ', 2)
    parameter = tokens[2].strip() if len(tokens) > 2 else None
    return FeedbackRule(
        payload=parse_str(tokens, 0, 1),
        type=parse_str(tokens, 1, 2),
        parameter=parameter or None,
    )


def decode_ssrc(value: str) -> SynchronizationSource:
    """a=ssrc:<id> <attribute>[:<value>]"""
    tokens = value.split(' ', 1)
    ssrc_id = parse_number(tokens, 0, 1)

    source_attr = parse_str(tokens, 1, 2).split(':', 1)
    # "cname:" 처럼 콜론 뒤가 비어 있으면 빈 문자열 값
    attr_value: Optional[str] = source_attr[1] if len(source_attr) > 1 else None

    return SynchronizationSource(
        id=ssrc_id,
        attribute=parse_str(source_attr, 0, 2),
        value=attr_value,
    )
