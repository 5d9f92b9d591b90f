"""SDP 라인 분리

<type>=<value> 형식의 한 줄을 타입 태그와 값으로 분리
"""

from typing import Optional, Tuple

from sdp_decoder.common.exceptions import MalformedLineError


def split_line(line: str) -> Tuple[str, str]:
    """라인을 첫 번째 '=' 기준으로 분리

    예: "m=audio 54400 RTP/SAVPF 0" → ("m", "audio 54400 RTP/SAVPF 0")

    Args:
        line: SDP 라인 한 줄

    Returns:
        (타입 태그, 앞뒤 공백이 제거된 값) 튜플

    Raises:
        MalformedLineError: '=' 가 없는 경우
    """
    if '=' not in line:
        raise MalformedLineError(line)

    tag, value = line.split('=', 1)
    return tag.strip(), value.strip()


def split_attribute(value: str) -> Tuple[str, Optional[str]]:
    """a= 라인 값을 첫 번째 ':' 기준으로 분리

    예: "rtpmap:0 PCMU/8000" → ("rtpmap", "0 PCMU/8000")
        "sendrecv" → ("sendrecv", None)
    """
    if ':' not in value:
        return value, None

    key, attr_value = value.split(':', 1)
    return key, attr_value.strip()
