"""SDP 패키지

SDP 텍스트 → 타입이 있는 문서 트리 변환
"""

from sdp_decoder.sdp.models import (
    Candidate,
    CodecMapping,
    Connection,
    FeedbackRule,
    Fingerprint,
    FormatParameter,
    MediaBlock,
    Origin,
    SessionDescription,
    SynchronizationSource,
    Timing,
)
from sdp_decoder.sdp.parser import SDPParser, parse
from sdp_decoder.sdp.router import MediaAttributeRouter
from sdp_decoder.sdp.serializer import to_dict, to_json

__all__ = [
    "Candidate",
    "CodecMapping",
    "Connection",
    "FeedbackRule",
    "Fingerprint",
    "FormatParameter",
    "MediaBlock",
    "Origin",
    "SessionDescription",
    "SynchronizationSource",
    "Timing",
    "SDPParser",
    "MediaAttributeRouter",
    "parse",
    "to_dict",
    "to_json",
]
