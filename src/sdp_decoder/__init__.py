"""sdp-decoder

SDP (RFC 4566) 문서를 구조화된 세션 정보로 디코딩
"""

from sdp_decoder.sdp import SDPParser, SessionDescription, parse, to_dict, to_json
from sdp_decoder.common.exceptions import (
    AttributeBeforeMediaError,
    ConfigurationError,
    InvalidNumberError,
    MalformedLineError,
    MissingFieldError,
    SDPDecoderError,
    SDPParsingError,
    UnsupportedLineTypeError,
    UnsupportedMediaAttributeError,
)

__version__ = "0.1.0"

__all__ = [
    "SDPParser",
    "SessionDescription",
    "parse",
    "to_dict",
    "to_json",
    "SDPDecoderError",
    "SDPParsingError",
    "MalformedLineError",
    "MissingFieldError",
    "InvalidNumberError",
    "UnsupportedLineTypeError",
    "AttributeBeforeMediaError",
    "UnsupportedMediaAttributeError",
    "ConfigurationError",
]
