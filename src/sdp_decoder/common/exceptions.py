"""커스텀 예외 클래스

SDP 디코더의 모든 커스텀 예외 정의
"""

from typing import Optional


class SDPDecoderError(Exception):
    """Base exception for all SDP decoder errors"""
    pass


# Parsing Exceptions
class SDPParsingError(SDPDecoderError):
    """SDP 파싱 실패

    디스패처가 라인 번호(1부터 시작)와 원본 라인을 붙여서 다시 던진다.
    필드 디코더 단계에서는 두 값 모두 None.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.line_number: Optional[int] = None
        self.line: Optional[str] = None

    def with_line(self, line_number: int, line: str) -> "SDPParsingError":
        """라인 컨텍스트 추가 후 자기 자신 반환"""
        self.line_number = line_number
        self.line = line
        return self

    @property
    def kind(self) -> str:
        """에러 종류 이름 (로그용)"""
        return type(self).__name__

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MalformedLineError(SDPParsingError):
    """'=' 구분자가 없는 라인"""

    def __init__(self, line: str, reason: str = "missing '=' separator"):
        super().__init__(f"Malformed line {line[:80]!r}: {reason}")
        self.raw = line


class MissingFieldError(SDPParsingError):
    """고정 위치 필드 누락"""

    def __init__(self, position: int):
        super().__init__(f"No item found at position {position}")
        self.position = position


class InvalidNumberError(SDPParsingError):
    """숫자여야 하는 토큰 파싱 실패"""

    def __init__(self, token: str, position: int):
        super().__init__(f"Invalid number {token!r} at position {position}")
        self.token = token
        self.position = position


class UnsupportedLineTypeError(SDPParsingError):
    """지원하지 않는 라인 타입"""

    def __init__(self, tag: str):
        super().__init__(f"Unsupported line type {tag!r}")
        self.tag = tag


class AttributeBeforeMediaError(SDPParsingError):
    """m= 라인 이전에 나온 미디어 속성"""

    def __init__(self, key: str):
        super().__init__(f"Media attribute {key!r} before any media line")
        self.key = key


class UnsupportedMediaAttributeError(SDPParsingError):
    """지원하지 않는 미디어 속성"""

    def __init__(self, key: str):
        super().__init__(f"Unsupported media attribute {key!r}")
        self.key = key


# Configuration Exceptions
class ConfigurationError(SDPDecoderError):
    """설정 관련 에러"""
    pass
