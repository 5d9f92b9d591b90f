"""설정 모델 정의

Pydantic을 사용한 타입 안전 설정 검증 모델
"""

from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """로그 레벨"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """로그 포맷"""
    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """로깅 설정"""
    model_config = {"validate_assignment": True}

    level: LogLevel = Field(default=LogLevel.WARNING, description="로그 레벨")
    format: LogFormat = Field(default=LogFormat.JSON, description="로그 포맷")
    output: str = Field(default="stderr", description="로그 출력 (stderr, stdout, 파일 경로)")

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        """소문자 레벨 허용 (debug → DEBUG)"""
        if isinstance(v, str):
            return v.upper()
        return v


class ParserConfig(BaseModel):
    """SDP 파서 설정"""
    model_config = {"validate_assignment": True}

    skip_blank_lines: bool = Field(default=True, description="빈 라인 무시 여부")
    max_line_length: int = Field(default=4096, ge=16, le=1048576, description="라인 최대 길이 (문자)")


class OutputConfig(BaseModel):
    """JSON 출력 설정"""
    model_config = {"validate_assignment": True}

    indent: Optional[int] = Field(default=2, ge=0, le=8, description="JSON 들여쓰기 (None이면 한 줄)")


class Config(BaseModel):
    """전체 설정 모델"""
    model_config = {"use_enum_values": True, "validate_assignment": True}

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
