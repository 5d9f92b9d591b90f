"""설정 로더 모듈

YAML 파일 로드 및 환경 변수 오버라이드 지원
"""

import os
from pathlib import Path
from typing import Optional, Any, Dict
import yaml
from pydantic import ValidationError

from .models import Config
from sdp_decoder.common.exceptions import ConfigurationError

ENV_PREFIX = "SDP_DECODER_"
CONFIG_PATH_ENV = "SDP_DECODER_CONFIG_PATH"


class ConfigLoader:
    """설정 로더 클래스"""

    def __init__(self, config_path: Optional[str] = None):
        """초기화

        Args:
            config_path: 설정 파일 경로. None인 경우 기본 경로 사용
        """
        self.config_path = config_path or self._get_default_config_path()
        self._config: Optional[Config] = None

    @staticmethod
    def _get_default_config_path() -> str:
        """기본 설정 파일 경로 반환"""
        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            return env_path

        # 현재 디렉토리/config/sdp_decoder.yaml
        return str(Path.cwd() / "config" / "sdp_decoder.yaml")

    def load(self) -> Config:
        """설정 파일 로드 및 검증

        Returns:
            Config: 검증된 설정 객체

        Raises:
            FileNotFoundError: 설정 파일이 없는 경우
            ConfigurationError: YAML 파싱 또는 설정 검증 실패 시
        """
        if not Path(self.config_path).exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                raw_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError(f"Config root must be a mapping: {self.config_path}")

        return self._validate(raw_config)

    def load_defaults(self) -> Config:
        """파일 없이 기본값 + 환경 변수만으로 설정 생성"""
        return self._validate({})

    def _validate(self, raw_config: Dict[str, Any]) -> Config:
        raw_config = self._apply_env_overrides(raw_config)

        try:
            self._config = Config(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(self._format_validation_error(e)) from e
        return self._config

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """환경 변수로 설정 오버라이드

        환경 변수 형식: SDP_DECODER_<SECTION>_<KEY>
        예: SDP_DECODER_PARSER_SKIP_BLANK_LINES=false

        Args:
            config: 원본 설정 딕셔너리

        Returns:
            Dict: 환경 변수가 적용된 설정
        """
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX) or env_key == CONFIG_PATH_ENV:
                continue

            # SDP_DECODER_PARSER_MAX_LINE_LENGTH -> ['parser', 'max', 'line', 'length']
            parts = env_key[len(ENV_PREFIX):].lower().split('_')

            if len(parts) < 2:
                continue

            section = parts[0]
            key_path = '_'.join(parts[1:])

            if not isinstance(config.get(section), dict):
                config[section] = {}

            config[section][key_path] = self._convert_env_value(env_value)

        return config

    @staticmethod
    def _convert_env_value(value: str) -> Any:
        """환경 변수 값을 적절한 타입으로 변환"""
        if value.lower() in ('true', 'yes'):
            return True
        if value.lower() in ('false', 'no'):
            return False
        if value.lower() in ('none', 'null'):
            return None

        try:
            return int(value)
        except ValueError:
            pass

        return value

    @staticmethod
    def _format_validation_error(error: ValidationError) -> str:
        """ValidationError를 사용자 친화적인 메시지로 변환"""
        errors = []
        for err in error.errors():
            loc = ".".join(str(part) for part in err['loc'])
            errors.append(f"  - {loc}: {err['msg']}")

        return "Invalid configuration:\n" + "\n".join(errors)

    def reload(self) -> Config:
        """설정 파일 재로드"""
        return self.load()

    @property
    def config(self) -> Config:
        """현재 로드된 설정 반환

        Raises:
            RuntimeError: 설정이 아직 로드되지 않은 경우
        """
        if self._config is None:
            raise RuntimeError("Config not loaded. Call load() first.")
        return self._config


def load_config(config_path: Optional[str] = None) -> Config:
    """설정 파일 로드 편의 함수

    config_path 없이 호출했고 기본 경로에 파일이 없으면 기본값을 사용한다.

    Args:
        config_path: 설정 파일 경로

    Returns:
        Config: 검증된 설정 객체
    """
    loader = ConfigLoader(config_path)
    if config_path is None and not Path(loader.config_path).exists():
        return loader.load_defaults()
    return loader.load()
