"""SDP 문서 JSON 직렬화

SessionDescription을 읽기 전용으로 dict / JSON 텍스트로 변환.
None, 빈 문자열, 빈 리스트는 출력에서 생략한다.
"""

import dataclasses
import json
from typing import Any, Dict, Optional

from sdp_decoder.sdp.models import SessionDescription, Timing


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def _convert(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        result: Dict[str, Any] = {}
        for f in dataclasses.fields(value):
            converted = _convert(getattr(value, f.name))
            if not _is_empty(converted):
                result[f.name] = converted
        if isinstance(value, Timing):
            # 파생 값이지만 출력에는 포함
            result["bounded"] = value.bounded
        return result
    if isinstance(value, list):
        return [_convert(item) for item in value]
    return value


def to_dict(session: SessionDescription) -> Dict[str, Any]:
    """SessionDescription → 중첩 dict

    Args:
        session: 파싱된 세션

    Returns:
        snake_case 키를 가진 dict
    """
    return _convert(session)


def to_json(session: SessionDescription, indent: Optional[int] = None) -> str:
    """SessionDescription → JSON 텍스트"""
    return json.dumps(to_dict(session), indent=indent, ensure_ascii=False)
