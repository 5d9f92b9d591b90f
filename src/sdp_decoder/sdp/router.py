"""미디어 속성 라우터

열린 미디어 블록에 a= 속성을 반영
"""

from typing import Callable, Dict, Optional

from sdp_decoder.sdp import decoders
from sdp_decoder.sdp.models import MediaBlock, SessionDescription
from sdp_decoder.common.exceptions import (
    AttributeBeforeMediaError,
    UnsupportedMediaAttributeError,
)


def _set_packet_time(media: MediaBlock, value: str) -> None:
    media.packet_time = decoders.decode_unsigned(value)


def _add_codec_mapping(media: MediaBlock, value: str) -> None:
    media.codec_mappings.append(decoders.decode_rtpmap(value))


def _add_candidate(media: MediaBlock, value: str) -> None:
    media.candidates.append(decoders.decode_candidate(value))


def _add_format_parameter(media: MediaBlock, value: str) -> None:
    media.format_parameters.append(decoders.decode_fmtp(value))


def _add_feedback_rule(media: MediaBlock, value: str) -> None:
    media.feedback_rules.append(decoders.decode_rtcp_feedback(value))


def _add_ssrc(media: MediaBlock, value: str) -> None:
    media.ssrcs.append(decoders.decode_ssrc(value))


MEDIA_ATTRIBUTE_HANDLERS: Dict[str, Callable[[MediaBlock, str], None]] = {
    "ptime": _set_packet_time,
    "rtpmap": _add_codec_mapping,
    "candidate": _add_candidate,
    "fmtp": _add_format_parameter,
    "rtcp-fb": _add_feedback_rule,
    "ssrc": _add_ssrc,
}


class MediaAttributeRouter:
    """미디어 속성 라우터

    항상 마지막으로 열린 미디어 블록(media[-1])을 대상으로 한다.
    """

    @staticmethod
    def route(session: SessionDescription, key: str, value: Optional[str]) -> MediaBlock:
        """속성을 현재 미디어 블록에 반영

        Args:
            session: 누적 중인 세션
            key: 속성 이름 (값 없는 속성이면 속성 전체)
            value: 속성 값 (값 없는 속성이면 None)

        Returns:
            갱신된 MediaBlock

        Raises:
            AttributeBeforeMediaError: 아직 m= 라인이 없는 경우
            UnsupportedMediaAttributeError: 알 수 없는 속성
        """
        media = session.current_media
        if media is None:
            raise AttributeBeforeMediaError(key)

        if value is None:
            # 값 없는 속성은 모두 방향으로 취급 (sendrecv, recvonly, ...)
            media.direction = key
            return media

        handler = MEDIA_ATTRIBUTE_HANDLERS.get(key)
        if handler is None:
            raise UnsupportedMediaAttributeError(key)

        handler(media, value)
        return media
