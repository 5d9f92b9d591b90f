"""SDP 데이터 모델

Session Description Protocol 파싱 결과를 담는 데이터 클래스
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Origin:
    """세션 생성자 정보 (o= line)

    예: o=- 20518 0 IN IP4 203.0.113.1
    """
    username: str
    session_id: int          # 세션 고유 식별자
    session_version: int     # 재협상 시마다 증가
    network_type: str        # IN
    address_type: str        # IP4, IP6
    address: str             # 생성자 유니캐스트 주소


@dataclass(frozen=True)
class Connection:
    """연결 정보 (c= line)

    예: c=IN IP4 203.0.113.1
    """
    network_type: str
    address_type: str
    address: str


@dataclass(frozen=True)
class Timing:
    """세션 시간 (t= line)

    start/stop 모두 0이면 시간 제한 없는 영구 세션.
    """
    start_time: int
    stop_time: int

    @property
    def bounded(self) -> bool:
        return not (self.start_time == 0 and self.stop_time == 0)


@dataclass(frozen=True)
class Fingerprint:
    """DTLS 인증서 지문 (a=fingerprint)

    예: a=fingerprint:sha-256 49:66:12:17:...
    """
    algorithm: str
    value: str


@dataclass(frozen=True)
class Candidate:
    """ICE 후보 (a=candidate)

    예: a=candidate:1467250027 1 udp 2122260223 192.168.0.196 46243 typ host
    """
    component: int
    foundation: str
    transport: str
    priority: int
    ip: str
    port: int
    type: str


@dataclass(frozen=True)
class FormatParameter:
    """코덱별 포맷 파라미터 (a=fmtp)

    config는 ';'로 구분된 하위 키를 분해하지 않은 원문.
    """
    payload: int
    config: str


@dataclass(frozen=True)
class CodecMapping:
    """RTP payload → 코덱 매핑 (a=rtpmap)

    예: a=rtpmap:111 opus/48000/2
    """
    payload: str             # fmtp payload와 문자열로 비교하기 위해 str 유지
    codec: str
    rate: int                # clock rate (Hz)
    channels: Optional[int] = None


@dataclass(frozen=True)
class FeedbackRule:
    """RTCP 피드백 (a=rtcp-fb)

    예: a=rtcp-fb:97 nack rpsi  →  type="nack", parameter="rpsi"
    """
    payload: str             # payload 번호 또는 와일드카드 '*'
    type: str
    parameter: Optional[str] = None


@dataclass(frozen=True)
class SynchronizationSource:
    """SSRC 속성 (a=ssrc)

    예: a=ssrc:3570614608 cname:4TOk42mSjXCkVIa6
    """
    id: int
    attribute: str
    value: Optional[str] = None


@dataclass
class MediaBlock:
    """미디어 블록 (m= line 및 이후 a= lines)

    예: m=audio 54400 RTP/SAVPF 0 96
    """
    media_type: str          # audio, video, application
    port: int
    protocol: str            # RTP/SAVPF, UDP/TLS/RTP/SAVPF, etc.
    payloads: str            # payload 목록 원문 ("0 96")

    # 스칼라 속성 (마지막 값 유지)
    direction: Optional[str] = None
    packet_time: Optional[int] = None

    # 누적 속성
    candidates: List[Candidate] = field(default_factory=list)
    format_parameters: List[FormatParameter] = field(default_factory=list)
    codec_mappings: List[CodecMapping] = field(default_factory=list)
    feedback_rules: List[FeedbackRule] = field(default_factory=list)
    ssrcs: List[SynchronizationSource] = field(default_factory=list)

    def payload_list(self) -> List[str]:
        """payload 목록을 개별 번호로 분리"""
        return self.payloads.split()

    def find_codec(self, payload: str) -> Optional[CodecMapping]:
        """payload 번호로 코덱 매핑 검색"""
        for codec in self.codec_mappings:
            if codec.payload == payload:
                return codec
        return None


@dataclass
class SessionDescription:
    """SDP 세션 정보

    전체 SDP를 파싱한 결과
    """
    # Session 레벨 정보
    version: int = 0                                # v=
    session_name: str = ""                          # s=
    ice_ufrag: Optional[str] = None                 # a=ice-ufrag
    ice_pwd: Optional[str] = None                   # a=ice-pwd
    origin: Optional[Origin] = None                 # o=
    timing: Optional[Timing] = None                 # t=
    connection: Optional[Connection] = None         # c=
    fingerprint: Optional[Fingerprint] = None       # a=fingerprint

    # 미디어 블록 리스트
    media: List[MediaBlock] = field(default_factory=list)

    @property
    def open_media_index(self) -> int:
        """지금까지 열린 미디어 블록 수 (0이면 아직 m= 라인 없음)"""
        return len(self.media)

    @property
    def current_media(self) -> Optional[MediaBlock]:
        """가장 최근에 열린 미디어 블록"""
        if not self.media:
            return None
        return self.media[-1]

    def get_media_by_type(self, media_type: str) -> Optional[MediaBlock]:
        """미디어 타입으로 첫 번째 블록 검색

        Args:
            media_type: audio, video 등

        Returns:
            MediaBlock 또는 None
        """
        for media in self.media:
            if media.media_type == media_type:
                return media
        return None

    def has_audio(self) -> bool:
        """오디오 포함 여부"""
        return self.get_media_by_type("audio") is not None

    def has_video(self) -> bool:
        """비디오 포함 여부"""
        return self.get_media_by_type("video") is not None
