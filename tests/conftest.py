"""pytest 설정 파일

공통 fixtures 및 테스트 설정
"""

import pytest
import tempfile
import yaml
from pathlib import Path


# WebRTC 오퍼 (오디오 + 비디오, ICE/DTLS 포함)
WEBRTC_OFFER = """v=0
o=- 20518 0 IN IP4 203.0.113.1
s=
t=0 0
c=IN IP4 203.0.113.1
a=ice-ufrag:F7gI
a=ice-pwd:x9cml/YzichV2+XlhiMu8g
a=fingerprint:sha-1 42:89:c5:c6:55:9d:6e:c8:e8:83:55:2a:39:f9:b6:eb:e9:a3:a9:e7
m=audio 54400 RTP/SAVPF 0 96
a=rtpmap:0 PCMU/8000
a=rtpmap:96 opus/48000
a=ptime:20
a=sendrecv
a=candidate:0 1 UDP 2113667327 203.0.113.1 54400 typ host
a=candidate:1 2 UDP 2113667326 203.0.113.1 54401 typ host
m=video 55400 RTP/SAVPF 97 98
a=rtcp-fb:* nack
a=rtpmap:97 H264/90000
a=fmtp:97 profile-level-id=4d0028;packetization-mode=1
a=rtcp-fb:97 trr-int 100
a=rtcp-fb:97 nack rpsi
a=rtpmap:98 VP8/90000
a=rtcp-fb:98 trr-int 100
a=rtcp-fb:98 nack rpsi
a=sendrecv
a=candidate:0 1 UDP 2113667327 203.0.113.1 55400 typ host
a=candidate:1 2 UDP 2113667326 203.0.113.1 55401 typ host
a=ssrc:1399694169 foo:bar
a=ssrc:1399694169 baz
"""


@pytest.fixture
def webrtc_offer() -> str:
    """LF 구분 WebRTC 오퍼"""
    return WEBRTC_OFFER


@pytest.fixture
def webrtc_offer_crlf() -> str:
    """CRLF 구분 WebRTC 오퍼"""
    return WEBRTC_OFFER.replace("\n", "\r\n")


@pytest.fixture
def sdp_file(tmp_path):
    """WebRTC 오퍼가 기록된 임시 SDP 파일"""
    path = tmp_path / "offer.sdp"
    path.write_text(WEBRTC_OFFER, encoding="utf-8")
    return str(path)


@pytest.fixture
def temp_config_file():
    """임시 설정 파일 fixture"""
    config_data = {
        "logging": {
            "level": "INFO",
            "format": "json",
            "output": "stderr",
        },
        "parser": {
            "skip_blank_lines": True,
            "max_line_length": 1024,
        },
        "output": {
            "indent": 4,
        },
    }

    with tempfile.NamedTemporaryFile(
        mode='w',
        suffix='.yaml',
        delete=False,
        encoding='utf-8'
    ) as f:
        yaml.dump(config_data, f)
        temp_path = f.name

    yield temp_path

    Path(temp_path).unlink(missing_ok=True)


@pytest.fixture
def invalid_config_file():
    """잘못된 설정 파일 fixture"""
    config_data = {
        "logging": {
            "level": "VERBOSE",  # 존재하지 않는 레벨
        },
        "parser": {
            "max_line_length": 1,  # 최소값(16) 미만
        },
    }

    with tempfile.NamedTemporaryFile(
        mode='w',
        suffix='.yaml',
        delete=False,
        encoding='utf-8'
    ) as f:
        yaml.dump(config_data, f)
        temp_path = f.name

    yield temp_path

    Path(temp_path).unlink(missing_ok=True)
