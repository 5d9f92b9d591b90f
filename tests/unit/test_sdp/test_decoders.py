"""SDP 필드 디코더 단위 테스트"""

import pytest
from sdp_decoder.sdp import decoders
from sdp_decoder.sdp.models import (
    Candidate,
    CodecMapping,
    Connection,
    FeedbackRule,
    Fingerprint,
    FormatParameter,
    Origin,
    SynchronizationSource,
    Timing,
)
from sdp_decoder.common.exceptions import InvalidNumberError, MissingFieldError


class TestNumbers:
    """unsigned 정수 변환"""

    def test_decode_unsigned(self):
        assert decoders.decode_unsigned("20") == 20

    def test_max_unsigned(self):
        """64-bit 상한까지 허용"""
        assert decoders.decode_unsigned("18446744073709551615") == 2 ** 64 - 1

    def test_overflow(self):
        """64-bit 초과는 에러"""
        with pytest.raises(InvalidNumberError):
            decoders.decode_unsigned("18446744073709551616")

    @pytest.mark.parametrize("token", ["-1", "+1", "1.5", "1_000", "0x10", "٣"])
    def test_rejects_non_decimal(self, token):
        """ASCII 10진수 외 거부"""
        with pytest.raises(InvalidNumberError) as exc_info:
            decoders.decode_unsigned(token)

        assert exc_info.value.token == token
        assert exc_info.value.position == 1

    def test_empty_is_missing(self):
        """빈 값은 누락"""
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_unsigned("")

        assert exc_info.value.position == 1


class TestSessionDecoders:
    """세션 레벨 디코더"""

    def test_decode_origin(self):
        origin = decoders.decode_origin("- 4611731400430051336 2 IN IP4 127.0.0.1")
        assert origin == Origin("-", 4611731400430051336, 2, "IN", "IP4", "127.0.0.1")

    def test_decode_origin_invalid_version(self):
        with pytest.raises(InvalidNumberError) as exc_info:
            decoders.decode_origin("- 1 v2 IN IP4 127.0.0.1")

        assert exc_info.value.position == 3

    def test_decode_connection(self):
        assert decoders.decode_connection("IN IP4 217.130.243.155") == Connection(
            "IN", "IP4", "217.130.243.155"
        )

    def test_decode_connection_missing_address(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_connection("IN IP4")

        assert exc_info.value.position == 3

    @pytest.mark.parametrize("start,stop,bounded", [
        (0, 0, False),
        (0, 10, True),
        (10, 0, True),
        (10, 20, True),
    ])
    def test_decode_timing_bounded(self, start, stop, bounded):
        """bounded는 start/stop에서만 결정"""
        timing = decoders.decode_timing(f"{start} {stop}")
        assert timing == Timing(start, stop)
        assert timing.bounded is bounded

    def test_decode_timing_missing_stop(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_timing("0")

        assert exc_info.value.position == 2

    def test_decode_fingerprint(self):
        fingerprint = decoders.decode_fingerprint("sha-256 49:66:12:17:0D:1C")
        assert fingerprint == Fingerprint("sha-256", "49:66:12:17:0D:1C")

    def test_decode_fingerprint_missing_hash(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_fingerprint("sha-256")

        assert exc_info.value.position == 2


class TestMediaDecoders:
    """미디어 레벨 디코더"""

    def test_decode_media(self):
        media = decoders.decode_media("video 60372 UDP/TLS/RTP/SAVPF 100 101 116 117 96")
        assert media.media_type == "video"
        assert media.port == 60372
        assert media.protocol == "UDP/TLS/RTP/SAVPF"
        assert media.payloads == "100 101 116 117 96"
        assert media.candidates == []

    def test_decode_media_without_payloads(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_media("application 9 DTLS/SCTP")

        assert exc_info.value.position == 4

    def test_decode_candidate(self):
        candidate = decoders.decode_candidate(
            "1467250027 1 udp 2122260223 192.168.0.196 46243 typ host generation 0"
        )
        assert candidate == Candidate(
            component=1467250027,
            foundation="1",
            transport="udp",
            priority=2122260223,
            ip="192.168.0.196",
            port=46243,
            type="host",
        )

    def test_decode_candidate_skips_typ_without_checking(self):
        """port 다음 토큰은 값과 관계없이 건너뜀"""
        candidate = decoders.decode_candidate("0 1 UDP 1 10.0.0.1 5000 kind srflx")
        assert candidate.type == "srflx"

    def test_decode_candidate_missing_type(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_candidate("0 1 UDP 1 10.0.0.1 5000 typ")

        assert exc_info.value.position == 7

    def test_decode_candidate_invalid_priority(self):
        with pytest.raises(InvalidNumberError) as exc_info:
            decoders.decode_candidate("0 1 UDP high 10.0.0.1 5000 typ host")

        assert exc_info.value.position == 4

    def test_decode_rtpmap(self):
        assert decoders.decode_rtpmap("0 PCMU/8000") == CodecMapping("0", "PCMU", 8000)

    def test_decode_rtpmap_channels(self):
        """codec/rate/channels"""
        codec = decoders.decode_rtpmap("111 opus/48000/2")
        assert codec == CodecMapping("111", "opus", 48000, channels=2)

    def test_decode_rtpmap_missing_encoding(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_rtpmap("111")

        assert exc_info.value.position == 2

    def test_decode_rtpmap_missing_rate(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_rtpmap("111 opus")

        assert exc_info.value.position == 3

    def test_decode_fmtp(self):
        """config는 원문 그대로 (';' 미분해)"""
        fmtp = decoders.decode_fmtp("111 minptime=10; useinbandfec=1")
        assert fmtp == FormatParameter(payload=111, config="minptime=10; useinbandfec=1")

    def test_decode_fmtp_invalid_payload(self):
        with pytest.raises(InvalidNumberError):
            decoders.decode_fmtp("abc minptime=10")

    def test_decode_rtcp_feedback(self):
        assert decoders.decode_rtcp_feedback("100 nack") == FeedbackRule("100", "nack")

    def test_decode_rtcp_feedback_wildcard_with_parameter(self):
        rule = decoders.decode_rtcp_feedback("* ccm fir")
        assert rule == FeedbackRule(payload="*", type="ccm", parameter="fir")

    def test_decode_rtcp_feedback_missing_type(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_rtcp_feedback("97")

        assert exc_info.value.position == 2

    def test_decode_ssrc(self):
        ssrc = decoders.decode_ssrc("3570614608 cname:4TOk42mSjXCkVIa6")
        assert ssrc == SynchronizationSource(3570614608, "cname", "4TOk42mSjXCkVIa6")

    def test_decode_ssrc_value_keeps_spaces_and_colons(self):
        ssrc = decoders.decode_ssrc("1 msid:stream track:0")
        assert ssrc.attribute == "msid"
        assert ssrc.value == "stream track:0"

    def test_decode_ssrc_without_value(self):
        assert decoders.decode_ssrc("1399694169 baz") == SynchronizationSource(1399694169, "baz")

    def test_decode_ssrc_empty_value(self):
        """콜론 뒤가 비어 있으면 빈 문자열 값 (값 없음과 구분)"""
        ssrc = decoders.decode_ssrc("1 cname:")

        assert ssrc == SynchronizationSource(1, "cname", "")
        assert ssrc.value is not None

    def test_decode_ssrc_missing_attribute(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decoders.decode_ssrc("1399694169")

        assert exc_info.value.position == 2
