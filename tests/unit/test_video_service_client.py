import asyncio

import httpx
import pytest

from video_intake.clients.video_service import HttpVideoServiceClient
from video_intake.domain.dto import SubmissionPayload
from video_intake.domain.errors import TransportError
from video_intake.domain.models import MediaFile

SERVICE_URL = "http://video.local/webhook"

AUDIO = MediaFile(filename="voice.mp3", payload=b"voice-bytes", content_type="audio/mpeg")
MUSIC = MediaFile(filename="bed.mp3", payload=b"music-bytes", content_type="audio/mpeg")


def _payload(*, with_music: bool) -> SubmissionPayload:
    files = {"audio_file": AUDIO}
    if with_music:
        files["background_music"] = MUSIC
    return SubmissionPayload(
        fields={"video_id": "show1_09-07-02_2024-03-05", "orientation": "horizontal", "subtitles": "no"},
        files=files,
    )


@pytest.mark.unit
def test_client_posts_multipart_body() -> None:
    captured: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"video": "https://host/x.mp4"})

    client = HttpVideoServiceClient(service_url=SERVICE_URL, transport=httpx.MockTransport(_handler))

    response = asyncio.run(client.submit(_payload(with_music=True)))

    assert response.ok is True
    assert response.status_code == 200
    assert b"https://host/x.mp4" in response.body

    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == SERVICE_URL
    assert request.headers["content-type"].startswith("multipart/form-data")
    body = request.read()
    assert b'name="video_id"' in body
    assert b"show1_09-07-02_2024-03-05" in body
    assert b'name="audio_file"; filename="voice.mp3"' in body
    assert b'name="background_music"; filename="bed.mp3"' in body
    assert b"music-bytes" in body


@pytest.mark.unit
def test_client_omits_background_music_part_when_absent() -> None:
    bodies: list[bytes] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.read())
        return httpx.Response(200, json=[{"video": "https://host/y.mp4"}])

    client = HttpVideoServiceClient(service_url=SERVICE_URL, transport=httpx.MockTransport(_handler))

    asyncio.run(client.submit(_payload(with_music=False)))

    assert b"background_music" not in bodies[0]
    assert b'name="subtitles"' in bodies[0]


@pytest.mark.unit
def test_client_returns_failure_status_without_raising() -> None:
    client = HttpVideoServiceClient(
        service_url=SERVICE_URL,
        transport=httpx.MockTransport(lambda request: httpx.Response(502, text="bad gateway")),
    )

    response = asyncio.run(client.submit(_payload(with_music=False)))

    assert response.ok is False
    assert response.status_code == 502


@pytest.mark.unit
def test_client_wraps_network_faults_as_transport_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = HttpVideoServiceClient(service_url=SERVICE_URL, transport=httpx.MockTransport(_handler))

    with pytest.raises(TransportError):
        asyncio.run(client.submit(_payload(with_music=False)))
