from pathlib import Path

import pytest

from video_intake import main as main_module
from video_intake.clients.stub import StubVideoServiceClient
from video_intake.main import run
from video_intake.domain.validation import MAX_UPLOAD_BYTES
from video_intake.roles import RuntimeRole
from video_intake.services.bootstrap import RuntimeContainer, build_runtime_container


@pytest.mark.unit
def test_cli_returns_non_zero_for_invalid_role(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = run(["--role", "bad-role", "--dry-run-startup"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "ERROR:" in captured.err
    assert "Supported roles" in captured.err


@pytest.mark.unit
@pytest.mark.parametrize("role", ["api", "submit"])
def test_cli_dry_run_succeeds_for_valid_role(role: str) -> None:
    assert run(["--role", role, "--dry-run-startup"]) == 0


def _install_stub(monkeypatch: pytest.MonkeyPatch, client: StubVideoServiceClient) -> None:
    def _build(role: RuntimeRole, **kwargs: object) -> RuntimeContainer:
        kwargs["client"] = client
        return build_runtime_container(role, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(main_module, "build_runtime_container", _build)


@pytest.mark.unit
def test_submit_role_prints_download_link(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    audio = tmp_path / "voice.mp3"
    audio.write_bytes(b"voice")
    music = tmp_path / "bed.mp3"
    music.write_bytes(b"music")
    client = StubVideoServiceClient(body=[{"video": "https://host/y.mp4"}])
    _install_stub(monkeypatch, client)

    exit_code = run(
        [
            "--role",
            "submit",
            "--video-id",
            "show1",
            "--audio",
            str(audio),
            "--background-music",
            str(music),
            "--orientation",
            "portrait",
            "--subtitles",
            "with",
        ]
    )

    assert exit_code == 0
    assert "Your video is ready! Download it here: https://host/y.mp4" in capsys.readouterr().out
    payload = client.calls[0]
    assert payload.video_id.startswith("show1_")
    assert payload.fields["orientation"] == "vertical"
    assert payload.fields["subtitles"] == "yes"
    assert payload.files["background_music"].filename == "bed.mp3"
    assert payload.files["audio_file"].content_type == "audio/mpeg"


@pytest.mark.unit
def test_submit_role_reports_remote_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    audio = tmp_path / "voice.mp3"
    audio.write_bytes(b"voice")
    _install_stub(monkeypatch, StubVideoServiceClient(fail_with="connection refused"))

    exit_code = run(["--role", "submit", "--video-id", "show1", "--audio", str(audio)])

    assert exit_code == 1
    assert "Error creating video. Please try again later." in capsys.readouterr().err


@pytest.mark.unit
def test_submit_role_rejects_oversized_audio_without_network(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    audio = tmp_path / "huge.wav"
    audio.write_bytes(b"\x00" * (MAX_UPLOAD_BYTES + 1))
    client = StubVideoServiceClient()
    _install_stub(monkeypatch, client)

    exit_code = run(["--role", "submit", "--audio", str(audio)])

    assert exit_code == 2
    assert "Audio file must be under 5MB." in capsys.readouterr().err
    assert client.calls == []


@pytest.mark.unit
def test_submit_role_requires_audio(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["--role", "submit", "--video-id", "show1"]) == 2
    assert "--audio is required" in capsys.readouterr().err
