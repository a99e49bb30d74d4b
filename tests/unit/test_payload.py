import pytest

from video_intake.domain.models import MediaFile, Orientation, SubmissionInput, SubtitleMode
from video_intake.domain.payload import ORIENTATION_TOKENS, SUBTITLE_TOKENS, build_submission_payload

AUDIO = MediaFile(filename="voice.mp3", payload=b"abc", content_type="audio/mpeg")
MUSIC = MediaFile(filename="bed.mp3", payload=b"xyz", content_type="audio/mpeg")


@pytest.mark.unit
def test_token_maps_are_exhaustive_and_exact() -> None:
    assert ORIENTATION_TOKENS == {Orientation.LANDSCAPE: "horizontal", Orientation.PORTRAIT: "vertical"}
    assert SUBTITLE_TOKENS == {SubtitleMode.WITH: "yes", SubtitleMode.WITHOUT: "no"}
    assert set(ORIENTATION_TOKENS) == set(Orientation)
    assert set(SUBTITLE_TOKENS) == set(SubtitleMode)


@pytest.mark.unit
def test_defaults_map_to_horizontal_without_subtitles() -> None:
    payload = build_submission_payload(SubmissionInput(audio_file=AUDIO), video_id="v_00-00-00_2024-01-01")

    assert payload.fields == {
        "video_id": "v_00-00-00_2024-01-01",
        "orientation": "horizontal",
        "subtitles": "no",
    }
    assert payload.files == {"audio_file": AUDIO}


@pytest.mark.unit
def test_background_music_and_choices_are_carried() -> None:
    submission = SubmissionInput(
        video_id="clip",
        audio_file=AUDIO,
        background_music=MUSIC,
        orientation=Orientation.PORTRAIT,
        subtitles=SubtitleMode.WITH,
    )

    payload = build_submission_payload(submission, video_id="clip_01-02-03_2024-02-03")

    assert payload.video_id == "clip_01-02-03_2024-02-03"
    assert payload.fields["orientation"] == "vertical"
    assert payload.fields["subtitles"] == "yes"
    assert payload.files == {"audio_file": AUDIO, "background_music": MUSIC}


@pytest.mark.unit
def test_payload_requires_audio() -> None:
    with pytest.raises(ValueError):
        build_submission_payload(SubmissionInput(video_id="x"), video_id="x")
