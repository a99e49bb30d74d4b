from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from video_intake.domain.errors import ResponseFormatError

# The generation service answers either with one object or with a list of
# objects; both shapes are resolved here and nowhere else.


class VideoItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    video: str | None = None


@dataclass(frozen=True)
class VideoObjectBody:
    item: VideoItem
    kind: Literal["object"] = "object"


@dataclass(frozen=True)
class VideoSequenceBody:
    items: list[object]
    kind: Literal["sequence"] = "sequence"


ResponseBody = VideoObjectBody | VideoSequenceBody


def decode_response_body(payload: bytes) -> ResponseBody:
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ResponseFormatError(f"response body is not valid JSON: {exc}") from exc

    if isinstance(data, list):
        return VideoSequenceBody(items=data)
    if isinstance(data, dict):
        try:
            return VideoObjectBody(item=VideoItem.model_validate(data))
        except ValidationError as exc:
            raise ResponseFormatError(f"response object has an unusable video field: {exc}") from exc
    raise ResponseFormatError(f"response body must be an object or a list, got {type(data).__name__}")


def extract_video_url(body: ResponseBody) -> str | None:
    if isinstance(body, VideoSequenceBody):
        if not body.items:
            return None
        try:
            item = VideoItem.model_validate(body.items[0])
        except ValidationError:
            return None
    else:
        item = body.item

    return item.video or None


def resolve_video_url(payload: bytes) -> str:
    """Decode a success body and return its download link or raise."""
    url = extract_video_url(decode_response_body(payload))
    if url is None:
        raise ResponseFormatError("Invalid response format from webhook")
    return url
