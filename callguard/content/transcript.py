"""Call transcript parsing into speaker-tagged messages."""

import json
import re

from pydantic import BaseModel, ValidationError

SPEAKER_PATTERN = re.compile(r"^(Agent|User|Lead|Bot|Assistant|Human):\s*(.*)$", re.IGNORECASE)
UNKNOWN_ROLE = "unknown"


class TranscriptMessage(BaseModel):
    role: str
    content: str


def _parse_json(text: str) -> list[TranscriptMessage] | None:
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    if not isinstance(parsed, list):
        return None
    try:
        return [TranscriptMessage.model_validate(item) for item in parsed]
    except ValidationError:
        return None


def parse_transcript(text: str | None) -> list[TranscriptMessage]:
    """Split a transcript into messages.

    Accepts either a JSON array of ``{role, content}`` objects or plain text
    with one ``Speaker: text`` line per utterance. Lines without a known
    speaker prefix keep their text under the ``unknown`` role.
    """
    if not text:
        return []

    messages = _parse_json(text)
    if messages is not None:
        return messages

    messages = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        match = SPEAKER_PATTERN.match(line)
        if match:
            messages.append(TranscriptMessage(role=match.group(1).lower(), content=match.group(2)))
        else:
            messages.append(TranscriptMessage(role=UNKNOWN_ROLE, content=line))
    return messages
