import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from src.constants import DEFAULT_TIMEOUT_MS
from src.transcription.errors import ErrorKind


class TranscriptionStyle(Enum):
    ACCURATE = "accurate"
    CLEAN = "clean"
    STRUCTURED = "structured"
    TECHNICAL = "technical"
    CONVERSATIONAL = "conversational"

    @classmethod
    def parse(cls, value: Union[str, "TranscriptionStyle", None]) -> "TranscriptionStyle":
        """Map a style name to a member; anything unrecognised becomes ACCURATE."""
        match value:
            case TranscriptionStyle():
                return value
            case str() as s:
                try:
                    return cls(s.strip().lower())
                except ValueError:
                    return cls.ACCURATE
            case _:
                return cls.ACCURATE


@dataclass(frozen=True)
class TranscriptionOptions:
    style: TranscriptionStyle = TranscriptionStyle.ACCURATE
    language: Optional[str] = None
    context: Optional[str] = None
    verbose: bool = True
    timeout_ms: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True)
class RemoteFileHandle:
    uri: str
    mime_type: str


@dataclass(frozen=True)
class AudioFile:
    """Named audio payload handed to the upload client."""

    name: str
    data: bytes
    mime_type: str
    last_modified: float = field(default_factory=time.time)


# ── results ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Transcribed:
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Transcribed requires non-empty text")

    @property
    def success(self) -> bool:
        return True

    @property
    def transcription(self) -> str:
        return self.text

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Failed:
    message: str
    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("Failed requires an error message")

    @property
    def success(self) -> bool:
        return False

    @property
    def transcription(self) -> None:
        return None

    @property
    def error(self) -> str:
        return self.message


TranscriptionResult = Union[Transcribed, Failed]
