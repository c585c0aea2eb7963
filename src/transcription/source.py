"""Source descriptors — where the audio bytes for one request come from."""
from dataclasses import dataclass
from typing import Optional, Union

from src.constants import REMOTE_SCHEMES


@dataclass(frozen=True)
class LocalSource:
    path: str


@dataclass(frozen=True)
class RemoteSource:
    url: str


@dataclass(frozen=True)
class BufferSource:
    """In-memory audio. ``data`` is bytes-like or a readable binary stream."""

    data: object
    file_name: Optional[str] = None
    mime_type: Optional[str] = None


SourceDescriptor = Union[LocalSource, RemoteSource, BufferSource]


def is_remote(raw: str) -> bool:
    return raw.strip().lower().startswith(REMOTE_SCHEMES)


def resolve_source(raw: str) -> SourceDescriptor:
    """http(s) URLs become RemoteSource, everything else is a local path."""
    match is_remote(raw):
        case True:
            return RemoteSource(url=raw.strip())
        case False:
            return LocalSource(path=raw)
