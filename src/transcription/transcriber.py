"""Transcriber — sole public entry point; never raises, always returns a TranscriptionResult."""
import asyncio
import logging
from collections.abc import Iterable
from pathlib import PurePath
from typing import Optional

import httpx

from src.constants import (
    BUFFER_FILENAME,
    BUFFER_MIME_TYPE,
    MSG_ERR_UNEXPECTED,
    MSG_NO_RESULT,
    MSG_PIPELINE_FAILED,
    MSG_TRANSCRIBED,
)
from src.transcription.acquire import acquire
from src.transcription.client import AudioModelClient
from src.transcription.errors import ErrorKind, InvalidInputError, TranscriptionError
from src.transcription.mime import classify, name_from_url
from src.transcription.models import (
    AudioFile,
    Failed,
    TranscriptionOptions,
    TranscriptionResult,
    Transcribed,
)
from src.transcription.prompts import build_prompt
from src.transcription.source import BufferSource, LocalSource, RemoteSource, SourceDescriptor

logger = logging.getLogger(__name__)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def _has_host(url: str) -> bool:
    try:
        return bool(httpx.URL(url.strip()).host)
    except httpx.InvalidURL:
        return False


def validate(source: SourceDescriptor) -> None:
    """Reject blank identifiers before any file-system or network access."""
    match source:
        case LocalSource(path=p) if not isinstance(p, str) or not p.strip():
            raise InvalidInputError("audio file path is empty")
        case RemoteSource(url=u) if not isinstance(u, str) or not u.strip():
            raise InvalidInputError("audio URL is empty")
        case RemoteSource(url=u) if not _has_host(u):
            raise InvalidInputError(f"malformed audio URL: {u}")
        case BufferSource(data=None):
            raise InvalidInputError("audio buffer is missing")
        case LocalSource() | RemoteSource() | BufferSource():
            pass
        case _:
            raise InvalidInputError(f"unsupported source {source!r}")


def describe_upload(source: SourceDescriptor) -> tuple[str, str]:
    """Return (file_name, mime_type) for the upload of ``source``."""
    match source:
        case LocalSource(path=p):
            return PurePath(p).name, classify(p)
        case RemoteSource(url=u):
            name = name_from_url(u)
            return name, classify(name)
        case BufferSource(file_name=None, mime_type=None):
            return BUFFER_FILENAME, BUFFER_MIME_TYPE
        case BufferSource(file_name=str() as name, mime_type=None) if name:
            return name, classify(name)
        case BufferSource(file_name=name, mime_type=mime):
            return name or BUFFER_FILENAME, mime or BUFFER_MIME_TYPE


class Transcriber:
    """Runs source → bytes → upload → prompt → generate for one request at a time.

    Holds no per-request state, so one instance may serve concurrent calls.
    """

    def __init__(
        self,
        client: AudioModelClient,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._client = client
        self._http_client = http_client

    async def transcribe(
        self,
        source: SourceDescriptor,
        options: Optional[TranscriptionOptions] = None,
    ) -> TranscriptionResult:
        opts = options or TranscriptionOptions()
        try:
            result = await self._run(source, opts)
        except TranscriptionError as exc:
            result = Failed(message=str(exc), kind=exc.kind)
        except Exception as exc:
            result = Failed(
                message=MSG_ERR_UNEXPECTED % (str(exc) or type(exc).__name__),
                kind=ErrorKind.UNEXPECTED,
            )

        match result:
            case Failed(message=msg, kind=kind) if opts.verbose:
                logger.error(MSG_PIPELINE_FAILED, kind.value, msg)
            case Transcribed(text=text) if opts.verbose:
                logger.info(MSG_TRANSCRIBED, len(text))
            case _:
                pass
        return result

    async def transcribe_buffer(
        self,
        data: object,
        options: Optional[TranscriptionOptions] = None,
        file_name: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> TranscriptionResult:
        return await self.transcribe(
            BufferSource(data=data, file_name=file_name, mime_type=mime_type), options
        )

    async def transcribe_many(
        self,
        sources: Iterable[SourceDescriptor],
        options: Optional[TranscriptionOptions] = None,
    ) -> list[TranscriptionResult]:
        """Independent requests run concurrently; results keep input order."""
        return list(await asyncio.gather(*(self.transcribe(s, options) for s in sources)))

    async def _run(self, source: SourceDescriptor, opts: TranscriptionOptions) -> TranscriptionResult:
        validate(source)
        data = await acquire(source, opts.timeout_ms, opts.verbose, self._http_client)
        file_name, mime_type = describe_upload(source)

        handle = await self._client.upload(
            AudioFile(name=file_name, data=data, mime_type=mime_type)
        )
        prompt = build_prompt(opts.style, opts.language, opts.context)
        # the service may normalize the MIME type; only its confirmed value goes forward
        text = await self._client.generate(prompt, handle)

        match text.strip() if text else "":
            case "":
                return Failed(message=MSG_NO_RESULT, kind=ErrorKind.EMPTY_RESULT)
            case _:
                return Transcribed(text=text)
