"""Byte acquisition — the only stage that does I/O to obtain input audio."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import httpx

from src.constants import (
    MSG_ACQUIRED,
    MSG_FETCHING_REMOTE,
    MSG_HEAD_FAILED,
    MSG_PROCESSING_LOCAL,
    MSG_READING_BUFFER,
)
from src.transcription.errors import (
    InvalidInputError,
    NotFoundError,
    RemoteFetchFailedError,
    RemoteUnreachableError,
)
from src.transcription.source import BufferSource, LocalSource, RemoteSource, SourceDescriptor

logger = logging.getLogger(__name__)


async def acquire(
    source: SourceDescriptor,
    timeout_ms: int,
    verbose: bool = True,
    http_client: Optional[httpx.AsyncClient] = None,
) -> bytes:
    """Return the full audio payload for ``source``.

    Raises NotFoundError, RemoteUnreachableError, RemoteFetchFailedError or
    InvalidInputError depending on the source kind.
    """
    match source:
        case LocalSource(path=path):
            data = await _read_local(path, verbose)
        case RemoteSource(url=url):
            if verbose:
                logger.info(MSG_FETCHING_REMOTE, url)
            data = await _with_client(http_client, lambda c: _read_remote(c, url, timeout_ms, verbose))
        case BufferSource(data=raw):
            if verbose:
                logger.info(MSG_READING_BUFFER)
            data = read_buffer(raw)
        case _:
            raise InvalidInputError(f"unsupported source {source!r}")

    if verbose:
        logger.info(MSG_ACQUIRED, len(data))
    return data


# ── local ─────────────────────────────────────────────────────────────────────


async def _read_local(path: str, verbose: bool) -> bytes:
    try:
        resolved = Path(path).expanduser().resolve()
        if verbose:
            logger.info(MSG_PROCESSING_LOCAL, resolved)
        return await asyncio.to_thread(resolved.read_bytes)
    except (OSError, ValueError, RuntimeError) as exc:
        # report what the caller typed, not the resolved path
        raise NotFoundError(path, cause=exc) from exc


# ── remote ────────────────────────────────────────────────────────────────────


async def _with_client(http_client: Optional[httpx.AsyncClient], fetch):
    match http_client:
        case None:
            async with httpx.AsyncClient() as client:
                return await fetch(client)
        case client:
            return await fetch(client)


async def check_url_exists(
    client: httpx.AsyncClient, url: str, timeout_ms: int, verbose: bool = True
) -> tuple[bool, Optional[int]]:
    """HEAD probe bounded by ``timeout_ms``. Returns (exists, status)."""
    seconds = timeout_ms / 1000
    try:
        # wait_for cancels the in-flight request on timeout
        response = await asyncio.wait_for(
            client.head(url, timeout=seconds, follow_redirects=False), timeout=seconds
        )
    except asyncio.TimeoutError:
        if verbose:
            logger.error(MSG_HEAD_FAILED, url, "timed out")
        return False, None
    except httpx.HTTPError as exc:
        if verbose:
            logger.error(MSG_HEAD_FAILED, url, exc)
        return False, None

    status = response.status_code
    return 200 <= status < 400, status


async def _read_remote(client: httpx.AsyncClient, url: str, timeout_ms: int, verbose: bool) -> bytes:
    exists, status = await check_url_exists(client, url, timeout_ms, verbose)
    match (exists, status):
        case (False, None):
            raise RemoteUnreachableError(url)
        case (False, code):
            raise RemoteUnreachableError(url, status=code)
        case _:
            pass

    try:
        response = await client.get(url, timeout=None, follow_redirects=True)
    except httpx.HTTPError as exc:
        raise RemoteFetchFailedError(str(exc) or type(exc).__name__, cause=exc) from exc

    match response.is_success:
        case True:
            return response.content
        case False:
            raise RemoteFetchFailedError(response.reason_phrase or str(response.status_code))


# ── buffer ────────────────────────────────────────────────────────────────────


def read_buffer(raw: object) -> bytes:
    """Materialize bytes from a bytes-like object or a readable binary stream."""
    match raw:
        case bytes():
            return raw
        case bytearray() | memoryview():
            return bytes(raw)
        case _ if callable(getattr(raw, "read", None)):
            try:
                data = raw.read()
            except Exception as exc:
                raise InvalidInputError(f"buffer could not be read: {exc}", cause=exc) from exc
            match data:
                case bytes() | bytearray():
                    return bytes(data)
                case _:
                    raise InvalidInputError("buffer stream did not return bytes")
        case _:
            raise InvalidInputError(f"expected a bytes-like buffer, got {type(raw).__name__}")
