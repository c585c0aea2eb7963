"""GeminiAudioClient tests — SDK calls are mocked at the genai.Client seam."""
import logging

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.transcription.client import AudioModelClient
from src.transcription.errors import GenerationFailedError, UploadFailedError
from src.transcription.gemini import GeminiAudioClient, first_text
from src.transcription.models import AudioFile, RemoteFileHandle

HANDLE = RemoteFileHandle(uri="https://files.example/abc", mime_type="audio/mp3")


def make_sdk(upload=None, generate=None) -> MagicMock:
    sdk = MagicMock()
    sdk.aio.files.upload = upload or AsyncMock()
    sdk.aio.models.generate_content = generate or AsyncMock()
    return sdk


def make_response(*texts) -> MagicMock:
    response = MagicMock()
    response.candidates = [MagicMock()]
    response.candidates[0].content.parts = [MagicMock(text=t) for t in texts]
    return response


def test_gemini_client_implements_abc():
    assert issubclass(GeminiAudioClient, AudioModelClient)


# ── upload ────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_upload_returns_service_confirmed_mime():
    uploaded = MagicMock(uri="https://files.example/abc", mime_type="audio/mp3")
    sdk = make_sdk(upload=AsyncMock(return_value=uploaded))
    client = GeminiAudioClient(sdk)

    handle = await client.upload(AudioFile(name="a.mp3", data=b"id3", mime_type="audio/mpeg"))

    assert handle == HANDLE
    kwargs = sdk.aio.files.upload.call_args.kwargs
    assert kwargs["file"].read() == b"id3"
    assert kwargs["file"].name == "a.mp3"
    assert kwargs["config"].mime_type == "audio/mpeg"
    assert kwargs["config"].display_name == "a.mp3"


@pytest.mark.parametrize("uri, mime", [(None, "audio/mp3"), ("https://files.example/abc", None), ("", "")])
@pytest.mark.asyncio
async def test_upload_incomplete_response_fails(uri, mime):
    sdk = make_sdk(upload=AsyncMock(return_value=MagicMock(uri=uri, mime_type=mime)))

    with pytest.raises(UploadFailedError, match="missing uri or mime type"):
        await GeminiAudioClient(sdk).upload(AudioFile(name="a.wav", data=b"x", mime_type="audio/wav"))


@pytest.mark.asyncio
async def test_upload_sdk_error_fails():
    sdk = make_sdk(upload=AsyncMock(side_effect=RuntimeError("quota exceeded")))

    with pytest.raises(UploadFailedError, match="quota exceeded") as info:
        await GeminiAudioClient(sdk).upload(AudioFile(name="a.wav", data=b"x", mime_type="audio/wav"))

    assert isinstance(info.value.cause, RuntimeError)


def test_audio_file_defaults_last_modified():
    audio = AudioFile(name="a.wav", data=b"x", mime_type="audio/wav")

    assert audio.last_modified > 0


# ── generate ──────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_generate_sends_prompt_and_file_in_one_user_turn():
    sdk = make_sdk(generate=AsyncMock(return_value=make_response("hello world")))
    client = GeminiAudioClient(sdk, model="gemini-test")

    text = await client.generate("transcribe please", HANDLE)

    assert text == "hello world"
    kwargs = sdk.aio.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-test"
    [turn] = kwargs["contents"]
    assert turn.role == "user"
    assert turn.parts[0].text == "transcribe please"
    assert turn.parts[1].file_data.file_uri == HANDLE.uri
    assert turn.parts[1].file_data.mime_type == HANDLE.mime_type


@pytest.mark.asyncio
async def test_generate_empty_candidates_returns_none():
    response = MagicMock()
    response.candidates = []
    sdk = make_sdk(generate=AsyncMock(return_value=response))

    assert await GeminiAudioClient(sdk).generate("p", HANDLE) is None


@pytest.mark.asyncio
async def test_generate_sdk_error_fails():
    sdk = make_sdk(generate=AsyncMock(side_effect=ConnectionError("socket closed")))

    with pytest.raises(GenerationFailedError, match="socket closed"):
        await GeminiAudioClient(sdk).generate("p", HANDLE)


def test_first_text_skips_non_text_parts():
    assert first_text(make_response(None, "second")) == "second"


def test_first_text_handles_missing_fields():
    response = MagicMock()
    response.candidates = None

    assert first_text(response) is None
    assert first_text(make_response()) is None
    assert first_text(make_response("")) is None


@pytest.mark.asyncio
async def test_sdk_failures_are_not_logged_above_debug(caplog):
    sdk = make_sdk(
        upload=AsyncMock(side_effect=RuntimeError("quota exceeded")),
        generate=AsyncMock(side_effect=RuntimeError("unavailable")),
    )
    client = GeminiAudioClient(sdk)

    with caplog.at_level(logging.INFO, logger="src.transcription.gemini"):
        with pytest.raises(UploadFailedError):
            await client.upload(AudioFile(name="a.wav", data=b"x", mime_type="audio/wav"))
        with pytest.raises(GenerationFailedError):
            await client.generate("p", HANDLE)

    assert caplog.records == []
