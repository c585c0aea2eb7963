"""GeminiAudioClient — Google Gemini upload + generate backend."""
import io
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from src.constants import (
    GEMINI_MODEL,
    GEMINI_USER_ROLE,
    MSG_ERR_UPLOAD_INCOMPLETE,
    MSG_GENERATING,
    MSG_UPLOADED,
    MSG_UPLOADING,
)
from src.transcription.client import AudioModelClient
from src.transcription.errors import GenerationFailedError, UploadFailedError
from src.transcription.models import AudioFile, RemoteFileHandle

logger = logging.getLogger(__name__)


def first_text(response: Any) -> Optional[str]:
    """First text part of the first candidate, or None if the response carries none."""
    candidates = getattr(response, "candidates", None) or []
    match candidates:
        case []:
            return None
        case [first, *_]:
            content = getattr(first, "content", None)
            parts = getattr(content, "parts", None) or []
            texts = [p.text for p in parts if getattr(p, "text", None)]
            return texts[0] if texts else None


class GeminiAudioClient(AudioModelClient):

    def __init__(self, client: genai.Client, model: str = GEMINI_MODEL) -> None:
        self._client = client
        self._model = model

    async def upload(self, audio: AudioFile) -> RemoteFileHandle:
        stream = io.BytesIO(audio.data)
        stream.name = audio.name
        logger.debug(MSG_UPLOADING, audio.name, audio.mime_type)
        try:
            uploaded = await self._client.aio.files.upload(
                file=stream,
                config=types.UploadFileConfig(
                    mime_type=audio.mime_type,
                    display_name=audio.name,
                ),
            )
        except Exception as exc:
            logger.debug("Gemini upload failed: %s", exc)
            raise UploadFailedError(str(exc) or type(exc).__name__, cause=exc) from exc

        uri = getattr(uploaded, "uri", None)
        mime_type = getattr(uploaded, "mime_type", None)
        match (uri, mime_type):
            case (str() as u, str() as m) if u and m:
                logger.debug(MSG_UPLOADED, u, m)
                return RemoteFileHandle(uri=u, mime_type=m)
            case _:
                raise UploadFailedError(MSG_ERR_UPLOAD_INCOMPLETE)

    async def generate(self, prompt: str, handle: RemoteFileHandle) -> Optional[str]:
        logger.debug(MSG_GENERATING, self._model)
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=[
                    types.Content(
                        role=GEMINI_USER_ROLE,
                        parts=[
                            types.Part(text=prompt),
                            types.Part(
                                file_data=types.FileData(
                                    file_uri=handle.uri,
                                    mime_type=handle.mime_type,
                                )
                            ),
                        ],
                    )
                ],
            )
        except Exception as exc:
            logger.debug("Gemini generate_content failed: %s", exc)
            raise GenerationFailedError(str(exc) or type(exc).__name__, cause=exc) from exc
        return first_text(response)
