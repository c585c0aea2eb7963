"""AudioModelClient — abstract base for upload + generate transcription backends."""
from abc import ABC, abstractmethod
from typing import Optional

from src.transcription.models import AudioFile, RemoteFileHandle


class AudioModelClient(ABC):
    @abstractmethod
    async def upload(self, audio: AudioFile) -> RemoteFileHandle:
        """Upload audio and return the service-confirmed handle. Raises UploadFailedError."""
        ...

    @abstractmethod
    async def generate(self, prompt: str, handle: RemoteFileHandle) -> Optional[str]:
        """Transcribe uploaded audio; None when the service returns no text. Raises GenerationFailedError."""
        ...
