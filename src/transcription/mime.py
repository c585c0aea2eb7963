import logging
import posixpath
from pathlib import PurePath
from urllib.parse import unquote, urlparse

from src.constants import (
    AUDIO_MIME_TYPES,
    FALLBACK_MIME_TYPE,
    MSG_UNKNOWN_EXTENSION,
    REMOTE_FALLBACK_FILENAME,
)

logger = logging.getLogger(__name__)


def classify(name: str) -> str:
    """Map a file name or path to its audio MIME type. Never raises."""
    ext = PurePath(name).suffix.lower()
    match AUDIO_MIME_TYPES.get(ext):
        case None:
            logger.warning(MSG_UNKNOWN_EXTENSION, ext, name, FALLBACK_MIME_TYPE)
            return FALLBACK_MIME_TYPE
        case mime:
            return mime


def name_from_url(url: str) -> str:
    """Basename of the URL path, ignoring query string and fragment."""
    path = unquote(urlparse(url).path)
    return posixpath.basename(path) or REMOTE_FALLBACK_FILENAME
