"""All magic values live here — no inline literals anywhere else."""

# Environment
ENV_TRANSCRIBER_KEY = "TRANSCRIBER_KEY"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_MODEL = "TRANSCRIBER_MODEL"
ENV_TIMEOUT_MS = "TRANSCRIBER_TIMEOUT_MS"
ENV_STYLE = "TRANSCRIBER_STYLE"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_STYLE = "accurate"

# Gemini
GEMINI_MODEL = "gemini-2.0-flash"
GEMINI_USER_ROLE = "user"

# Existence check budget (milliseconds). Downloads themselves are unbounded.
DEFAULT_TIMEOUT_MS = 5000

# MIME classification
AUDIO_MIME_TYPES: dict[str, str] = {
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".aac": "audio/aac",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
    ".webm": "audio/webm",
    ".weba": "audio/webm",
}
FALLBACK_MIME_TYPE = "audio/octet-stream"

# In-memory buffers carry no name, so they are uploaded as WAV unless told otherwise.
BUFFER_FILENAME = "audio_buffer.wav"
BUFFER_MIME_TYPE = "audio/wav"

REMOTE_SCHEMES = ("http://", "https://")
REMOTE_FALLBACK_FILENAME = "remote_audio"

# Log messages
MSG_PROCESSING_LOCAL = "Processing audio: %s"
MSG_FETCHING_REMOTE = "Fetching remote audio: %s"
MSG_READING_BUFFER = "Reading audio from in-memory buffer"
MSG_ACQUIRED = "Acquired %d bytes"
MSG_UNKNOWN_EXTENSION = "Unknown extension '%s' for '%s', using fallback '%s'"
MSG_HEAD_FAILED = "Existence check failed for %s: %s"
MSG_UPLOADING = "Uploading %s (%s)"
MSG_UPLOADED = "Uploaded as %s (%s)"
MSG_GENERATING = "Requesting transcription from %s"
MSG_TRANSCRIBED = "Transcription complete (%d chars)"
MSG_PIPELINE_FAILED = "Transcription failed [%s]: %s"

# Result / error messages
MSG_NO_RESULT = "No transcription result returned."
MSG_ERR_INVALID_INPUT = "Invalid input: %s"
MSG_ERR_NOT_FOUND = "File not found: %s"
MSG_ERR_UNREACHABLE = "Remote file is unreachable (status: %s): %s"
MSG_ERR_FETCH_FAILED = "Failed to fetch remote file: %s"
MSG_ERR_UPLOAD = "Failed to upload file: %s"
MSG_ERR_UPLOAD_INCOMPLETE = "upload response is missing uri or mime type"
MSG_ERR_GENERATION = "Failed to generate transcription: %s"
MSG_ERR_UNEXPECTED = "Unexpected error: %s"
MSG_ERR_MISSING_KEY = (
    "TRANSCRIBER_KEY is missing. Please set it in one of the following ways:\n"
    "1. Set it as an environment variable: export TRANSCRIBER_KEY=your-key-here\n"
    "2. Create a .env file in your project root with: TRANSCRIBER_KEY=your-key-here\n\n"
    "Get your API key from: https://aistudio.google.com/app/apikey"
)

# CLI output
MSG_TRANSCRIPTION_HEADER = "--- Transcription ---"
MSG_TRANSCRIPTION_FOOTER = "--- Done ---"
