from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_STYLE,
    DEFAULT_TIMEOUT_MS,
    ENV_LOG_LEVEL,
    ENV_MODEL,
    ENV_STYLE,
    ENV_TIMEOUT_MS,
    ENV_TRANSCRIBER_KEY,
    GEMINI_MODEL,
    MSG_ERR_MISSING_KEY,
)


@dataclass(frozen=True)
class Config:
    transcriber_key: str
    log_level: str
    model: str
    timeout_ms: int
    default_style: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        key = os.getenv(ENV_TRANSCRIBER_KEY)
        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        model = os.getenv(ENV_MODEL) or GEMINI_MODEL
        timeout_ms = os.getenv(ENV_TIMEOUT_MS, str(DEFAULT_TIMEOUT_MS))
        style = os.getenv(ENV_STYLE) or DEFAULT_STYLE

        return cls._validate(
            transcriber_key=key,
            log_level=log_level,
            model=model,
            timeout_ms=timeout_ms,
            default_style=style,
        )

    @staticmethod
    def _validate(
        transcriber_key: Optional[str],
        log_level: str,
        model: str,
        timeout_ms: str,
        default_style: str,
    ) -> "Config":
        match transcriber_key:
            case None | "":
                raise ValueError(MSG_ERR_MISSING_KEY)
            case _:
                pass

        try:
            timeout = int(timeout_ms)
        except ValueError:
            raise ValueError(f"{ENV_TIMEOUT_MS} must be an integer, got {timeout_ms!r}") from None

        match timeout:
            case t if t <= 0:
                raise ValueError(f"{ENV_TIMEOUT_MS} must be positive, got {t}")
            case _:
                pass

        return Config(
            transcriber_key=transcriber_key,
            log_level=log_level,
            model=model,
            timeout_ms=timeout,
            default_style=default_style,
        )
