"""Entry point — wires Config → GeminiAudioClient → Transcriber."""
import asyncio
import logging
import sys

import click
from google import genai
from rich.console import Console
from rich.logging import RichHandler

from src.config import Config
from src.constants import MSG_TRANSCRIPTION_FOOTER, MSG_TRANSCRIPTION_HEADER
from src.transcription.gemini import GeminiAudioClient
from src.transcription.models import (
    Failed,
    TranscriptionOptions,
    TranscriptionResult,
    TranscriptionStyle,
    Transcribed,
)
from src.transcription.source import resolve_source
from src.transcription.transcriber import Transcriber

console = Console()
err_console = Console(stderr=True)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(console=err_console, rich_tracebacks=True))


def build_transcriber(config: Config) -> Transcriber:
    client = genai.Client(api_key=config.transcriber_key)
    return Transcriber(GeminiAudioClient(client, model=config.model))


def _print_result(source: str, result: TranscriptionResult) -> None:
    match result:
        case Transcribed(text=text):
            console.print(f"\n[bold green]{MSG_TRANSCRIPTION_HEADER}[/bold green]\n")
            console.print(text, markup=False, highlight=False)
            console.print(f"\n[bold green]{MSG_TRANSCRIPTION_FOOTER}[/bold green]\n")
        case Failed(message=msg):
            err_console.print(f"[red]\\[error][/red] {source}: {msg}", highlight=False)


async def _run(transcriber: Transcriber, sources: tuple[str, ...], options: TranscriptionOptions) -> bool:
    results = await transcriber.transcribe_many(map(resolve_source, sources), options)
    list(map(_print_result, sources, results))
    return all(r.success for r in results)


@click.command()
@click.argument("sources", nargs=-1, required=True)
@click.option(
    "--style",
    type=click.Choice([s.value for s in TranscriptionStyle], case_sensitive=False),
    default=None,
    help="Transcription style (defaults to TRANSCRIBER_STYLE or 'accurate').",
)
@click.option("--language", default=None, help="Spoken language; output stays in it.")
@click.option("--context", default=None, help="Background information for the model.")
@click.option("--timeout-ms", type=click.IntRange(min=1), default=None, help="Budget for the remote existence check.")
@click.option("--quiet", is_flag=True, help="Suppress pipeline progress logs.")
def main(
    sources: tuple[str, ...],
    style: str | None,
    language: str | None,
    context: str | None,
    timeout_ms: int | None,
    quiet: bool,
) -> None:
    """Transcribe one or more audio files or http(s) URLs."""
    try:
        config = Config.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    _setup_logging(config.log_level)

    options = TranscriptionOptions(
        style=TranscriptionStyle.parse(style or config.default_style),
        language=language,
        context=context,
        verbose=not quiet,
        timeout_ms=timeout_ms if timeout_ms is not None else config.timeout_ms,
    )
    ok = asyncio.run(_run(build_transcriber(config), sources, options))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
