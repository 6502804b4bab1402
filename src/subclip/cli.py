import logging
import math
import sys
import time
from pathlib import Path
from typing import List

import typer

from subclip import metrics, srt
from subclip.config import LogFormat
from subclip.errors import SubclipError
from subclip.logging import setup_logging
from subclip.trim import Multiple, Single, WindowRequest, extract
from subclip.windows import Block, Window, parse_block

logger = logging.getLogger(__name__)

app = typer.Typer(help="Cut time windows out of SRT subtitle tracks.", no_args_is_help=True)


def _finite(value: float | None) -> float | None:
    if value is not None and not math.isfinite(value):
        raise typer.BadParameter("must be a finite number of seconds")
    return value


def _parse_blocks(values: List[str]) -> List[Block]:
    blocks = []
    for value in values:
        try:
            blocks.append(parse_block(value))
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
    return blocks


INPUT_OPTION = typer.Option(
    None,
    "--input",
    "-i",
    dir_okay=False,
    help="Input subtitle file; stdin if not present.",
)
OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    dir_okay=False,
    help="Output subtitle file; stdout if not present.",
)


def _read_input(input_path: Path | None) -> bytes:
    if input_path is None:
        return typer.get_binary_stream("stdin").read()
    return input_path.read_bytes()


def _write_output(output_path: Path | None, data: bytes) -> None:
    if output_path is None:
        stream = typer.get_binary_stream("stdout")
        stream.write(data)
        stream.flush()
        return
    output_path.write_bytes(data)


def _run(request: WindowRequest, input_path: Path | None, output_path: Path | None, mode: str) -> None:
    """Parse, extract and serialize; nothing is written unless every step succeeds."""
    logger.debug("invocation", extra={"data": {"argv": sys.argv}})
    started = time.perf_counter()
    windows = len(request.blocks) if isinstance(request, Multiple) else 1
    event: dict = {"mode": mode, "windows": windows}
    try:
        track = srt.parse(_read_input(input_path))
        result = extract(track, request)
        data = srt.serialize(result)
        _write_output(output_path, data)
    except (SubclipError, OSError) as exc:
        event.update(status="error", error=f"{type(exc).__name__}: {exc}")
        metrics.log_extract_metrics(event)
        logger.info("extraction failed", extra={"data": event})
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    event.update(
        status="success",
        cues_in=len(track),
        cues_out=len(result),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 3),
    )
    metrics.log_extract_metrics(event)
    logger.info("extraction finished", extra={"data": event})


@app.callback()
def main_options(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to SUBCLIP_LOG_LEVEL.",
    ),
    log_format: LogFormat | None = typer.Option(
        None,
        "--log-format",
        case_sensitive=False,
        help="Log record format written to stderr.",
    ),
) -> None:
    """Cut time windows out of SRT subtitle tracks."""
    setup_logging(level=log_level, fmt=log_format)


@app.command("clip")
def clip(
    start: float = typer.Option(
        ...,
        "--start",
        "-s",
        callback=_finite,
        help="Time from start in seconds. May be negative.",
    ),
    duration: float = typer.Option(
        ...,
        "--duration",
        "-d",
        callback=_finite,
        help="Duration of clip in seconds.",
    ),
    input_path: Path | None = INPUT_OPTION,
    output_path: Path | None = OUTPUT_OPTION,
) -> None:
    """Keep DURATION seconds beginning at START, re-based to zero."""
    _run(Single(Window.from_seconds(start, duration)), input_path, output_path, mode="clip")


# Negative starts such as "-2-3" must reach the command as arguments
@app.command("blocks", context_settings={"ignore_unknown_options": True})
def blocks(
    block_specs: List[str] = typer.Argument(
        ...,
        metavar="BLOCK...",
        help="Ranges to keep as '<start>-<end>' in seconds, increasing and non-overlapping.",
    ),
    input_path: Path | None = INPUT_OPTION,
    output_path: Path | None = OUTPUT_OPTION,
) -> None:
    """Keep several ranges, each re-based to zero, concatenated in order."""
    request = Multiple(tuple(_parse_blocks(block_specs)))
    _run(request, input_path, output_path, mode="blocks")


def main() -> None:
    """Entry point for the ``subclip`` console script."""
    app()  # pragma: no cover


if __name__ == "__main__":
    main()  # pragma: no cover
