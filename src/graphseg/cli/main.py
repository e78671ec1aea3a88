import json
from pathlib import Path
from typing import Iterable, List, Optional, cast

import typer
from rich.console import Console
from rich.table import Table

from ..core.config import Settings
from ..core.logging import LogFormat, log, setup_logging
from ..segmentation import DecodeError, StreamSegmenter, classify, split_graphemes

app = typer.Typer(add_completion=False, help="Grapheme cluster segmentation CLI")
ucd_app = typer.Typer(help="Unicode Character Database tooling")
app.add_typer(ucd_app, name="ucd")

FORMATS = ("plain", "json", "table")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config_file: Optional[str] = typer.Option(
        None, "--config", help="Config file (.graphseg.yaml auto-discovered)"
    ),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="Logging format: json|plain|auto"),
) -> None:
    """Load configuration and logging before any command runs."""
    settings = Settings.load_config(config_file)
    if log_format:
        settings.LOG_FORMAT = log_format
    setup_logging(cast(LogFormat, settings.LOG_FORMAT), level=settings.LOG_LEVEL)
    ctx.obj = settings

    # If no command was provided, show help
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


def _console(settings: Settings) -> Console:
    return Console(color_system=None if settings.NO_COLOR else "auto", highlight=False)


def _read_text(text: Optional[str], settings: Settings, strip_newline: bool) -> str:
    """Return the TEXT argument, or stdin decoded with the configured encoding."""
    if text is not None:
        return text
    data = typer.get_binary_stream("stdin").read()
    try:
        decoded = data.decode(settings.INPUT_ENCODING)
    except UnicodeDecodeError as e:
        log.error("cli.input.decode_failed", encoding=settings.INPUT_ENCODING, offset=e.start)
        typer.echo(f"❌ Input is not valid {settings.INPUT_ENCODING} (byte {e.start})", err=True)
        raise typer.Exit(1) from e
    if strip_newline and decoded.endswith("\n"):
        decoded = decoded[:-1]
        if decoded.endswith("\r"):
            decoded = decoded[:-1]
    return decoded


def _check_format(fmt: str) -> str:
    if fmt not in FORMATS:
        typer.echo(f"❌ Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}", err=True)
        raise typer.Exit(2)
    return fmt


def _code_points(cluster: str) -> str:
    return " ".join(f"U+{ord(c):04X}" for c in cluster)


def _printable(cluster: str) -> str:
    if cluster.isprintable():
        return cluster
    return cluster.encode("unicode_escape").decode("ascii")


def _emit_plain(clusters: Iterable[str]) -> None:
    offset = 0
    for cluster in clusters:
        typer.echo(f"{offset}\t{_code_points(cluster)}\t{_printable(cluster)}")
        offset += len(cluster)


def _emit_table(clusters: List[str], settings: Settings) -> None:
    table = Table(title=f"{len(clusters)} grapheme clusters")
    table.add_column("#", justify="right")
    table.add_column("Offset", justify="right")
    table.add_column("Code points")
    table.add_column("Categories")
    table.add_column("Cluster")

    offset = 0
    for i, cluster in enumerate(clusters):
        categories = " ".join(classify(ord(c)).value for c in cluster)
        table.add_row(str(i), str(offset), _code_points(cluster), categories, _printable(cluster))
        offset += len(cluster)

    _console(settings).print(table)


@app.command()
def version() -> None:
    from .. import __version__
    from ..segmentation.table import UCD_VERSION

    typer.echo(f"{__version__} (UCD {UCD_VERSION})")


@app.command()
def config(ctx: typer.Context) -> None:
    """Print the effective configuration."""
    for k, v in _settings(ctx).model_dump().items():
        typer.echo(f"{k}={v}")


@app.command()
def split(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to segment (default: stdin)"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: plain|json|table"),
    strip_newline: bool = typer.Option(
        True, "--strip-newline/--keep-newline", help="Drop one trailing newline from stdin"
    ),
) -> None:
    """Split text into extended grapheme clusters."""
    settings = _settings(ctx)
    fmt = _check_format(fmt or settings.OUTPUT_FORMAT)
    clusters = split_graphemes(_read_text(text, settings, strip_newline))
    log.debug("cli.split", clusters=len(clusters), format=fmt)

    if fmt == "json":
        typer.echo(json.dumps(clusters, ensure_ascii=False))
    elif fmt == "table":
        _emit_table(clusters, settings)
    else:
        _emit_plain(clusters)


@app.command()
def count(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to measure (default: stdin)"),
    strip_newline: bool = typer.Option(
        True, "--strip-newline/--keep-newline", help="Drop one trailing newline from stdin"
    ),
) -> None:
    """Count user-perceived characters."""
    settings = _settings(ctx)
    typer.echo(str(len(split_graphemes(_read_text(text, settings, strip_newline)))))


@app.command()
def stream(
    ctx: typer.Context,
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", min=1, help="Bytes per read"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: plain|json"),
) -> None:
    """Segment UTF-8 stdin incrementally, emitting clusters as they complete.

    Offsets in plain output are byte offsets.
    """
    settings = _settings(ctx)
    fmt = _check_format(fmt or settings.OUTPUT_FORMAT)
    if fmt == "table":
        typer.echo("❌ The table format needs the whole input; use `split --format table`", err=True)
        raise typer.Exit(2)
    size = chunk_size or settings.STREAM_CHUNK_SIZE

    source = typer.get_binary_stream("stdin")
    segmenter = StreamSegmenter(binary=True)
    offset = 0
    emitted = 0

    def emit(clusters: List[bytes]) -> None:
        nonlocal offset, emitted
        for raw in clusters:
            cluster = raw.decode("utf-8")
            if fmt == "json":
                typer.echo(json.dumps(cluster, ensure_ascii=False))
            else:
                typer.echo(f"{offset}\t{_code_points(cluster)}\t{_printable(cluster)}")
            offset += len(raw)
            emitted += 1

    try:
        while True:
            chunk = source.read(size)
            if not chunk:
                break
            emit(cast(List[bytes], segmenter.feed(chunk)))
        emit(cast(List[bytes], segmenter.close()))
    except DecodeError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    log.info("cli.stream.done", clusters=emitted, bytes=offset)


@ucd_app.command("gen-table")
def gen_table_cmd(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GraphemeBreakProperty.txt"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write module here instead of stdout"),
    coalesce: bool = typer.Option(True, "--coalesce/--no-coalesce", help="Merge adjacent ranges"),
    ucd_version: Optional[str] = typer.Option(None, "--ucd-version", help="Override the detected UCD version"),
) -> None:
    """Render a range table module from the UCD grapheme break property file."""
    from ..ucd.gentable import UCDFormatError, generate

    lines = input_file.read_text(encoding="utf-8").splitlines()
    try:
        source = generate(lines, coalesce=coalesce, version=ucd_version)
    except UCDFormatError as e:
        log.error("ucd.gentable.failed", path=str(input_file), error=str(e))
        typer.echo(f"❌ {input_file}: {e}", err=True)
        raise typer.Exit(1) from e

    if output:
        output.write_text(source, encoding="utf-8")
        log.info("ucd.gentable.written", path=str(output))
    else:
        typer.echo(source, nl=False)


@ucd_app.command("gen-tests")
def gen_tests_cmd(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GraphemeBreakTest.txt"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout"),
) -> None:
    """Convert the UCD grapheme break tests into JSON conformance fixtures."""
    from ..ucd.gentest import dump_cases, parse_break_test

    cases = parse_break_test(input_file.read_text(encoding="utf-8").splitlines())
    data = dump_cases(cases)
    if output:
        output.write_text(data, encoding="utf-8")
        log.info("ucd.gentest.written", path=str(output), cases=len(cases))
    else:
        typer.echo(data, nl=False)


@ucd_app.command("check")
def check_cmd(
    ctx: typer.Context,
    fixtures: Optional[Path] = typer.Argument(None, help="JSON fixtures from `ucd gen-tests`"),
    max_report: int = typer.Option(20, "--max-report", min=0, help="Failures to list"),
) -> None:
    """Run conformance fixtures and report mismatching segmentations."""
    from ..ucd.conformance import check_cases, describe
    from ..ucd.gentest import load_cases

    settings = _settings(ctx)
    path = fixtures or (Path(settings.FIXTURES_PATH) if settings.FIXTURES_PATH else None)
    if path is None or not path.is_file():
        typer.echo("❌ No fixtures file; pass one or set GRAPHSEG_FIXTURES_PATH", err=True)
        raise typer.Exit(2)

    try:
        cases = load_cases(path)
    except ValueError as e:
        log.error("ucd.check.load_failed", path=str(path), error=str(e))
        typer.echo(f"❌ {path}: {e}", err=True)
        raise typer.Exit(1) from e

    failures = check_cases(cases)
    console = _console(settings)
    if not failures:
        console.print(f"✅ {len(cases)} cases passed")
        return

    table = Table(title=f"{len(failures)} of {len(cases)} cases failed")
    table.add_column("Line", justify="right")
    table.add_column("Expected")
    table.add_column("Got")
    for failure in failures[:max_report]:
        table.add_row(str(failure.line or "-"), describe(failure.case.clusters), describe(failure.got))
    console.print(table)
    raise typer.Exit(1)
