# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path
from typing import Optional
import logging

import typer

from ..adapters.parsing.shell_transcript import ShellTranscriptParser
from ..domain.errors import ConfigurationError, DirTallyError, NotFoundError
from ..domain.settings import (
    DEFAULT_AT_MOST_LIMIT,
    DEFAULT_CAPACITY,
    DEFAULT_REQUIRED,
    DiskSettings,
)
from ..services import QueryService, ReplayService, ReportService, SizeIndex

from ..logging_config import enable_verbose, setup_logging

setup_logging()

app = typer.Typer(help="dirtally CLI - Directory sizes from recorded cd/ls transcripts")

FORMATS: set[str] = {"json", "ndjson", "csv"}

logger = logging.getLogger(__name__)


def _parse_fmt(fmt: str) -> str:
    """
    Normalise and validate --fmt.
    Raises Typer BadParameter for unknown formats.
    """
    value = (fmt or "json").strip().lower()
    if value not in FORMATS:
        raise typer.BadParameter(
            f"Unknown format: {fmt}. Valid options: {', '.join(sorted(FORMATS))}"
        )
    return value


def _set_verbose(verbose: bool) -> None:
    if verbose:
        enable_verbose()
        logger.debug("Verbose logging enabled")


def _build(transcript: Path, skip_relisted: bool = False) -> SizeIndex:
    """
    Minimal composition root:
      ShellTranscriptParser + ReplayService
    Domain errors are reported on stderr and end the command with exit code 1.
    """
    replay = ReplayService(ShellTranscriptParser(), skip_relisted=skip_relisted)
    try:
        with open(transcript, encoding="utf-8", newline="") as fh:
            text = fh.read()
        return replay.build_from_text(text)
    except DirTallyError as e:
        logger.debug("Build failed for %s: %s", transcript, e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


TranscriptOption = typer.Option(
    ...,
    "--transcript",
    "-t",
    exists=True,
    file_okay=True,
    dir_okay=False,
    resolve_path=True,
    help="Recorded cd/ls session to replay",
)
SkipRelistedOption = typer.Option(
    False,
    "--skip-relisted",
    help="Ignore repeated listings of the same directory instead of counting them again.",
)
VerboseOption = typer.Option(False, "--verbose", help="Enable verbose logging")


@app.command()
def sizes(
    transcript: Path = TranscriptOption,
    fmt: str = typer.Option("json", "--fmt", help="Output format: json, ndjson or csv."),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "--output",
        help="Write report to this path. If a directory is provided, the file will be named 'dir_sizes.<fmt>' inside it. "
        "If omitted entirely, defaults to './dir_sizes.<fmt>'.",
        resolve_path=True,
    ),
    skip_relisted: bool = SkipRelistedOption,
    verbose: bool = VerboseOption,
):
    """
    Replay a transcript and write the size of every directory.
    """
    _set_verbose(verbose)
    fmt = _parse_fmt(fmt)
    index = _build(transcript, skip_relisted)

    if out is None:
        target = Path(f"dir_sizes.{fmt}")
    elif out.exists() and out.is_dir():
        target = out / f"dir_sizes.{fmt}"
    else:
        target = out

    written = ReportService(index).write_sizes(target, fmt=fmt)
    typer.echo(f"Wrote {fmt} report for {len(index)} directories to {written}")


@app.command("at-most")
def at_most(
    transcript: Path = TranscriptOption,
    limit: int = typer.Option(
        DEFAULT_AT_MOST_LIMIT, "--limit", min=0, help="Size threshold in bytes."
    ),
    skip_relisted: bool = SkipRelistedOption,
    verbose: bool = VerboseOption,
):
    """
    Print the summed size of all directories no larger than --limit.
    """
    _set_verbose(verbose)
    index = _build(transcript, skip_relisted)
    typer.echo(str(QueryService(index).at_most(limit)))


@app.command()
def total(
    transcript: Path = TranscriptOption,
    skip_relisted: bool = SkipRelistedOption,
    verbose: bool = VerboseOption,
):
    """
    Print the size of the whole tree.
    """
    _set_verbose(verbose)
    index = _build(transcript, skip_relisted)
    typer.echo(str(QueryService(index).total_used()))


@app.command("free-up")
def free_up(
    transcript: Path = TranscriptOption,
    capacity: int = typer.Option(DEFAULT_CAPACITY, "--capacity", help="Disk capacity in bytes."),
    required: int = typer.Option(
        DEFAULT_REQUIRED, "--required", help="Free space needed in bytes."
    ),
    show_path: bool = typer.Option(
        False, "--show-path", help="Also print which directory to delete."
    ),
    skip_relisted: bool = SkipRelistedOption,
    verbose: bool = VerboseOption,
):
    """
    Print the size of the smallest directory whose deletion frees enough space.
    """
    _set_verbose(verbose)
    try:
        settings = DiskSettings(capacity=capacity, required=required)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e))

    index = _build(transcript, skip_relisted)
    query = QueryService(index)
    try:
        path, size = query.smallest_to_delete(settings)
    except NotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if show_path:
        typer.echo(f"{size} {path}")
    else:
        typer.echo(str(size))
