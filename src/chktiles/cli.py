from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from .config import DEFAULT_CONFIG, load_config
from .errors import ConfigError
from .log import configure_logging
from .report import ConsoleSink
from .spelling import create_speller
from .walker import TileWalker

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Check SVG tiles for metadata, spelling and duplicates.",
)


@app.command(context_settings={"help_option_names": ["-?", "--help"]})
def main(
    ctx: typer.Context,
    check_dir: Path | None = typer.Argument(
        None,
        metavar="<check-directory>",
        show_default=False,
        help="Path to the directory tree to check.",
    ),
    duplicate_dir: Path | None = typer.Argument(
        None,
        metavar="<duplicate-directory>",
        show_default=False,
        help="Path to the directory tree to look for duplicates.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Output additional execution information.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Optional YAML file overriding the check thresholds.",
    ),
) -> None:
    """Scan a tree of SVG tiles and report problems, one line per diagnostic."""
    configure_logging(verbose=verbose)
    logger.debug("args: %s", ", ".join(sys.argv))

    if check_dir is None or duplicate_dir is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    try:
        settings = load_config(config) if config is not None else DEFAULT_CONFIG
    except ConfigError as exc:
        typer.echo(f"{exc.code}: {exc.message} ({exc.hint})", err=True)
        raise typer.Exit(code=1) from exc

    walker = TileWalker(
        ConsoleSink(),
        config=settings,
        speller=create_speller(settings.spell_language),
        verbose=verbose,
    )
    summary = walker.scan(check_dir, duplicate_dir)
    logger.debug(
        "checked %d files, skipped %d, %d errors, %d warnings",
        summary.files_checked,
        summary.files_skipped,
        summary.errors,
        summary.warnings,
    )
    raise typer.Exit(code=0)


def run() -> None:
    app(prog_name="chktiles")


if __name__ == "__main__":
    run()
