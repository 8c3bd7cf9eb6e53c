"""`foundation-mcp` command line entry point."""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from ..config.settings import ServerConfig, load_config
from ..core.exceptions import FoundationMCPError
from ..logger_config import setup_logging
from .output import (
    print_catalog_summary,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="foundation-mcp",
    help="MCP assistant server for the Foundation for Sites codebase",
    no_args_is_help=True,
)


class PatternKind(str, Enum):
    plugin = "plugin"
    component = "component"
    utility = "utility"
    test = "test"


class SourceKindOption(str, Enum):
    plugin = "plugin"
    component = "component"


@app.callback()
def main(
    ctx: typer.Context,
    repo: Optional[Path] = typer.Option(
        None, "--repo", "-r", help="Foundation checkout (overrides FOUNDATION_REPO_PATH)"
    ),
) -> None:
    """Configure logging and resolve the Foundation checkout."""
    try:
        config = load_config(repo_path=repo)
    except FoundationMCPError as e:
        print_error(e.message)
        raise typer.Exit(1) from e

    setup_logging(config.log_level, config.log_file)
    ctx.obj = {"config": config}


def _config(ctx: typer.Context) -> ServerConfig:
    return ctx.obj["config"]


@app.command()
def serve(ctx: typer.Context) -> None:
    """Run the MCP server over stdio."""
    from ..mcp.server import run_mcp_server

    asyncio.run(run_mcp_server(_config(ctx)))


@app.command()
def index(
    ctx: typer.Context,
    refresh: bool = typer.Option(False, "--refresh", help="Drop the cached index first"),
) -> None:
    """Build the catalog index and print a summary."""
    from ..mcp.services import SessionService

    async def _run():
        session = SessionService(_config(ctx))
        try:
            if refresh:
                await session.indexer.invalidate_cache()
            return await session.indexer.build_index()
        finally:
            await session.cleanup()

    config = _config(ctx)
    print_info(f"Indexing {config.foundation_repo_path}")
    snapshot = asyncio.run(_run())
    if not snapshot.plugins and not snapshot.components:
        print_warning("No plugins or components found; is --repo a Foundation checkout?")
    print_catalog_summary(snapshot)
    print_success("Index built")


@app.command()
def analyze(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    kind: PatternKind = typer.Option(PatternKind.plugin, "--type", "-t"),
) -> None:
    """Score a file against Foundation's plugin conventions."""
    from ..analysis import PatternAnalyzer

    result = asyncio.run(PatternAnalyzer().analyze_pattern(file.read_text(), kind.value))
    print_json(result.to_wire())


@app.command()
def refactor(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    kind: SourceKindOption = typer.Option(..., "--type", "-t"),
    target: Optional[str] = typer.Option(None, "--target", help="Foundation slug to migrate to"),
) -> None:
    """Suggest how to migrate custom code onto Foundation."""
    from ..mcp.services import SessionService

    async def _run():
        session = SessionService(_config(ctx))
        try:
            return await session.refactoring_analyzer.analyze_for_refactoring(
                file.read_text(), kind.value, target
            )
        finally:
            await session.cleanup()

    try:
        result = asyncio.run(_run())
    except FoundationMCPError as e:
        print_error(e.message)
        raise typer.Exit(1) from e
    print_json(result.to_wire())


if __name__ == "__main__":
    app()
