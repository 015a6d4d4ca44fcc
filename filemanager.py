#!/usr/bin/env python3
"""
File Manager - basic file operations under a base directory

Main entry point for the File Manager CLI application.
"""

import click
from rich.console import Console
from rich.table import Table
from rich.markup import escape

from core import Config, OperationError, StructuredLogger
from modules.file_service import FileService


console = Console()
err_console = Console(stderr=True)


def get_file_service(config: Config) -> FileService:
    """Get a file service for the configured base directory."""
    try:
        logger = StructuredLogger(level=config.log_level)
    except ValueError as e:
        err_console.print(f"[red]Failed to initialize logger:[/red] {escape(str(e))}")
        raise SystemExit(1)
    return FileService(config.base_dir, logger)


def run(ctx: click.Context, operation, *args):
    """Run one file service operation, exiting non-zero on failure."""
    service: FileService = ctx.obj
    try:
        return operation(service, *args)
    except OperationError as e:
        service.logger.error("Failed to run application", error=str(e))
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.exit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="filemanager")
@click.option(
    "--config", "config_path",
    default="config.yaml",
    show_default=True,
    help="YAML configuration file (environment variables take precedence)."
)
@click.pass_context
def filemanager(ctx, config_path):
    """
    File Manager - list, create, delete, copy and move files.

    All paths are relative to FILE_MANAGER_BASE_DIR (default: the
    current directory).
    """
    ctx.obj = get_file_service(Config.load(config_path=config_path))


@filemanager.command("list")
@click.argument("path", default=".")
@click.pass_context
def list_files(ctx, path: str):
    """List files in a directory."""
    files = run(ctx, FileService.list, path)

    if not files:
        console.print("[dim]No files found.[/dim]")
        return

    table = Table(title=f"Contents of {escape(path)}")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Mode", style="dim")
    table.add_column("Modified", style="dim")

    for record in files:
        name = escape(record.name)
        if record.is_dir:
            name = f"[bold blue]{name}/[/bold blue]"
        table.add_row(
            name,
            str(record.size),
            record.permissions,
            record.modified.strftime("%Y-%m-%d %H:%M:%S")
        )

    console.print(table)


@filemanager.command()
@click.argument("path")
@click.pass_context
def create(ctx, path: str):
    """Create a new empty file."""
    run(ctx, FileService.create, path)
    console.print(f"[green]Successfully created file:[/green] {escape(path)}")


@filemanager.command()
@click.argument("path")
@click.pass_context
def delete(ctx, path: str):
    """Delete a file."""
    run(ctx, FileService.delete, path)
    console.print(f"[green]Successfully deleted file:[/green] {escape(path)}")


@filemanager.command()
@click.argument("source")
@click.argument("destination")
@click.pass_context
def copy(ctx, source: str, destination: str):
    """Copy a file from source to destination."""
    run(ctx, FileService.copy, source, destination)
    console.print(
        f"[green]Successfully copied file from[/green] {escape(source)} "
        f"[green]to[/green] {escape(destination)}"
    )


@filemanager.command()
@click.argument("source")
@click.argument("destination")
@click.pass_context
def move(ctx, source: str, destination: str):
    """Move a file from source to destination."""
    run(ctx, FileService.move, source, destination)
    console.print(
        f"[green]Successfully moved file from[/green] {escape(source)} "
        f"[green]to[/green] {escape(destination)}"
    )


if __name__ == "__main__":
    filemanager()
