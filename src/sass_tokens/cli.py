"""Command-line interface for sass-tokens."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from sass_tokens.detect import detect_format
from sass_tokens.errors import OutputMode, TokenFormat, TokenImportError
from sass_tokens.extract import extract_tokens
from sass_tokens.generator import variable_name
from sass_tokens.importer import TOKEN_FILE_SUFFIX, read_token_file
from sass_tokens.pipeline import ImporterOptions, compile_tokens
from sass_tokens.resolver import resolve_aliases

console = Console()
error_console = Console(stderr=True)


def _collect_files(path: Path, recursive: bool) -> list[Path]:
    if path.is_dir():
        if not recursive:
            raise ValueError(
                f"{path} is a directory. Use --recursive to convert all token files."
            )
        return sorted(path.rglob(f"*{TOKEN_FILE_SUFFIX}"))
    return [path]


def _output_path(file_path: Path, root: Path, out_dir: Path) -> Path:
    # Directory input keeps its subdirectory layout under out_dir
    if root.is_dir():
        return out_dir / file_path.relative_to(root).with_suffix(".scss")
    return out_dir / f"{file_path.stem}.scss"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
    )


@click.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Choice([m.value for m in OutputMode], case_sensitive=False),
    default=OutputMode.VARIABLES.value,
    help="SCSS output shape.",
)
@click.option(
    "--format",
    "-f",
    "token_format",
    type=click.Choice(["auto"] + [f.value for f in TokenFormat], case_sensitive=False),
    default="auto",
    help="Token dialect (auto detects per file).",
)
@click.option(
    "--resolve-aliases/--no-resolve-aliases",
    default=True,
    help="Substitute {group.token} references with their values.",
)
@click.option(
    "--list",
    "-l",
    "list_tokens",
    is_flag=True,
    help="Show extracted tokens as a table instead of SCSS.",
)
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write one .scss file per token file into this directory, mirroring subdirectories.",
)
@click.option(
    "--recursive",
    "-r",
    is_flag=True,
    help="Convert all .json token files in directory.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)
def main(
    path: Path,
    output: str,
    token_format: str,
    resolve_aliases: bool,
    list_tokens: bool,
    out_dir: Path | None,
    recursive: bool,
    verbose: bool,
) -> None:
    """Convert design token JSON files (DTCG or Style Dictionary) to SCSS.

    PATH can be a single token file or a directory (with --recursive).
    """
    _configure_logging(verbose)
    options = ImporterOptions(
        output=OutputMode(output.lower()),
        resolve_aliases=resolve_aliases,
    )
    forced_format = None if token_format == "auto" else TokenFormat(token_format.lower())

    try:
        files = _collect_files(path, recursive)
    except ValueError as exc:
        error_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    if path.is_dir() and not files:
        error_console.print(f"[yellow]Warning:[/yellow] No token files found in {path}")
        sys.exit(0)

    for file_path in files:
        try:
            document = read_token_file(file_path)
            if list_tokens:
                _output_table(file_path, document, forced_format, options)
                continue
            result = compile_tokens(document, forced_format, options)
        except TokenImportError as exc:
            error_console.print(f"[red]Error:[/red] {file_path}: {exc}")
            sys.exit(1)

        if out_dir is not None:
            target = _output_path(file_path, path, out_dir)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(result.contents, encoding="utf-8")
            console.print(f"[green]✓[/green] {file_path} -> {target}")
        else:
            if len(files) > 1:
                click.echo(f"// {file_path}")
            click.echo(result.contents, nl=False)


def _output_table(
    file_path: Path,
    document: object,
    forced_format: TokenFormat | None,
    options: ImporterOptions,
) -> None:
    """Output extracted tokens as a table."""
    token_format = forced_format or detect_format(document)
    records = extract_tokens(document, token_format)
    if options.resolve_aliases:
        records = resolve_aliases(records)

    table = Table(
        title=f"{file_path} ({token_format.value})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Variable", style="cyan")
    table.add_column("Path", style="dim")
    table.add_column("Type", width=12)
    table.add_column("Value")

    for record in records:
        table.add_row(
            f"${variable_name(record)}",
            record.key,
            record.type,
            escape(record.value if isinstance(record.value, str) else repr(record.value)),
        )

    console.print(table)
    console.print(f"[bold]Total:[/bold] {len(records)} tokens")


if __name__ == "__main__":
    main()
