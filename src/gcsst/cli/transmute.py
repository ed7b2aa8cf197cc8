"""CLI command: gcsst transmute -- convert CSS files or content to spells."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from gcsst.config import GcsstConfig
from gcsst.errors import GcsstError, InvalidInput
from gcsst.output import run_transmutation, transmute_from_content
from gcsst.tokenizer import ParseError


def _write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    click.echo(f"Output written to {path}", err=True)


@click.command()
@click.option(
    "-p",
    "--paths",
    default=None,
    help="Comma-separated list of CSS file paths or glob patterns",
)
@click.option("-c", "--content", default=None, help="CSS content provided as a string")
@click.option(
    "-o",
    "--output",
    default=None,
    type=click.Path(dir_okay=False),
    help="Output file (paths mode default: ./grimoire/transmuted.json)",
)
@click.option(
    "-l",
    "--with-oneliner",
    is_flag=True,
    help="Include the oneliner property in the output",
)
def transmute(
    paths: str | None,
    content: str | None,
    output: str | None,
    with_oneliner: bool,
) -> None:
    """Convert CSS into Grimoire CSS spells.

    \b
    Examples:
        gcsst transmute -p styles.css,components.css
        gcsst transmute -c '.button { color: red; }' -l
        gcsst transmute -p '*.css' -o custom_output.json --with-oneliner
    """
    config = GcsstConfig(include_oneliner=with_oneliner)

    try:
        if (paths is None) == (content is None):
            raise InvalidInput(
                "Mode not specified. Use -p for paths or -c for content."
            )

        if paths is not None:
            patterns = [p.strip() for p in paths.split(",") if p.strip()]
            duration, json_output = run_transmutation(patterns, config.include_oneliner)
            output_path = Path(output or Path.cwd() / config.output_path)
            _write_output(output_path, json_output)
            click.echo(f"Transmutation complete in {duration:.2f} seconds", err=True)
        else:
            duration, json_output = transmute_from_content(
                content, config.include_oneliner  # type: ignore[arg-type]
            )
            if output:
                _write_output(Path(output), json_output)
            else:
                click.echo(json_output)
            click.echo(f"Transmutation complete in {duration:.2f} seconds", err=True)
    except (GcsstError, ParseError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
