"""CLI command: figma-converter convert -- generate code from a CSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from figma_converter.errors import ValidationError
from figma_converter.transpiler import generate, parse
from figma_converter.validation import sanitize_css_input, validate_css_input

# Output format -> (file suffix, attribute on GeneratedComponentCode)
_FORMATS: dict[str, tuple[str, str]] = {
    "jsx": (".tsx", "jsx"),
    "css": (".css", "css"),
    "html": (".html", "html"),
    "tailwind": (".tailwind.txt", "tailwind_classes"),
}


def load_css(cssfile: str) -> str:
    """Read and validate a CSS file, exiting with code 1 if it is unusable."""
    source = Path(cssfile).read_text(encoding="utf-8")
    try:
        return sanitize_css_input(validate_css_input(source))
    except ValidationError as exc:
        click.echo(f"Invalid CSS: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice([*_FORMATS, "all"]),
    default="all",
    show_default=True,
    help="Which artifact to produce",
)
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write files here instead of printing to stdout",
)
def convert(cssfile: str, fmt: str, out_dir: str | None) -> None:
    """Convert a Figma CSS export into JSX, CSS, HTML and Tailwind classes."""
    parsed = parse(load_css(cssfile))
    code = generate(parsed)
    selected = list(_FORMATS) if fmt == "all" else [fmt]

    if out_dir is None:
        for name in selected:
            _, attr = _FORMATS[name]
            if len(selected) > 1:
                click.echo(f"=== {name} ===")
            click.echo(getattr(code, attr))
        return

    target = Path(out_dir)
    target.mkdir(parents=True, exist_ok=True)
    for name in selected:
        suffix, attr = _FORMATS[name]
        path = target / f"{parsed.component_name}{suffix}"
        path.write_text(getattr(code, attr), encoding="utf-8")
        click.echo(f"Wrote {path}")
