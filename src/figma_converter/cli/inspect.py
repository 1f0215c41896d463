"""CLI command: figma-converter inspect -- summarise what the parser found."""

from __future__ import annotations

import click

from figma_converter.cli.convert import load_css
from figma_converter.transpiler import parse, translate_rules


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Print the component name, layout, rules and design tokens of a CSS file."""
    parsed = parse(load_css(cssfile))

    click.echo(f"Component: {parsed.component_name}")
    click.echo(f"Layout:    {parsed.layout_type}")
    click.echo(f"Rules ({len(parsed.rules)}):")
    for rule in parsed.rules:
        origin = f"  [{rule.figma_component_name}]" if rule.figma_component_name else ""
        click.echo(f"  {rule.selector} ({len(rule.declarations)} declarations){origin}")

    if parsed.custom_properties:
        click.echo(f"Custom properties ({len(parsed.custom_properties)}):")
        for prop in parsed.custom_properties:
            click.echo(f"  --{prop.name}: {prop.value}")

    if parsed.animations:
        click.echo("Animations: " + ", ".join(a.name for a in parsed.animations))
    click.echo(f"Media blocks: {len(parsed.responsive_rules)}")

    if parsed.design_tokens:
        click.echo(f"Design tokens ({len(parsed.design_tokens)}):")
        for key, value in parsed.design_tokens.items():
            click.echo(f"  {key}: {value}")

    tailwind = translate_rules(parsed.rules)
    click.echo(f"Tailwind: {tailwind.main_classes or '(none)'}")
    for style in tailwind.custom_styles:
        click.echo(f"  custom: {style}")
