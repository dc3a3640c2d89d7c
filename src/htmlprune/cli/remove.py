"""Element removal commands."""

import json
import logging
from typing import TextIO

import click

from htmlprune.cli._common import app
from htmlprune.config import PARSER_BACKENDS

LOGGER = logging.getLogger(__name__)


@app.command("remove")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--selectors",
    "-s",
    "params",
    type=str,
    default="",
    show_default=True,
    help="Selector list, e.g. \".ad, #banner, aside\". Append :exact for whole-word class matching.",
)
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Output file. Defaults to stdout.",
)
@click.option(
    "--parser",
    type=click.Choice(PARSER_BACKENDS, case_sensitive=False),
    default=None,
    help="BeautifulSoup parser backend. Also reads HTMLPRUNE_PARSER env.",
)
def remove_elements(source: TextIO, params: str, output: TextIO, parser: str | None) -> None:
    """Remove elements from HTML read from SOURCE (a path, or - for stdin).

    Selector syntax:
        .name     elements whose class attribute contains "name"
        #name     the element with id "name"
        name      all <name> elements
        :exact    suffix; class selectors then match whole class names only

    With no selectors the input is written back unchanged.

    Examples:
        htmlprune remove page.html -s "script, style, .ad"
        htmlprune remove page.html -s "('.card:exact')" -o cleaned.html
        cat page.html | htmlprune remove -s "#cookie-banner"
        htmlprune remove page.html -s nav --parser html5lib
    """
    from htmlprune.config import load_config
    from htmlprune.exceptions import ConfigurationError
    from htmlprune.services.remover import remove_html

    if parser is None:
        try:
            parser = load_config().parser
        except ConfigurationError as e:
            click.echo(f"Error: {e.message}", err=True)
            raise SystemExit(1) from e

    html = source.read()
    LOGGER.debug("Read %d characters from %s", len(html), getattr(source, "name", "<stdin>"))

    output.write(remove_html(html, params, parser=parser))


@app.command("parse-selectors")
@click.argument("params")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the parsed selectors as JSON.")
def parse_selectors(params: str, as_json: bool) -> None:
    """Show the match mode and selector tokens parsed from PARAMS.

    Examples:
        htmlprune parse-selectors ".ad, #banner"
        htmlprune parse-selectors '"a, b", p:exact' --json
    """
    from htmlprune.services.params import parse_params

    spec = parse_params(params)

    if as_json:
        click.echo(json.dumps(spec.model_dump(mode="json"), indent=2))
        return

    click.echo(f"Match mode: {spec.match_mode.value}")
    if spec.is_empty:
        click.echo("No selectors")
        return
    for selector in spec.selectors:
        click.echo(selector)
