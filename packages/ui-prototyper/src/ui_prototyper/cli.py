"""CLI entry point for ui-prototyper. Uses Click for argument parsing."""

from __future__ import annotations

import json
import logging
import sys

import click

from ui_prototyper.errors import InvalidRequestError


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging verbosity",
)
@click.pass_context
def main(ctx, log_level):
    """Render column-exact boxes, tables and frames."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _fail(e: InvalidRequestError) -> None:
    click.echo(f"Error: {e}", err=True)
    for message in e.errors:
        click.echo(f"  {message}", err=True)
    sys.exit(2)


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------

@main.command()
@click.argument("text")
def width(text):
    """Print the visual width of TEXT and its clusters."""
    from ui_prototyper.width import get_width_model

    model = get_width_model()
    click.echo(model.width(text))
    for cluster, w in model.measure(text):
        codepoints = " ".join(f"U+{ord(ch):04X}" for ch in cluster)
        click.echo(f"  {cluster!r}\t{codepoints}\t{w}")


@main.command()
def corrections():
    """Show the active correction table."""
    from ui_prototyper.corrections import get_correction_table

    table = get_correction_table()
    click.echo(f"Source: {table.source}")
    click.echo(f"Entries: {len(table)}")
    for cluster, delta in table.items():
        click.echo(f"  {cluster}\t{delta:+d}")


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

@main.command()
@click.argument("text")
@click.argument("target_width", type=int)
@click.option("--align", type=click.Choice(["left", "right", "center"]), default="left")
def pad(text, target_width, align):
    """Pad TEXT to TARGET_WIDTH columns."""
    from ui_prototyper.layout import pad_text

    # Delimit so trailing spaces are visible
    click.echo(f"|{pad_text(text, target_width, align)}|")


@main.command()
@click.argument("title")
@click.argument("lines", nargs=-1)
@click.option("--width", "box_width", type=int, default=40, help="Total box width")
def box(title, lines, box_width):
    """Draw a box titled TITLE containing LINES."""
    from ui_prototyper.layout import create_box

    click.echo(create_box(title, list(lines), box_width))


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--width", "frame_width", type=int, default=80, help="Minimum frame width")
@click.option("--title", default=None, help="Frame title")
def frame(source, frame_width, title):
    """Wrap the contents of SOURCE (default: stdin) in a frame."""
    from ui_prototyper.layout import wrap_frame

    click.echo(wrap_frame(source.read().rstrip("\n"), frame_width, title))


# ---------------------------------------------------------------------------
# Batch / tools
# ---------------------------------------------------------------------------

@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--index", "return_index", type=int, default=None, help="Print only this result")
@click.option("--strict", is_flag=True, help="Fail on out-of-range result references")
def render(source, return_index, strict):
    """Render a JSON batch request from SOURCE (default: stdin)."""
    from ui_prototyper.batch import batch_render, render_batch_output
    from ui_prototyper.components import parse_batch_request

    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        _fail(InvalidRequestError(f"Invalid JSON: {e}"))
        return

    try:
        request = parse_batch_request(data)
        results = batch_render(request.components, strict=strict)
    except InvalidRequestError as e:
        _fail(e)
        return

    index = return_index if return_index is not None else request.return_index
    click.echo(render_batch_output(results, index))


@main.command("tools")
def list_tools():
    """List the available layout tools."""
    from ui_prototyper.tools import create_layout_tools

    for tool in create_layout_tools():
        click.echo(f"{tool.name:<24} {tool.description.splitlines()[0]}")


@main.command("call")
@click.argument("name")
@click.argument("arguments", default="{}")
def call(name, arguments):
    """Call tool NAME with a JSON object of ARGUMENTS."""
    from ui_prototyper.tools import call_tool

    try:
        args = json.loads(arguments)
    except json.JSONDecodeError as e:
        _fail(InvalidRequestError(f"Invalid JSON: {e}"))
        return

    if not isinstance(args, dict):
        _fail(InvalidRequestError("Arguments must be a JSON object"))
        return

    try:
        click.echo(call_tool(name, args))
    except InvalidRequestError as e:
        _fail(e)


if __name__ == "__main__":
    main()
