"""
moneymask CLI — Format, unmask and interactively type masked amounts.

Commands:
    moneymask format    Render a value as a masked string
    moneymask unmask    Read the value back out of a masked string
    moneymask type      Replay keystrokes through the edit controller

Formatting options default to MONEYMASK_* environment variables.
"""

from __future__ import annotations

import functools
import logging
import sys

import click

from . import __version__
from .config import CursorBehavior, FormatConfig
from .controller import MoneyMaskedTextController
from .cursor import CursorState
from .errors import MoneyMaskError
from .money import exceeds_magnitude, format_value, strip_decoration, unmask


BACKSPACE = "<"


def _format_options(func):
    """Shared separator/symbol/precision options."""
    options = [
        click.option("--decimal-separator", default=None, help="Decimal separator (default ',')"),
        click.option("--thousand-separator", default=None, help="Thousand separator (default '.')"),
        click.option("--left-symbol", default=None, help="Prefix, e.g. 'R$ '"),
        click.option("--right-symbol", default=None, help="Suffix, must not contain digits"),
        click.option("--precision", type=int, default=None, help="Fraction digits (default 2)"),
        click.option(
            "--cursor",
            "cursor_behavior",
            type=click.Choice([b.value for b in CursorBehavior]),
            default=None,
            help="Cursor policy while typing",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(**kwargs) -> FormatConfig:
    try:
        return FormatConfig.from_env(**kwargs)
    except MoneyMaskError as e:
        click.echo(f"❌ Invalid configuration: {e}", err=True)
        sys.exit(1)


def _with_config(func):
    @functools.wraps(func)
    def wrapper(decimal_separator, thousand_separator, left_symbol,
                right_symbol, precision, cursor_behavior, **kwargs):
        config = _build_config(
            decimal_separator=decimal_separator,
            thousand_separator=thousand_separator,
            left_symbol=left_symbol,
            right_symbol=right_symbol,
            precision=precision,
            cursor_behavior=cursor_behavior,
        )
        return func(config=config, **kwargs)
    return wrapper


def _render_caret(text: str, cursor: CursorState) -> str:
    if cursor.is_collapsed:
        return f"{text[:cursor.base_offset]}|{text[cursor.base_offset:]}"
    start, end = sorted((cursor.base_offset, cursor.extent_offset))
    return f"{text[:start]}[{text[start:end]}]{text[end:]}"


# ── CLI ───────────────────────────────────────────────────────────

@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """moneymask — Currency masks for text inputs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command("format")
@click.argument("value")
@_format_options
@_with_config
def format_cmd(value: str, config: FormatConfig):
    """Render VALUE as a masked string."""
    try:
        if exceeds_magnitude(value):
            click.echo(f"❌ {value} has too many integer digits", err=True)
            sys.exit(1)
        click.echo(format_value(value, config))
    except MoneyMaskError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)


@main.command("unmask")
@click.argument("text")
@click.option("--text", "as_text", is_flag=True, default=False,
              help="Print the text without symbols instead of the value")
@_format_options
@_with_config
def unmask_cmd(text: str, as_text: bool, config: FormatConfig):
    """Read the amount out of a masked TEXT."""
    if as_text:
        click.echo(strip_decoration(text, config))
    else:
        click.echo(f"{unmask(text, config):.{config.precision}f}")


@main.command("type")
@click.argument("keys")
@click.option("--initial", default=None, help="Starting value")
@_format_options
@_with_config
def type_cmd(keys: str, initial: str, config: FormatConfig):
    """
    Type KEYS at the cursor, one character at a time.

    '<' deletes the character before the cursor. Each resulting state is
    printed with '|' marking the cursor.
    """
    try:
        controller = MoneyMaskedTextController(initial, config=config)
    except MoneyMaskError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    click.echo(_render_caret(controller.text, controller.selection))
    for key in keys:
        text = controller.text
        at = controller.selection.base_offset
        if key == BACKSPACE:
            if at == 0:
                continue
            raw, at = text[:at - 1] + text[at:], at - 1
        else:
            raw, at = text[:at] + key + text[at:], at + 1
        controller.on_text_changed(raw, CursorState.collapsed(at))
        click.echo(f"{key!r:>5} {_render_caret(controller.text, controller.selection)}")

    click.echo(f"value: {controller.numeric_value:.{config.precision}f}")


if __name__ == "__main__":
    main()
