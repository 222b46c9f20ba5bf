"""Command-line interface for pcmwav."""

from __future__ import annotations

import click

from pcmwav.commands import register
from pcmwav.logging_utils import configure_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, debug: bool) -> None:
    """pcmwav - inspect and rewrite 16-bit PCM WAV files."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    configure_logging(debug=debug)


register(main)


if __name__ == "__main__":
    main()
