"""Click commands for the pcmwav CLI."""

from __future__ import annotations

import click

from .info import info
from .rewrite import rewrite


def register(main: click.Group) -> None:
    main.add_command(info)
    main.add_command(rewrite)
