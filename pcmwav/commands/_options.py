from __future__ import annotations

from typing import Optional

import click

from pcmwav.config import PcmwavConfigError, get_data_bound
from pcmwav.errors import WavError
from pcmwav.format import DataBound


data_bound_option = click.option(
    "--data-bound",
    type=click.Choice([b.value for b in DataBound]),
    default=None,
    help="How the data chunk size limits reading (default: PCMWAV_DATA_BOUND or `length`).",
)


def resolve_data_bound(raw: Optional[str]) -> DataBound:
    if raw:
        return DataBound.parse(raw)
    try:
        return get_data_bound()
    except PcmwavConfigError as e:
        raise click.ClickException(str(e)) from e


def wav_error(e: WavError, path: object) -> click.ClickException:
    return click.ClickException(f"{path}: {e.kind}: {e}")
