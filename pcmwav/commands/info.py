from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from pcmwav.errors import WavError
from pcmwav.wav import decode_from_path

from ._options import data_bound_option, resolve_data_bound, wav_error


@click.command("info")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-j", "--json", "json_", is_flag=True, help="Output structured JSON.")
@data_bound_option
def info(path: Path, json_: bool, data_bound: Optional[str]) -> None:
    """Show sample rate, channels and length of a WAV file.

    \b
    Examples:
      pcmwav info take1.wav
      pcmwav info --json take1.wav
    """
    bound = resolve_data_bound(data_bound)
    try:
        record = decode_from_path(path, data_bound=bound)
    except WavError as e:
        raise wav_error(e, path) from e
    except OSError as e:
        raise click.ClickException(f"{path}: {e}") from e

    if json_:
        payload = {"path": str(path), **record.to_dict()}
        click.echo(json.dumps(payload, ensure_ascii=False))
        return

    layout = "mono" if record.channel_count == 1 else "stereo"
    click.echo(f"path: {path}")
    click.echo(f"sample_rate: {record.sample_rate} Hz")
    click.echo(f"channels: {record.channel_count} ({layout})")
    click.echo(f"frames: {record.frame_count}")
    if record.duration_s is not None:
        click.echo(f"duration: {record.duration_s:.3f}s")
