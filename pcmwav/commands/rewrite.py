from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from pcmwav.errors import WavError
from pcmwav.wav import decode_from_path, encode_to_path

from ._options import data_bound_option, resolve_data_bound, wav_error


@click.command("rewrite")
@click.argument("src", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("dst", type=click.Path(dir_okay=False, path_type=Path))
@data_bound_option
def rewrite(src: Path, dst: Path, data_bound: Optional[str]) -> None:
    """Decode SRC and write it back out as a canonical WAV file at DST.

    Extra chunks (LIST, fact, ...) are dropped and the header is rebuilt.
    """
    bound = resolve_data_bound(data_bound)
    try:
        record = decode_from_path(src, data_bound=bound)
    except WavError as e:
        raise wav_error(e, src) from e
    except OSError as e:
        raise click.ClickException(f"{src}: {e}") from e

    try:
        encode_to_path(record.channels, record.sample_rate, dst)
    except WavError as e:
        raise wav_error(e, dst) from e
    except OSError as e:
        raise click.ClickException(f"{dst}: {e}") from e

    click.echo(f"Wrote {record.frame_count} frames to {dst}")
