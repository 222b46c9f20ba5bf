from __future__ import annotations

from pathlib import Path

import pytest

from pcmwav import config
from pcmwav.format import DataBound


def test_config_home_prefers_xdg_config_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert config.config_home() == tmp_path
    assert config.env_file_path() == tmp_path / "pcmwav" / "pcmwav.env"


def test_data_bound_defaults_to_length() -> None:
    assert config.get_data_bound() is DataBound.LENGTH


def test_data_bound_reads_env_file() -> None:
    env_path = config.env_file_path()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text("PCMWAV_DATA_BOUND=offset\n", encoding="utf-8")

    assert config.get_data_bound() is DataBound.OFFSET


def test_process_env_wins_over_env_file(monkeypatch) -> None:
    env_path = config.env_file_path()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text("PCMWAV_DATA_BOUND=offset\n", encoding="utf-8")
    monkeypatch.setenv("PCMWAV_DATA_BOUND", " LENGTH ")

    assert config.get_data_bound() is DataBound.LENGTH


def test_invalid_data_bound_raises_helpful_error(monkeypatch) -> None:
    monkeypatch.setenv("PCMWAV_DATA_BOUND", "bytes")
    with pytest.raises(config.PcmwavConfigError) as exc:
        config.get_data_bound(load_env=False)
    assert "length, offset" in str(exc.value)
    assert "pcmwav.env" in str(exc.value)
