# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from arff_loader.logging.init import reset_logging

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture()
def iris_path() -> Path:
    return DATA_DIR / "iris.arff"


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def weather_arff() -> str:
    return """% weather, nominal + numeric with a missing value
@relation 'weather data'

@attribute outlook {sunny, overcast, rainy}
@attribute temperature numeric
@attribute humidity real
@attribute windy {TRUE, FALSE}
@attribute play {yes, no}

@data
sunny,85,85,FALSE,no
sunny,80,90,TRUE,no
% comment inside the data section
overcast,83,86,FALSE,yes

rainy,70,?,FALSE,yes
?,68,80,FALSE,yes
"""


@pytest.fixture()
def write_arff(temp_workdir: Path):
    def _write(name: str, text: str) -> Path:
        path = temp_workdir / "data" / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_config_yaml() -> str:
    return """files:
  - data/weather.arff
batch: true
encoding: utf-8
preview_rows: 2
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "arff_loader.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def clean_logging():
    reset_logging()
    yield
    reset_logging()
