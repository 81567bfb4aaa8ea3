import io
import os
import sys

import pytest
from rich.console import Console

ROOT_PATH = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, ROOT_PATH)

from logstats import LogAnalyzer


SAMPLE_LINES = [
    "ERROR 500 at 10.0.0.1",
    "INFO 200 at 10.0.0.1",
    "WARN 404 at 10.0.0.2",
]


@pytest.fixture
def sample_log(tmp_path):
    path = tmp_path / "sample.log"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def analyzer():
    return LogAnalyzer()


@pytest.fixture
def record_console():
    return Console(file=io.StringIO(), width=120, color_system=None)
