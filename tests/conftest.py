"""
Pytest configuration and shared fixtures for the evolution tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root and the tests directory to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(Path(__file__).parent))

from config import settings_loader  # noqa: E402
from config.settings_schema import EvolutionConfig  # noqa: E402
from core import structured_log  # noqa: E402
from helpers import SequenceRandom  # noqa: E402


@pytest.fixture
def sequence_random():
    """Factory for scripted random sources."""
    return SequenceRandom


@pytest.fixture
def reference_config():
    """The reference run: 10 nodes, range 1.0, 100 generations, width 2."""
    return EvolutionConfig()


@pytest.fixture
def single_node_config():
    """One node and no mutation severity: every mutation is sigmoid(old)."""
    return EvolutionConfig(population_size=1, mutation_range=0.0, generations=2)


@pytest.fixture
def temp_config_file(tmp_path, monkeypatch):
    """Write a YAML config, point LEFTRIGHT_CONFIG_PATH at it, drop the cache."""
    def _write(text: str) -> Path:
        path = tmp_path / "base.yaml"
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv("LEFTRIGHT_CONFIG_PATH", str(path))
        settings_loader.load_settings(force_reload=True)
        return path

    yield _write
    monkeypatch.delenv("LEFTRIGHT_CONFIG_PATH", raising=False)
    settings_loader.load_settings(force_reload=True)


@pytest.fixture
def temp_logs_dir(tmp_path, monkeypatch):
    """Route structured logs into a temporary directory."""
    monkeypatch.delenv("LEFTRIGHT_LOG_DIR", raising=False)
    logs_dir = tmp_path / "logs"
    structured_log.configure(logs_dir)
    yield logs_dir
    structured_log.configure(None)
