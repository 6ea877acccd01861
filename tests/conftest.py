import logging
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from workerflags import UnboundFlagPolicy, UpdaterConfig, WorkerFlagsUpdater
from workerflags.config import ENV_UNBOUND_POLICY

# Ensure local source package (src/workerflags) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv(ENV_UNBOUND_POLICY, raising=False)


@pytest.fixture
def updater() -> WorkerFlagsUpdater:
    """Updater with the default (warn) unbound flag policy."""
    return WorkerFlagsUpdater(config=UpdaterConfig())


@pytest.fixture
def strict_updater() -> WorkerFlagsUpdater:
    return WorkerFlagsUpdater(
        config=UpdaterConfig(unbound_flag_policy=UnboundFlagPolicy.RAISE)
    )


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="workerflags")
    return caplog
