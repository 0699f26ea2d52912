"""Shared fixtures: isolate every test from the caller's environment and files."""

from pathlib import Path

import pytest

from skycast import config as config_module
from skycast.config import ENV_VARS

FIXTURES = Path(__file__).parent / "fixtures"


def load_payload(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty API_KEY/CITY/UNITS, no dotenv file, empty working directory.

    Each variable is set before it is deleted so monkeypatch restores the
    original state even when load_dotenv() writes it during the test.
    """
    for name in ENV_VARS + ("NO_COLOR", "SKYCAST_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    env_file = tmp_path / "no-such-dir" / ".env"
    monkeypatch.setattr(config_module, "default_env_file", lambda: env_file)
    monkeypatch.chdir(tmp_path)
    return tmp_path
