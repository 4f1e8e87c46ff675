import os

import pytest

from tarjimly.config import LANGUAGES_VAR, LOG_LEVEL_VAR


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No TARJIMLY_* variables and no stray .env in the working directory."""
    monkeypatch.chdir(tmp_path)
    for var in (LANGUAGES_VAR, LOG_LEVEL_VAR):
        monkeypatch.delenv(var, raising=False)
    yield tmp_path
    # load_dotenv writes straight into os.environ
    for var in (LANGUAGES_VAR, LOG_LEVEL_VAR):
        os.environ.pop(var, None)
