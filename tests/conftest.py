import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """
    Strip NAME_* variables and run from an empty directory so a local
    .env file cannot leak into the settings under test.
    """
    for key in list(os.environ):
        if key.upper().startswith("NAME_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
