import pytest


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    """Keep logs in a temp dir and clear settings that change generation."""
    monkeypatch.setenv("RANDOMPEOPLE_LOG_DIR", str(tmp_path / "logs"))
    # keep the stdout log handler quiet so CLI output stays parseable
    monkeypatch.setenv("RANDOMPEOPLE_LOG_LEVEL", "warning")
    for var in (
        "RANDOMPEOPLE_DEFAULT_GENDER",
        "RANDOMPEOPLE_MAX_BATCH",
        "RANDOMPEOPLE_CLEAR_LOGS_ON_LAUNCH",
    ):
        monkeypatch.delenv(var, raising=False)
