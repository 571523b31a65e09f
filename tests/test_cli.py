import json

from typer.testing import CliRunner

from randompeople import __version__
from randompeople.cli import app

runner = CliRunner()

MALE = {"Bilbo", "Frodo", "Theodulph", "Lotho"}
SURNAMES = {"Baggins", "Lightfoot", "Boulderhill", "Brockhouse", "Boffin"}

def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__

def test_generate_default() -> None:
    result = runner.invoke(app, ["generate"])
    assert result.exit_code == 0
    first, last = result.stdout.strip().split(" ")
    assert last in SURNAMES

def test_generate_count_and_gender() -> None:
    result = runner.invoke(app, ["generate", "--gender", "male", "--count", "4"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 4
    assert all(line.split(" ")[0] in MALE for line in lines)

def test_generate_seed_deterministic() -> None:
    a = runner.invoke(app, ["generate", "--seed", "shire", "-n", "3"])
    b = runner.invoke(app, ["generate", "--seed", "shire", "-n", "3"])
    assert a.stdout == b.stdout

def test_generate_json() -> None:
    result = runner.invoke(app, ["generate", "-g", "female", "-n", "2", "--json"])
    assert result.exit_code == 0
    items = json.loads(result.stdout)
    assert len(items) == 2
    assert all(item["gender"] == "female" for item in items)

def test_generate_invalid_gender() -> None:
    result = runner.invoke(app, ["generate", "--gender", "orc"])
    assert result.exit_code == 2

def test_generate_negative_count() -> None:
    result = runner.invoke(app, ["generate", "--count=-1"])
    assert result.exit_code == 2

def test_pools_lists_categories() -> None:
    result = runner.invoke(app, ["pools"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["female", "male", "surnames"]

def test_pools_single() -> None:
    result = runner.invoke(app, ["pools", "surnames"])
    assert result.stdout.split() == ["Baggins", "Lightfoot", "Boulderhill", "Brockhouse", "Boffin"]

def test_pools_unknown_is_empty() -> None:
    result = runner.invoke(app, ["pools", "elves"])
    assert result.exit_code == 0
    assert result.stdout == ""

def test_param_from_query() -> None:
    result = runner.invoke(app, ["param", "name", "?id=123&name=Bilbo"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Bilbo"

def test_param_from_url() -> None:
    result = runner.invoke(app, ["param", "q", "https://example.org/s?q=a+b#x"])
    assert result.stdout.strip() == "a b"

def test_param_missing() -> None:
    result = runner.invoke(app, ["param", "missing", "?id=123"])
    assert result.exit_code == 1
    assert result.stdout == ""

# ── Logging and serve settings ───────────────────────────────

def test_generate_records_names(tmp_path, monkeypatch) -> None:
    log_dir = tmp_path / "cli-logs"
    monkeypatch.setenv("RANDOMPEOPLE_LOG_DIR", str(log_dir))
    result = runner.invoke(app, ["generate", "-n", "2"])
    assert result.exit_code == 0
    printed = result.stdout.strip().splitlines()
    with open(log_dir / "generated.log", "r", encoding="utf-8") as f:
        records = [json.loads(line) for line in f if line.strip()]
    assert [r["name"] for r in records] == printed
    assert all(r["source"] == "cli" for r in records)

def test_serve_uses_env_host_and_port(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr("randompeople.cli.uvicorn.run", lambda target, **kwargs: calls.update(kwargs, target=target))
    monkeypatch.setenv("RANDOMPEOPLE_HOST", "0.0.0.0")
    monkeypatch.setenv("RANDOMPEOPLE_PORT", "9123")
    result = runner.invoke(app, ["serve"])
    assert result.exit_code == 0
    assert calls["target"] == "randompeople.core.gateway:create_app"
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 9123
    assert calls["factory"] is True

def test_serve_options_override_env(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr("randompeople.cli.uvicorn.run", lambda target, **kwargs: calls.update(kwargs))
    monkeypatch.setenv("RANDOMPEOPLE_PORT", "9123")
    result = runner.invoke(app, ["serve", "--host", "10.0.0.1", "--port", "8000"])
    assert result.exit_code == 0
    assert calls["host"] == "10.0.0.1"
    assert calls["port"] == 8000
