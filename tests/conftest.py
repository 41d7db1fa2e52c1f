import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("PASSGEN_CONFIG", str(path))
    monkeypatch.delenv("PORT", raising=False)
    return path
