import pytest

from bezier_editor.settings import reset_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.delenv("BEZIER_EDITOR_CONFIG_PATH", raising=False)
    monkeypatch.delenv("BEZIER_EDITOR_LOG_LEVEL", raising=False)
    # keep any developer .env out of the tests
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()
