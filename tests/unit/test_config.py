from graphview.config import Settings


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.DEFAULT_ROW_LIMIT == 50
    assert settings.DEFAULT_TITLE == "Data Cloud Records"
    assert settings.log_level_name == "INFO"


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("GRAPHVIEW_DEFAULT_ROW_LIMIT", "10")
    monkeypatch.setenv("GRAPHVIEW_LOG_LEVEL", " debug ")
    monkeypatch.setenv("GRAPHVIEW_DEFAULT_TITLE", "")

    settings = Settings(_env_file=None)

    assert settings.DEFAULT_ROW_LIMIT == 10
    assert settings.log_level_name == "DEBUG"
    assert settings.DEFAULT_TITLE == "Data Cloud Records"
