import pytest
from pydantic import ValidationError

from geodash.config import Settings, get_settings

_VARS = (
    "GEODASH_RECORD_COUNT",
    "GEODASH_SEED",
    "GEODASH_FETCH_DELAY_MS",
    "GEODASH_DEBOUNCE_MS",
    "GEODASH_PAGE_SIZE",
    "GEODASH_LOG_LEVEL",
    "GEODASH_LOG_JSON",
)


@pytest.fixture
def clean_env(monkeypatch, fresh_settings):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(clean_env):
    settings = get_settings()
    assert settings == Settings()
    assert settings.record_count == 5000
    assert settings.seed is None
    assert settings.page_size == 50
    assert settings.fetch_delay == 0.3
    assert settings.debounce_delay == 0.3


def test_environment_overrides(monkeypatch, clean_env):
    monkeypatch.setenv("GEODASH_RECORD_COUNT", "120")
    monkeypatch.setenv("GEODASH_SEED", "9")
    monkeypatch.setenv("GEODASH_FETCH_DELAY_MS", "0")
    monkeypatch.setenv("GEODASH_DEBOUNCE_MS", "150")
    monkeypatch.setenv("GEODASH_PAGE_SIZE", "25")
    monkeypatch.setenv("GEODASH_LOG_LEVEL", "debug")
    monkeypatch.setenv("GEODASH_LOG_JSON", "true")

    settings = get_settings()

    assert settings.record_count == 120
    assert settings.seed == 9
    assert settings.fetch_delay == 0
    assert settings.debounce_delay == 0.15
    assert settings.page_size == 25
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_blank_values_fall_back_to_defaults(monkeypatch, clean_env):
    monkeypatch.setenv("GEODASH_SEED", "")
    monkeypatch.setenv("GEODASH_RECORD_COUNT", "")
    settings = get_settings()
    assert settings.seed is None
    assert settings.record_count == 5000


def test_dotenv_file_is_read(monkeypatch, clean_env, tmp_path):
    (tmp_path / ".env").write_text("GEODASH_PAGE_SIZE=100\nGEODASH_SEED=\n", encoding="utf-8")
    settings = get_settings()
    assert settings.page_size == 100
    assert settings.seed is None


@pytest.mark.parametrize(
    "name, value",
    [
        ("GEODASH_PAGE_SIZE", "20"),
        ("GEODASH_LOG_JSON", "ture"),
        ("GEODASH_RECORD_COUNT", "5k"),
        ("GEODASH_FETCH_DELAY_MS", "-1"),
        ("GEODASH_LOG_LEVEL", "loud"),
    ],
)
def test_invalid_values_are_rejected_by_field(monkeypatch, clean_env, name, value):
    monkeypatch.setenv(name, value)
    field = name.removeprefix("GEODASH_").lower()
    with pytest.raises(ValidationError, match=field):
        get_settings()


def test_settings_are_frozen(clean_env):
    settings = get_settings()
    with pytest.raises(ValidationError):
        settings.page_size = 10


def test_settings_are_cached(fresh_settings):
    assert get_settings() is get_settings()
