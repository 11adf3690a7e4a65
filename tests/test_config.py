import pytest
from homework_monitor.config import Config

ENV_VARS = (
    "VISION_PROVIDER",
    "VISION_MODEL",
    "API_KEY",
    "GEMINI_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "TELEGRAM_BOT_TOKEN",
    "ALLOWED_CHAT_ID",
    "LOG_LEVEL",
    "HISTORY_MAX_ENTRIES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("homework_monitor.config.load_dotenv", lambda **_: None)
    list(map(lambda name: monkeypatch.delenv(name, raising=False), ENV_VARS))


def make_config(**overrides) -> Config:
    fields = dict(
        vision_provider="gemini",
        vision_model=None,
        gemini_api_key="g-key",
        openai_api_key=None,
        anthropic_api_key=None,
        telegram_bot_token="bot:tok",
        allowed_chat_id="123456789",
        log_level="INFO",
        history_max_entries=20,
    )
    return Config(**{**fields, **overrides})


def test_config_defaults():
    config = Config.from_env()

    assert config.vision_provider == "gemini"
    assert config.vision_model is None
    assert config.gemini_api_key is None
    assert config.log_level == "INFO"
    assert config.history_max_entries == 20


def test_missing_api_key_is_not_a_startup_error():
    """The credential is checked on first analysis, not while loading config."""
    config = Config.from_env()

    assert config.gemini_api_key is None


def test_api_key_read_from_env(monkeypatch):
    monkeypatch.setenv("API_KEY", "AIza-test")

    assert Config.from_env().gemini_api_key == "AIza-test"


def test_gemini_api_key_fallback(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-fallback")

    assert Config.from_env().gemini_api_key == "AIza-fallback"


def test_blank_api_key_becomes_none(monkeypatch):
    monkeypatch.setenv("API_KEY", "")

    assert Config.from_env().gemini_api_key is None


def test_provider_and_model_from_env(monkeypatch):
    monkeypatch.setenv("VISION_PROVIDER", " OpenAI ")
    monkeypatch.setenv("VISION_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    config = Config.from_env()

    assert config.vision_provider == "openai"
    assert config.vision_model == "gpt-4o-mini"
    assert config.openai_api_key == "sk-test"


def test_unknown_provider_fails(monkeypatch):
    monkeypatch.setenv("VISION_PROVIDER", "llava")

    with pytest.raises(ValueError, match="VISION_PROVIDER"):
        Config.from_env()


def test_history_max_entries_from_env(monkeypatch):
    monkeypatch.setenv("HISTORY_MAX_ENTRIES", "5")

    assert Config.from_env().history_max_entries == 5


def test_config_immutable():
    config = make_config()

    with pytest.raises(Exception):
        config.gemini_api_key = "other"


def test_require_bot_passes_when_set():
    make_config().require_bot()


def test_require_bot_missing_token_fails():
    with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
        make_config(telegram_bot_token=None).require_bot()


def test_require_bot_missing_chat_id_fails():
    with pytest.raises(ValueError, match="ALLOWED_CHAT_ID"):
        make_config(allowed_chat_id="").require_bot()


@pytest.mark.parametrize("value", ["0", "-1"])
def test_history_max_entries_below_one_fails(monkeypatch, value):
    monkeypatch.setenv("HISTORY_MAX_ENTRIES", value)

    with pytest.raises(ValueError, match="HISTORY_MAX_ENTRIES"):
        Config.from_env()
