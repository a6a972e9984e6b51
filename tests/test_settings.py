import pytest
from pydantic import ValidationError

from task_nlp.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in (
        "TASK_NLP_LANGUAGE",
        "TASK_NLP_DEFAULT_TO_SCHEDULED",
        "TASK_NLP_AUTO_SUGGEST_ENABLED",
        "TASK_NLP_PLACEHOLDER_TITLE",
        "TASK_NLP_MAX_INPUT_LENGTH",
        "TASK_NLP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()

    assert settings.language == "en"
    assert settings.default_to_scheduled is True
    assert settings.auto_suggest_enabled is False
    assert settings.placeholder_title == "Untitled Task"
    assert settings.max_input_length == 4000
    assert settings.log_level == "INFO"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TASK_NLP_LANGUAGE", "de")
    monkeypatch.setenv("TASK_NLP_AUTO_SUGGEST_ENABLED", "true")
    monkeypatch.setenv("task_nlp_default_to_scheduled", "false")
    monkeypatch.setenv("TASK_NLP_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.language == "de"
    assert settings.auto_suggest_enabled is True
    assert settings.default_to_scheduled is False
    assert settings.log_level == "DEBUG"


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("TASK_NLP_PLACEHOLDER_TITLE=Inbox item\n", encoding="utf-8")

    assert get_settings().placeholder_title == "Inbox item"


@pytest.mark.parametrize(
    "name, value",
    [
        ("TASK_NLP_LOG_LEVEL", "chatty"),
        ("TASK_NLP_MAX_INPUT_LENGTH", "0"),
        ("TASK_NLP_PLACEHOLDER_TITLE", "   "),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings()
