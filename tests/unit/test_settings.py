import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_user_id(self) -> None:
        s = Settings()
        assert s.default_user_id == "anonymous_user"

    def test_default_cost_per_call(self) -> None:
        s = Settings()
        assert s.cost_per_call == 0.01

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_llm_model(self) -> None:
        s = Settings()
        assert s.llm_provider == "gemini"
        assert s.llm_model_name == "gemini-1.5-flash"


class TestSettingsFromEnv:
    def test_loads_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_API_KEY", "secret-key")
        s = Settings()
        assert s.llm_api_key == "secret-key"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_cors_origins_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ORIGINS", '["https://checker.example.com"]')
        s = Settings()
        assert s.cors_origins == ["https://checker.example.com"]

    def test_loads_cost_per_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COST_PER_CALL", "0.25")
        s = Settings()
        assert s.cost_per_call == 0.25


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "abc")
        with pytest.raises(ValidationError):
            Settings()
