from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.app import create_app
from app.config.settings import Settings
from app.usage.ledger import UsageLedger


@pytest.fixture
def generation_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def make_client(
    ledger: UsageLedger, generation_client: MagicMock
) -> Callable[..., TestClient]:
    """Build a TestClient whose provider returns generation_client."""

    def _make(**overrides: object) -> TestClient:
        values: dict[str, object] = {"llm_provider": "gemini", "llm_api_key": "test-key"}
        values.update(overrides)
        settings = Settings(**values)
        factory_target = "app.processor.processor.GenerationClientFactory.create"
        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(
                factory_target,
                lambda s: generation_client if s.llm_api_key else None,
            )
            app = create_app(settings, ledger=ledger)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
