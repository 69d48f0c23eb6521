from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.routes import router
from app.config.settings import Settings
from app.processor.processor import Processor, build_processor
from app.usage.ledger import UsageLedger
from app.usage.memory_store import InMemoryLedgerStore


def create_app(
    settings: Settings | None = None,
    *,
    ledger: UsageLedger | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    """Build the FastAPI application with its ledger and pipeline attached to app.state."""
    settings = settings or Settings()
    if ledger is None:
        ledger = UsageLedger(InMemoryLedgerStore(), cost_per_call=settings.cost_per_call)
    if processor is None:
        processor = build_processor(settings, ledger)

    app = FastAPI(title="Conflict Checker")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.ledger = ledger
    app.state.processor = processor

    register_error_handlers(app)
    app.include_router(router)
    return app
