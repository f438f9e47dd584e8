"""
FastAPI entrypoint for court_lookup.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from court_lookup.api import register_error_handlers, router
from court_lookup.config import Settings, get_settings
from court_lookup.db import QueryStore, create_store
from court_lookup.providers import CaseDataProvider, build_provider
from court_lookup.service import CaseLookupService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: QueryStore | None = None,
    provider: CaseDataProvider | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    store = store or create_store(settings.database_url)
    provider = provider or build_provider(settings)
    service = CaseLookupService(provider, store, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store.open()
        logger.info("Query store ready; provider=%s", app.state.settings.case_provider)
        try:
            yield
        finally:
            app.state.store.close()

    app = FastAPI(title="Court Lookup", version="0.1.0", lifespan=lifespan)
    app.include_router(router)
    register_error_handlers(app)
    app.state.settings = settings
    app.state.store = store
    app.state.service = service
    return app


app = create_app()
