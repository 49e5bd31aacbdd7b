import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from expense_insights.api.routes import insights
from expense_insights.core import settings
from expense_insights.generator import create_generator
from expense_insights.logger import get_logger, setup_logging

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        if not os.getenv("GEMINI_API_KEY"):
            logger.warning("GEMINI_API_KEY not set. AI features will return fallback values.")

        app.state.generator = create_generator()
        logger.info(
            f"Insight generator ready: insight_model={settings.INSIGHT_MODEL}, "
            f"category_model={settings.CATEGORY_MODEL}"
        )
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Expense Insights", lifespan=lifespan)
    app.include_router(insights.router)
    return app
