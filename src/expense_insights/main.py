import uvicorn

from expense_insights.app import create_app
from expense_insights.core import settings
from expense_insights.logger import get_logging_config

app = create_app()


def run() -> None:
    uvicorn.run(
        "expense_insights.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=get_logging_config(),
    )


if __name__ == "__main__":
    run()
