from collections.abc import Callable
from typing import TypeVar

from expense_insights.logger import get_logger
from expense_insights.models import CategoryLabel, Insight

logger = get_logger(__name__)

T = TypeVar("T")

FALLBACK_CATEGORY: CategoryLabel = "Other"
FALLBACK_ANSWER = "I'm unable to provide a detailed answer at the moment. Please try again."


def fallback_insights() -> list[Insight]:
    return [
        Insight(
            id="fallback-1",
            type="info",
            title="AI Analysis Unavailable",
            message="Unable to generate personalized insights at this time. Please try again later.",
            action="Refresh insights",
            confidence=0.5,
        )
    ]


def run_with_fallback(operation: str, func: Callable[[], T], fallback: Callable[[], T]) -> T:
    """
    Run ``func`` and return its value, or ``fallback()`` if anything raises.

    The failure is logged and otherwise discarded; callers always get a value
    of the same shape.
    """
    try:
        return func()
    except Exception as e:
        logger.error(f"{operation} failed: {type(e).__name__}: {e}")
        return fallback()
