from collections.abc import Sequence

from expense_insights.core import settings
from expense_insights.fallback import (
    FALLBACK_ANSWER,
    FALLBACK_CATEGORY,
    fallback_insights,
    run_with_fallback,
)
from expense_insights.llm.base import TextGenerator
from expense_insights.llm.openai_client import OpenAITextGenerator
from expense_insights.logger import get_logger
from expense_insights.models import CategoryLabel, ExpenseRecord, Insight
from expense_insights.parsing import parse_category, parse_insights
from expense_insights.prompts import (
    build_answer_prompt,
    build_category_prompt,
    build_insights_prompt,
)

logger = get_logger(__name__)


class InsightGenerator:
    """
    Insights, categorization and Q&A over expense records.

    None of the public methods raise: remote or parsing failures are logged and
    replaced by a fixed fallback value.
    """

    def __init__(self,
                 client: TextGenerator,
                 insight_model: str = settings.DEFAULT_INSIGHT_MODEL,
                 category_model: str = settings.DEFAULT_CATEGORY_MODEL):
        self.client = client
        self.insight_model = insight_model
        self.category_model = category_model

    def generate_expense_insights(self, expenses: Sequence[ExpenseRecord]) -> list[Insight]:
        def attempt() -> list[Insight]:
            prompt = build_insights_prompt(expenses)
            raw = self.client.generate(prompt, self.insight_model)
            insights = parse_insights(raw)
            logger.debug(f"Parsed {len(insights)} insights from {len(expenses)} expenses")
            return insights

        return run_with_fallback("Insight generation", attempt, fallback_insights)

    def categorize_expense(self, description: str) -> CategoryLabel:
        def attempt() -> CategoryLabel:
            raw = self.client.generate(build_category_prompt(description), self.category_model)
            category = parse_category(raw)
            logger.debug(f"Categorized '{description[:50]}' as '{category}' (model said '{raw.strip()[:50]}')")
            return category

        return run_with_fallback("Expense categorization", attempt, lambda: FALLBACK_CATEGORY)

    def generate_ai_answer(self, question: str, context: Sequence[ExpenseRecord]) -> str:
        def attempt() -> str:
            raw = self.client.generate(build_answer_prompt(question, context), self.insight_model)
            answer = raw.strip()
            if not answer:
                raise ValueError("Model returned an empty answer")
            return answer

        return run_with_fallback("Answer generation", attempt, lambda: FALLBACK_ANSWER)


def create_generator(client: TextGenerator | None = None) -> InsightGenerator:
    """Build a generator from the loaded configuration."""
    if client is None:
        client = OpenAITextGenerator(base_url=settings.GEMINI_BASE_URL)
    return InsightGenerator(
        client=client,
        insight_model=settings.INSIGHT_MODEL,
        category_model=settings.CATEGORY_MODEL,
    )
