import json
from collections.abc import Iterable

from expense_insights.models import CATEGORY_LABELS, ExpenseRecord

INSIGHTS_TEMPLATE = """Analyze the following expense data and provide 3-4 actionable financial insights.
Return a JSON array of insights with this structure:
{{
  "type": "warning|info|success|tip",
  "title": "Brief title",
  "message": "Detailed insight message with specific numbers when possible",
  "action": "Actionable suggestion",
  "confidence": 0.8
}}

Expense Data:
{data}

Focus on:
1. Spending patterns (day of week, categories)
2. Budget alerts (high spending areas)
3. Money-saving opportunities
4. Positive reinforcement for good habits

Return only valid JSON array, no additional text."""

CATEGORY_TEMPLATE = """Categorize this expense into one of these categories:
{categories}.
Respond with only the category name.
Expense: "{description}\""""

ANSWER_TEMPLATE = """Based on the following expense data, provide a concise 2-3 sentence answer to this question: "{question}"
Expense Data:
{data}

Answer directly, use numbers when possible, and give actionable advice."""


def summarize_expenses(expenses: Iterable[ExpenseRecord]) -> list[dict]:
    """Drop identifiers, keeping what the model needs to reason about spending."""
    return [
        {
            "amount": expense.amount,
            "category": expense.category,
            "description": expense.description,
            "date": expense.date,
        }
        for expense in expenses
    ]


def serialize_expenses(expenses: Iterable[ExpenseRecord]) -> str:
    return json.dumps(summarize_expenses(expenses), indent=2, ensure_ascii=False)


def build_insights_prompt(expenses: Iterable[ExpenseRecord]) -> str:
    return INSIGHTS_TEMPLATE.format(data=serialize_expenses(expenses))


def build_category_prompt(description: str) -> str:
    return CATEGORY_TEMPLATE.format(
        categories=", ".join(CATEGORY_LABELS),
        description=description,
    )


def build_answer_prompt(question: str, context: Iterable[ExpenseRecord]) -> str:
    return ANSWER_TEMPLATE.format(question=question, data=serialize_expenses(context))
