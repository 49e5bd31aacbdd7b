import json

from expense_insights.models import ExpenseRecord
from expense_insights.prompts import (
    build_answer_prompt,
    build_category_prompt,
    build_insights_prompt,
    summarize_expenses,
)

EXPENSES = [
    ExpenseRecord(id="e1", amount=12.5, category="Food", description="Lunch", date="2024-03-01"),
    ExpenseRecord(id="e2", amount=-40.0, category="Bills", description="Refund", date="2024-03-02"),
]


def test_summary_drops_ids_and_keeps_order():
    summary = summarize_expenses(EXPENSES)
    assert summary == [
        {"amount": 12.5, "category": "Food", "description": "Lunch", "date": "2024-03-01"},
        {"amount": -40.0, "category": "Bills", "description": "Refund", "date": "2024-03-02"},
    ]

def test_insights_prompt_embeds_data():
    prompt = build_insights_prompt(EXPENSES)

    assert prompt.startswith("Analyze the following expense data and provide 3-4 actionable financial insights.")
    assert '"type": "warning|info|success|tip"' in prompt
    assert json.dumps(summarize_expenses(EXPENSES), indent=2) in prompt
    assert "e1" not in prompt
    assert prompt.endswith("Return only valid JSON array, no additional text.")

def test_insights_prompt_with_no_expenses():
    prompt = build_insights_prompt([])
    assert "Expense Data:\n[]\n" in prompt

def test_category_prompt_lists_labels():
    prompt = build_category_prompt("Uber to airport")
    assert "Food, Transportation, Entertainment, Shopping, Bills, Healthcare, Other." in prompt
    assert "Respond with only the category name." in prompt
    assert prompt.endswith('Expense: "Uber to airport"')

def test_answer_prompt_quotes_question():
    prompt = build_answer_prompt("How much did I spend on food?", EXPENSES)
    assert 'answer to this question: "How much did I spend on food?"' in prompt
    assert '"description": "Lunch"' in prompt
    assert prompt.endswith("Answer directly, use numbers when possible, and give actionable advice.")
