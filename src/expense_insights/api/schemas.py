from pydantic import BaseModel

from expense_insights.models import CategoryLabel, ExpenseRecord


class InsightsRequest(BaseModel):
    expenses: list[ExpenseRecord] = []


class CategorizeRequest(BaseModel):
    description: str


class CategorizeResponse(BaseModel):
    category: CategoryLabel


class AnswerRequest(BaseModel):
    question: str
    context: list[ExpenseRecord] = []


class AnswerResponse(BaseModel):
    answer: str
