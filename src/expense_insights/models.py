from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

InsightType = Literal["warning", "info", "success", "tip"]
CategoryLabel = Literal[
    "Food",
    "Transportation",
    "Entertainment",
    "Shopping",
    "Bills",
    "Healthcare",
    "Other",
]

INSIGHT_TYPES: tuple[str, ...] = ("warning", "info", "success", "tip")
CATEGORY_LABELS: tuple[str, ...] = (
    "Food",
    "Transportation",
    "Entertainment",
    "Shopping",
    "Bills",
    "Healthcare",
    "Other",
)


class ExpenseRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    amount: float
    category: str
    description: str
    date: str


class Insight(BaseModel):
    id: str
    type: InsightType
    title: str
    message: str
    action: str | None = None
    confidence: float = Field(ge=0.0, le=1.0)
