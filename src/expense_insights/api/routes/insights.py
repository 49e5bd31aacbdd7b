import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends

from expense_insights.api.dependencies import get_generator
from expense_insights.api.schemas import (
    AnswerRequest,
    AnswerResponse,
    CategorizeRequest,
    CategorizeResponse,
    InsightsRequest,
)
from expense_insights.generator import InsightGenerator
from expense_insights.models import CATEGORY_LABELS, Insight

router = APIRouter(prefix="/api")


@router.post("/insights", response_model=list[Insight])
async def generate_insights(
    req: InsightsRequest,
    generator: Annotated[InsightGenerator, Depends(get_generator)],
) -> list[Insight]:
    return await asyncio.to_thread(generator.generate_expense_insights, req.expenses)


@router.post("/categorize", response_model=CategorizeResponse)
async def categorize_expense(
    req: CategorizeRequest,
    generator: Annotated[InsightGenerator, Depends(get_generator)],
) -> CategorizeResponse:
    category = await asyncio.to_thread(generator.categorize_expense, req.description)
    return CategorizeResponse(category=category)


@router.post("/answer", response_model=AnswerResponse)
async def answer_question(
    req: AnswerRequest,
    generator: Annotated[InsightGenerator, Depends(get_generator)],
) -> AnswerResponse:
    answer = await asyncio.to_thread(generator.generate_ai_answer, req.question, req.context)
    return AnswerResponse(answer=answer)


@router.get("/categories")
async def get_categories() -> list[str]:
    return list(CATEGORY_LABELS)
