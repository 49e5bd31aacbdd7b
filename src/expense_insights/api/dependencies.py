from fastapi import HTTPException, Request

from expense_insights.generator import InsightGenerator


def get_generator(request: Request) -> InsightGenerator:
    generator = getattr(request.app.state, "generator", None)
    if not generator:
        raise HTTPException(status_code=500, detail="Generator not initialized")
    return generator
