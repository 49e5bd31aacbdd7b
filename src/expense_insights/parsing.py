import json
import math
import re
import time
from typing import Any

from expense_insights.errors import InsightParseError
from expense_insights.fallback import FALLBACK_CATEGORY
from expense_insights.models import CATEGORY_LABELS, INSIGHT_TYPES, CategoryLabel, Insight

DEFAULT_TYPE = "info"
DEFAULT_TITLE = "AI Insight"
DEFAULT_MESSAGE = "Analysis complete"
DEFAULT_CONFIDENCE = 0.8

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(raw: str) -> str:
    """Trim the text and remove a surrounding Markdown code fence, if any."""
    cleaned = raw.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned)
    return _TRAILING_FENCE.sub("", cleaned)


def _text_or_default(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _confidence_or_default(value: Any) -> float:
    # bool is an int subclass; "true" is not a confidence
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_CONFIDENCE
    if not value or math.isnan(value):
        return DEFAULT_CONFIDENCE
    return min(max(float(value), 0.0), 1.0)


def normalize_insight(raw: dict[str, Any], insight_id: str) -> Insight:
    """Build an Insight from one untyped model object, defaulting field by field."""
    insight_type = raw.get("type")
    if insight_type not in INSIGHT_TYPES:
        insight_type = DEFAULT_TYPE

    action = raw.get("action")
    if not isinstance(action, str) or not action:
        action = None

    return Insight(
        id=insight_id,
        type=insight_type,
        title=_text_or_default(raw.get("title"), DEFAULT_TITLE),
        message=_text_or_default(raw.get("message"), DEFAULT_MESSAGE),
        action=action,
        confidence=_confidence_or_default(raw.get("confidence")),
    )


def parse_insights(raw: str, now_ms: int | None = None) -> list[Insight]:
    """
    Parse model output into insights.

    The whole response is rejected with InsightParseError when it is not a
    non-empty JSON array of objects; there are no partial results.
    """
    cleaned = strip_code_fences(raw)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise InsightParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise InsightParseError(f"Expected a JSON array, got {type(payload).__name__}")
    if not payload:
        raise InsightParseError("Response contained no insights")

    if now_ms is None:
        now_ms = int(time.time() * 1000)

    insights: list[Insight] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise InsightParseError(f"Insight {index} is {type(item).__name__}, not an object")
        insights.append(normalize_insight(item, f"ai-{now_ms}-{index}"))
    return insights


def parse_category(raw: str) -> CategoryLabel:
    """Exact, case-sensitive match against the fixed labels; anything else is Other."""
    category = raw.strip()
    if category in CATEGORY_LABELS:
        return category
    return FALLBACK_CATEGORY
