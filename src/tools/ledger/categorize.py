from __future__ import annotations

from typing import Mapping, Sequence

from domain.config import CATEGORY_KEYWORDS
from domain.models import Category
from domain.schemas import ToolRequest, ToolResponse
from tools.base import Tool, ToolSpec
from tools.registry import register_tool


def categorize(
    description: str,
    keywords: Mapping[Category, Sequence[str]] = CATEGORY_KEYWORDS,
) -> Category:
    """Return the first category, in `keywords` order, with a keyword contained in the description."""
    text = (description or "").lower()
    for category, words in keywords.items():
        if any(word in text for word in words):
            return category
    return Category.OTHER


@register_tool
class CategorizeTool(Tool):
    name = "ledger.categorize"
    description = "Classify a free-text transaction description into a spending category by keyword matching."

    def run(self, request: ToolRequest) -> ToolResponse:
        text = str(request.args.get("description") or "")
        category = categorize(text)
        return self.respond(request, {"description": text, "category": category.value})

    def spec(self) -> ToolSpec:
        return ToolSpec(
            name=self.name,
            description=self.description,
            args_schema={
                "type": "object",
                "properties": {"description": {"type": "string"}},
                "required": ["description"],
            },
        )
