from __future__ import annotations

import logging
import time

from domain.schemas import LedgerData, PlanCall, ToolContext, ToolRequest, ToolResponse
from tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolExecutor:
    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    def run_calls(
        self,
        calls: list[PlanCall],
        ledger: LedgerData,
        context: ToolContext,
        request_id: str = "req_dashboard",
    ) -> list[ToolResponse]:
        responses: list[ToolResponse] = []
        for call in calls:
            req = ToolRequest(
                request_id=f"{request_id}:{call.id}",
                tool=call.tool,
                args=call.args,
                ledger=ledger,
                context=context,
            )
            logger.info("ToolExecutor running call_id=%s tool=%s", call.id, call.tool)
            t = time.perf_counter()
            try:
                tool = self._registry.get_tool(req.tool)
                response = tool.run(req)
            except Exception as exc:
                logger.exception("ToolExecutor failed call_id=%s tool=%s", call.id, call.tool)
                response = ToolResponse(
                    request_id=req.request_id,
                    tool=req.tool,
                    ok=False,
                    errors=[str(exc) or exc.__class__.__name__],
                    context=context,
                )
            responses.append(response)
            logger.info("ToolExecutor finished call_id=%s tool=%s in %.3fs ok=%s", call.id, call.tool, time.perf_counter() - t, response.ok)
        return responses
