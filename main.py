"""
Agent Grid FastAPI Application

Main entry point for Agent Grid, serving the cells REST API, the rendered
board image and real-time claim notifications.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, StreamingResponse

from logic.config import get_log_level
from logic.errors import ClaimError
from server.broadcast import event_generator, subscribe
from server.cells import router as cells_router

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Agent Grid")

# Cells routes are served both at the root and under /api
app.include_router(cells_router)
app.include_router(cells_router, prefix="/api")


@app.exception_handler(ClaimError)
async def claim_error_handler(request: Request, exc: ClaimError):
    """Report a rejected claim as {"error": message} with its status code."""
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


# ============================================================
# SSE Endpoint
# ============================================================


@app.get("/api/stream")
async def stream():
    """Server-Sent Events (SSE) endpoint for real-time updates.

    Clients connect to this endpoint to be told about every newly claimed
    cell without refetching the whole board.

    Returns:
        StreamingResponse with text/event-stream content type.
    """
    queue = subscribe()
    return StreamingResponse(event_generator(queue), media_type="text/event-stream")
