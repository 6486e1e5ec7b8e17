"""
Cells API routes.

This module contains the endpoints for listing and claiming grid cells, for
looking up a single cell and for rendering the board as an image.

Author: Agent Grid contributors
Date: 2026-10-19
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response

from logic.config import CANVAS_HEIGHT, CANVAS_WIDTH, TOTAL_CELLS
from logic.errors import MalformedId, MissingFields
from logic.identity import cell_id, parse_cell_id
from logic.render import render_frame_png
from logic.store import ClaimStore
from logic.validation import validate_proposal
from server.broadcast import notify_cell_claimed

router = APIRouter()

_store: Optional[ClaimStore] = None


def get_store() -> ClaimStore:
    """Dependency returning the process-wide claim store.

    Returns:
        The shared ClaimStore, created on first use.
    """
    global _store
    if _store is None:
        _store = ClaimStore()
    return _store


@router.get("/cells")
def list_cells(store: ClaimStore = Depends(get_store)):
    """List every claimed cell.

    Returns:
        Dictionary with all claims and the fixed grid capacity.
    """
    return {
        "cells": [c.to_dict() for c in store.list_all()],
        "total": TOTAL_CELLS,
    }


@router.post("/cells", status_code=201)
async def claim_cell(request: Request, store: ClaimStore = Depends(get_store)):
    """Claim a cell.

    Validates the submission, stores it if the cell is free and broadcasts
    the new claim to connected clients via SSE.

    Args:
        request: Request whose JSON body holds row, col, name, color and the
            optional description and url.

    Returns:
        Dictionary with the stored claim.

    Raises:
        ClaimError: If validation fails or the cell is already claimed.
    """
    try:
        body = await request.json()
    except ValueError:
        raise MissingFields()

    proposal = validate_proposal(body)
    claim = store.try_create(proposal)
    await notify_cell_claimed(claim)

    return {"cell": claim.to_dict()}


@router.get("/cells/frame.png")
def board_frame(
    frame: int = Query(0, ge=0),
    width: int = Query(CANVAS_WIDTH, ge=200, le=2000),
    height: int = Query(CANVAS_HEIGHT, ge=200, le=2000),
    store: ClaimStore = Depends(get_store),
):
    """Render the board at a given animation frame.

    Returns:
        PNG image of the board.
    """
    png = render_frame_png(store.list_all(), frame, width, height)
    return Response(content=png, media_type="image/png")


@router.get("/cells/{cell}")
def get_cell(cell: str, store: ClaimStore = Depends(get_store)):
    """Get the claim on a single cell.

    Args:
        cell: Cell id in "<row>-<col>" form.

    Returns:
        Dictionary with the claim, or a 404 error if the cell is free.
    """
    try:
        row, col = parse_cell_id(cell)
    except MalformedId:
        return JSONResponse({"error": "Cell not claimed yet"}, status_code=404)

    claim = store.get(cell_id(row, col))
    if claim is None:
        return JSONResponse({"error": "Cell not claimed yet"}, status_code=404)
    return {"cell": claim.to_dict()}
