"""
HTTP client for the cells API.

Thin aiohttp wrapper used by the board viewer to fetch the snapshot and to
submit claims. Every call is issued once; nothing is retried.

Author: Agent Grid contributors
Date: 2026-10-19
"""

from typing import Any, Dict, List, Optional

import aiohttp

from logic.models import Claim

FALLBACK_ERROR = "Failed to claim"


class ClaimRejected(Exception):
    """The server refused a submission.

    Attributes:
        status: HTTP status of the response.
        message: Error text returned by the server.
    """

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class CellsClient:
    """Client for GET/POST /api/cells.

    Args:
        base_url: Root URL of the server, e.g. "http://localhost:3000".
        session: Shared aiohttp session. One is created on demand if omitted.
    """

    def __init__(self, base_url: str, session: Optional[aiohttp.ClientSession] = None):
        self.base_url = base_url.rstrip("/")
        self._session = session
        self._owns_session = session is None

    @property
    def cells_url(self) -> str:
        return f"{self.base_url}/api/cells"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self):
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def fetch_cells(self) -> List[Claim]:
        """Fetch every claim.

        Returns:
            Claims in listing order.

        Raises:
            aiohttp.ClientError: On network failure or an error status.
            ValueError: If the body is not a valid listing.
        """
        session = self._get_session()
        async with session.get(self.cells_url) as resp:
            resp.raise_for_status()
            data = await resp.json()
        return [Claim.model_validate(c) for c in data["cells"]]

    async def submit_claim(self, payload: Dict[str, Any]) -> Claim:
        """Submit a claim proposal.

        Args:
            payload: POST body built from the proposal form.

        Returns:
            The claim as stored by the server.

        Raises:
            ClaimRejected: If the server answered with an error status.
            aiohttp.ClientError: On network failure.
            ValueError: If a response body cannot be decoded.
        """
        session = self._get_session()
        async with session.post(self.cells_url, json=payload) as resp:
            data = await resp.json()
            if resp.status >= 400:
                message = data.get("error") if isinstance(data, dict) else None
                raise ClaimRejected(resp.status, message or FALLBACK_ERROR)
        return Claim.model_validate(data["cell"])
