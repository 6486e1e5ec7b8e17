"""
Server-sent events (SSE) broadcasting module.

This module keeps the set of connected SSE subscribers and pushes every newly
accepted claim to all of them.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import asyncio
import json
from datetime import datetime
from typing import Set

from logic.models import Claim

# Global set of SSE subscribers (asyncio.Queue instances)
subscribers: Set[asyncio.Queue] = set()


def subscribe() -> asyncio.Queue:
    queue = asyncio.Queue()
    subscribers.add(queue)
    return queue


async def event_generator(queue: asyncio.Queue):
    """Generate SSE events from the queue.

    The queue is unsubscribed when the client goes away.

    Args:
        queue: Async queue to read events from.

    Yields:
        SSE formatted event strings.
    """
    try:
        while True:
            data = await queue.get()
            yield f"data: {json.dumps(data)}\n\n"
    finally:
        subscribers.discard(queue)


async def notify_cell_claimed(claim: Claim):
    """Broadcast a newly accepted claim to all SSE subscribers.

    Args:
        claim: The stored claim.
    """
    payload = {
        "type": "cell_claimed",
        "time": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "cell": claim.to_dict(),
    }
    for queue in list(subscribers):
        await queue.put(payload)
