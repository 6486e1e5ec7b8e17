"""
Server modules for Agent Grid.

This package contains the FastAPI routers for the cells API and the
Server-Sent Events broadcaster.

Author: Agent Grid contributors
Date: 2026-10-19
"""
