"""
Board client.

This package holds the viewer side of Agent Grid: the claim-flow state, the
animation loop and the HTTP client that talks to the cells API.

Author: Agent Grid contributors
Date: 2026-10-19
"""
