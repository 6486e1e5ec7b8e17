"""
Core logic for Agent Grid.

Cell identity, claim validation and storage, sprite layout, hit resolution
and board rendering. Nothing in this package depends on the web layer.

Author: Agent Grid contributors
Date: 2026-10-19
"""
