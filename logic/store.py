"""
Claim storage module.

This module persists claims as a single JSON array on disk. The whole file is
read on every listing and rewritten on every accepted claim.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import json
import logging
import os
import tempfile
import threading
from typing import List, Optional

from pydantic import ValidationError

from .config import get_data_path
from .errors import AlreadyClaimed, StorageUnreadable
from .models import Claim, ClaimProposal

logger = logging.getLogger(__name__)


class ClaimStore:
    """Append-only claim collection backed by a JSON file.

    Attributes:
        path: Path to the JSON file holding every claim.
    """

    def __init__(self, path: Optional[str] = None):
        """Initialize the store.

        Args:
            path: Path to the claims file. Defaults to the configured data path.
        """
        self.path = path or get_data_path()
        self._lock = threading.Lock()

    def _read(self) -> List[Claim]:
        """Read every claim from disk.

        Returns:
            Claims in insertion order. A missing file yields an empty list.

        Raises:
            StorageUnreadable: If the file exists but cannot be parsed.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            raise StorageUnreadable() from e

        if not isinstance(records, list):
            raise StorageUnreadable()
        try:
            return [Claim.model_validate(record) for record in records]
        except ValidationError as e:
            raise StorageUnreadable() from e

    def _write(self, claims: List[Claim]):
        """Rewrite the whole file, replacing it atomically."""
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".cells-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump([c.to_dict() for c in claims], f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def list_all(self) -> List[Claim]:
        """List every stored claim in insertion order.

        An unreadable file is reported as an empty board rather than an error.

        Returns:
            List of claims.
        """
        try:
            return self._read()
        except StorageUnreadable as e:
            logger.warning("Claims file %s is unreadable, serving empty board: %s", self.path, e.__cause__ or e)
            return []

    def get(self, cell_id: str) -> Optional[Claim]:
        """Find the claim on a cell, if any."""
        return next((c for c in self.list_all() if c.id == cell_id), None)

    def try_create(self, proposal: ClaimProposal) -> Claim:
        """Store a new claim unless its cell is already taken.

        The existence check and the write happen under one lock, so two
        proposals for the same cell can never both succeed.

        Args:
            proposal: Validated claim submission.

        Returns:
            The stored claim with its creation time.

        Raises:
            AlreadyClaimed: If the cell already has a claim.
            StorageUnreadable: If the existing file cannot be parsed.
        """
        with self._lock:
            claims = self._read()
            if any(c.id == proposal.id for c in claims):
                raise AlreadyClaimed()

            claim = Claim.from_proposal(proposal)
            claims.append(claim)
            self._write(claims)

        logger.info("Cell %s claimed by %r", claim.id, claim.name)
        return claim
