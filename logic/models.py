"""
Claim data models.

A ClaimProposal is a validated but not yet stored submission; a Claim is the
stored, immutable record returned by the API.

Author: Agent Grid contributors
Date: 2026-10-19
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .identity import cell_id


class ClaimProposal(BaseModel):
    """Validated claim submission awaiting storage."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    name: str
    color: str
    description: Optional[str] = None
    url: Optional[str] = None

    @property
    def id(self) -> str:
        return cell_id(self.row, self.col)


class Claim(BaseModel):
    """A stored claim on one grid cell.

    Attributes:
        id: Canonical "<row>-<col>" id, the uniqueness key.
        row: Row index of the claimed cell.
        col: Column index of the claimed cell.
        name: Trimmed display name of the claimant.
        color: Color token chosen by the claimant.
        description: Optional one-liner, omitted from JSON when absent.
        url: Optional link, omitted from JSON when absent.
        claimed_at: ISO-8601 UTC creation time ("claimedAt" on the wire).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    row: int
    col: int
    name: str
    color: str
    description: Optional[str] = None
    url: Optional[str] = None
    claimed_at: str = Field(alias="claimedAt")

    @classmethod
    def from_proposal(cls, proposal: ClaimProposal, claimed_at: Optional[str] = None) -> "Claim":
        """Stamp a proposal with its id and creation time."""
        return cls(
            id=proposal.id,
            row=proposal.row,
            col=proposal.col,
            name=proposal.name,
            color=proposal.color,
            description=proposal.description,
            url=proposal.url,
            claimed_at=claimed_at or utc_timestamp(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the claim to its JSON representation."""
        return self.model_dump(by_alias=True, exclude_none=True)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
