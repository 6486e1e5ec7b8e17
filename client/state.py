"""
Claim-flow state for the board viewer.

BoardState is the single mutable state object of a viewer. Event handlers
and the render loop receive it explicitly instead of sharing globals.

Author: Agent Grid contributors
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from logic.config import UI_DESCRIPTION_LEN, UI_NAME_LEN
from logic.models import Claim


class Modal(str, Enum):
    IDLE = "idle"
    PROPOSAL_OPEN = "proposal_open"
    SUBMITTING = "submitting"
    DETAIL_OPEN = "detail_open"


class TransitionError(RuntimeError):
    """Raised when an event is not allowed in the current modal state."""


@dataclass
class ProposalForm:
    """Fields of the claim form for one proposed cell."""

    row: int
    col: int
    color: str
    name: str = ""
    description: str = ""
    url: str = ""

    def __setattr__(self, key, value):
        # Input limits of the form fields, like maxlength on a text box
        if key == "name" and isinstance(value, str):
            value = value[:UI_NAME_LEN]
        elif key == "description" and isinstance(value, str):
            value = value[:UI_DESCRIPTION_LEN]
        super().__setattr__(key, value)

    def to_payload(self) -> Dict[str, Any]:
        """Build the POST /cells body, leaving out blank optional fields."""
        payload = {
            "row": self.row,
            "col": self.col,
            "name": self.name.strip(),
            "color": self.color,
        }
        if self.description.strip():
            payload["description"] = self.description.strip()
        if self.url.strip():
            payload["url"] = self.url.strip()
        return payload


@dataclass
class BoardState:
    """State of one board viewer.

    Attributes:
        snapshot: Last known claims keyed by cell id, in listing order.
        modal: Which view is open.
        proposal: Form of the open proposal, if any.
        detail: Claim shown in the detail view, if any.
        error: Message of the last failed submission.
        loading: True until the first fetch has completed.
    """

    snapshot: Dict[str, Claim] = field(default_factory=dict)
    modal: Modal = Modal.IDLE
    proposal: Optional[ProposalForm] = None
    detail: Optional[Claim] = None
    error: Optional[str] = None
    loading: bool = True

    @property
    def claims(self) -> List[Claim]:
        return list(self.snapshot.values())

    @property
    def claimed_count(self) -> int:
        return len(self.snapshot)

    @property
    def can_submit(self) -> bool:
        return (
            self.modal == Modal.PROPOSAL_OPEN
            and self.proposal is not None
            and bool(self.proposal.name.strip())
        )

    def _require(self, *allowed: Modal):
        if self.modal not in allowed:
            raise TransitionError(f"Not allowed while {self.modal.value}")

    def replace_snapshot(self, claims: Iterable[Claim]):
        """Replace the snapshot with a freshly fetched listing."""
        self.snapshot = {c.id: c for c in claims}
        self.loading = False

    def merge_claim(self, claim: Claim):
        self.snapshot = {**self.snapshot, claim.id: claim}

    def open_proposal(self, row: int, col: int, color: str):
        self._require(Modal.IDLE)
        self.proposal = ProposalForm(row=row, col=col, color=color)
        self.error = None
        self.modal = Modal.PROPOSAL_OPEN

    def open_detail(self, claim: Claim):
        self._require(Modal.IDLE)
        self.detail = claim
        self.modal = Modal.DETAIL_OPEN

    def dismiss(self):
        """Close the open proposal or detail view without side effects."""
        self._require(Modal.PROPOSAL_OPEN, Modal.DETAIL_OPEN)
        self.proposal = None
        self.detail = None
        self.error = None
        self.modal = Modal.IDLE

    def begin_submit(self) -> Dict[str, Any]:
        """Move to submitting and return the request body.

        Raises:
            TransitionError: If no proposal is open or its name is blank.
        """
        if not self.can_submit:
            raise TransitionError("Nothing to submit")
        self.error = None
        self.modal = Modal.SUBMITTING
        return self.proposal.to_payload()

    def submit_succeeded(self, claim: Claim):
        """Merge the accepted claim ahead of the next fetch and close the form."""
        self._require(Modal.SUBMITTING)
        self.merge_claim(claim)
        self.proposal = None
        self.modal = Modal.IDLE

    def submit_failed(self, message: str):
        """Return to the form with the failure message, keeping its fields."""
        self._require(Modal.SUBMITTING)
        self.error = message
        self.modal = Modal.PROPOSAL_OPEN
