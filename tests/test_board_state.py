"""
Tests for the viewer claim-flow state.

Run with: python -m pytest tests/test_board_state.py
"""

import pytest

from client.state import BoardState, Modal, ProposalForm, TransitionError
from logic.config import UI_DESCRIPTION_LEN, UI_NAME_LEN
from logic.models import Claim


def make_claim(row, col, name="Bot"):
    return Claim(
        id=f"{row}-{col}",
        row=row,
        col=col,
        name=name,
        color="#00ff88",
        claimed_at="2026-01-01T00:00:00.000Z",
    )


def test_initial_state():
    state = BoardState()
    assert state.modal == Modal.IDLE
    assert state.loading is True
    assert state.claims == []


def test_replace_snapshot_keys_by_id():
    state = BoardState()
    state.replace_snapshot([make_claim(1, 1), make_claim(0, 2)])

    assert list(state.snapshot) == ["1-1", "0-2"]
    assert state.claimed_count == 2
    assert state.loading is False


def test_proposal_success_flow():
    state = BoardState()
    state.open_proposal(10, 12, "#ff0080")
    assert state.modal == Modal.PROPOSAL_OPEN

    state.proposal.name = "  Chitti "
    state.proposal.url = "   "
    payload = state.begin_submit()
    assert state.modal == Modal.SUBMITTING
    assert payload == {"row": 10, "col": 12, "name": "Chitti", "color": "#ff0080"}

    claim = make_claim(10, 12, "Chitti")
    state.submit_succeeded(claim)
    assert state.modal == Modal.IDLE
    assert state.proposal is None
    assert state.snapshot["10-12"] == claim


def test_proposal_failure_returns_to_form():
    state = BoardState()
    state.open_proposal(1, 1, "#ff0080")
    state.proposal.name = "Bot"
    state.begin_submit()

    state.submit_failed("Cell already claimed")
    assert state.modal == Modal.PROPOSAL_OPEN
    assert state.error == "Cell already claimed"
    assert state.proposal.name == "Bot"


def test_blank_name_cannot_submit():
    state = BoardState()
    state.open_proposal(1, 1, "#ff0080")
    state.proposal.name = "   "

    assert state.can_submit is False
    with pytest.raises(TransitionError):
        state.begin_submit()
    assert state.modal == Modal.PROPOSAL_OPEN


def test_detail_flow():
    state = BoardState()
    claim = make_claim(3, 3)
    state.open_detail(claim)
    assert state.modal == Modal.DETAIL_OPEN
    assert state.detail == claim

    state.dismiss()
    assert state.modal == Modal.IDLE
    assert state.detail is None


def test_views_are_exclusive():
    state = BoardState()
    state.open_detail(make_claim(3, 3))
    with pytest.raises(TransitionError):
        state.open_proposal(1, 1, "#fff")

    state.dismiss()
    state.open_proposal(1, 1, "#fff")
    with pytest.raises(TransitionError):
        state.open_detail(make_claim(3, 3))


def test_dismiss_has_no_side_effects():
    state = BoardState()
    state.replace_snapshot([make_claim(0, 0)])
    state.open_proposal(5, 5, "#fff")
    state.proposal.name = "Bot"

    state.dismiss()
    assert state.modal == Modal.IDLE
    assert list(state.snapshot) == ["0-0"]


def test_cannot_dismiss_while_submitting():
    state = BoardState()
    state.open_proposal(5, 5, "#fff")
    state.proposal.name = "Bot"
    state.begin_submit()

    with pytest.raises(TransitionError):
        state.dismiss()


def test_form_payload_keeps_filled_optional_fields():
    form = ProposalForm(row=0, col=1, color="#fff", name="Bot", description=" hi ", url="https://x.dev")
    assert form.to_payload() == {
        "row": 0,
        "col": 1,
        "name": "Bot",
        "color": "#fff",
        "description": "hi",
        "url": "https://x.dev",
    }


def test_form_fields_are_clipped_to_input_limits():
    """The name and description boxes stop accepting input at their limits."""
    form = ProposalForm(row=0, col=0, color="#fff", name="N" * 25, description="d" * 120)
    assert form.name == "N" * UI_NAME_LEN
    assert form.description == "d" * UI_DESCRIPTION_LEN

    form.name = "M" * 40
    payload = form.to_payload()
    assert payload["name"] == "M" * UI_NAME_LEN
    assert payload["description"] == "d" * UI_DESCRIPTION_LEN


def test_url_has_no_input_limit():
    url = "https://example.com/" + "a" * 200
    form = ProposalForm(row=0, col=0, color="#fff", name="Bot", url=url)
    assert form.to_payload()["url"] == url
