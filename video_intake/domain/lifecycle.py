from __future__ import annotations

from video_intake.domain.errors import DomainInvariantError
from video_intake.domain.models import Phase

# Succeeded/failed are terminal for one attempt; the user may resubmit.
ALLOWED_PHASE_TRANSITIONS: dict[Phase, set[Phase]] = {
    Phase.IDLE: {Phase.SUBMITTING},
    Phase.SUBMITTING: {Phase.SUCCEEDED, Phase.FAILED},
    Phase.SUCCEEDED: {Phase.SUBMITTING},
    Phase.FAILED: {Phase.SUBMITTING},
}


def ensure_transition(*, from_phase: Phase, to_phase: Phase) -> None:
    allowed = ALLOWED_PHASE_TRANSITIONS.get(from_phase, set())
    if to_phase not in allowed:
        raise DomainInvariantError(f"transition {from_phase} -> {to_phase} is not allowed")
