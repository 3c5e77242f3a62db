"""Request lifecycle states and the reducer that moves between them.

The lifecycle is ``Idle -> Pending -> (Succeeded | Failed)``; a new
submission moves ``Succeeded`` or ``Failed`` back to ``Pending``. Every state
is an immutable value and :func:`reduce` always returns a new one, so the
current state can be swapped in a single assignment.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from sentireport.models import Report


class StateTransitionError(ValueError):
    """Raised when an event does not apply to the current state."""


# ── States ─────────────────────────────────────────────────────────────────


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Pending(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["pending"] = "pending"
    statement: str = ""
    last_report: Report | None = None


class Succeeded(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["succeeded"] = "succeeded"
    report: Report


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    message: str
    last_report: Report | None = None  # most recent good report, if any


RequestState = Annotated[
    Union[Idle, Pending, Succeeded, Failed], Field(discriminator="status")
]


# ── Events ─────────────────────────────────────────────────────────────────


class Submitted(BaseModel):
    model_config = ConfigDict(frozen=True)

    statement: str


class Resolved(BaseModel):
    model_config = ConfigDict(frozen=True)

    report: Report


class Rejected(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str


Event = Union[Submitted, Resolved, Rejected]


def last_good_report(state: RequestState) -> Report | None:
    """Return the report a renderer should keep showing for *state*."""
    if isinstance(state, Succeeded):
        return state.report
    if isinstance(state, (Pending, Failed)):
        return state.last_report
    return None


def reduce(state: RequestState, event: Event) -> RequestState:
    """Apply *event* to *state* and return the next state.

    A submission while a request is pending returns *state* unchanged.
    """
    if isinstance(event, Submitted):
        if isinstance(state, Pending):
            return state
        return Pending(statement=event.statement, last_report=last_good_report(state))

    if not isinstance(state, Pending):
        raise StateTransitionError(
            f"Cannot apply {type(event).__name__} in state {state.status!r}"
        )
    if isinstance(event, Resolved):
        return Succeeded(report=event.report)
    if isinstance(event, Rejected):
        return Failed(message=event.message, last_report=state.last_report)
    raise StateTransitionError(f"Unknown event {event!r}")
