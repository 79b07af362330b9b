"""Session states and allowed transitions."""

from __future__ import annotations

from enum import Enum


class AppState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SELECTING = "selecting"
    GENERATING = "generating"
    RESULT = "result"
    ERROR = "error"


# reset() bypasses this table and is valid from every state
TRANSITIONS: dict[AppState, frozenset[AppState]] = {
    AppState.IDLE: frozenset({AppState.SEARCHING}),
    AppState.SEARCHING: frozenset({AppState.SELECTING, AppState.ERROR}),
    AppState.SELECTING: frozenset({AppState.GENERATING, AppState.SEARCHING}),
    AppState.GENERATING: frozenset({AppState.RESULT, AppState.ERROR}),
    AppState.RESULT: frozenset({AppState.SELECTING}),
    AppState.ERROR: frozenset({AppState.SELECTING, AppState.SEARCHING}),
}


class InvalidStateTransition(Exception):
    """Raised when an operation is not allowed in the current state."""

    def __init__(self, current: AppState, target: AppState | None = None, operation: str | None = None):
        self.current = current
        self.target = target
        self.operation = operation
        if operation:
            message = f"Cannot {operation} while {current.value}"
        else:
            message = f"Invalid transition {current.value} -> {target.value if target else '?'}"
        super().__init__(message)


def can_transition(current: AppState, target: AppState) -> bool:
    return target in TRANSITIONS[current]
