"""
Purchase Models — client side
State: IDLE | PENDING_AUTHORIZATION | AUTHORIZED | FINALIZING | COMPLETED | FAILED_FINALIZE | ABANDONED
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PurchaseState(str, Enum):
    IDLE = "IDLE"
    PENDING_AUTHORIZATION = "PENDING_AUTHORIZATION"
    AUTHORIZED = "AUTHORIZED"
    FINALIZING = "FINALIZING"
    COMPLETED = "COMPLETED"
    FAILED_FINALIZE = "FAILED_FINALIZE"
    ABANDONED = "ABANDONED"


VALID_TRANSITIONS = {
    PurchaseState.IDLE: {PurchaseState.PENDING_AUTHORIZATION},
    PurchaseState.PENDING_AUTHORIZATION: {PurchaseState.AUTHORIZED, PurchaseState.ABANDONED},
    PurchaseState.AUTHORIZED: {PurchaseState.FINALIZING},
    PurchaseState.FINALIZING: {PurchaseState.COMPLETED, PurchaseState.FAILED_FINALIZE},
    PurchaseState.COMPLETED: set(),
    PurchaseState.FAILED_FINALIZE: set(),
    PurchaseState.ABANDONED: set(),
}

TERMINAL_STATES = {state for state, allowed in VALID_TRANSITIONS.items() if not allowed}


@dataclass(frozen=True)
class PurchaseItem:
    item_id: str
    description: str
    category: str
    amount: int  # cents
    currency: Optional[str] = None
    qty: int = 1


@dataclass(frozen=True)
class AuthorizationEvent:
    """Delivered by the platform after the user approves or declines in the overlay."""

    app_id: str
    order_id: str
    authorized: bool


@dataclass
class Purchase:
    order_id: str
    app_id: str
    steam_id: str
    item: PurchaseItem
    trans_id: Optional[str] = None
    state: PurchaseState = PurchaseState.IDLE

    @property
    def key(self):
        return (str(self.app_id), str(self.order_id))

    @property
    def is_terminal(self):
        return self.state in TERMINAL_STATES

    def advance(self, new_state):
        allowed = VALID_TRANSITIONS.get(self.state, set())
        if new_state not in allowed:
            raise ValueError(f"Cannot transition from {self.state.value} to {new_state.value}")
        self.state = new_state
