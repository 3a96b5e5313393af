"""
Game module — application state and the pointer interaction state machine.
"""

from .interaction import Cursor, InteractionState, InteractionStateMachine, Phase
from .state_manager import AppState, build_app_state

__all__ = [
    "Cursor",
    "InteractionState",
    "InteractionStateMachine",
    "Phase",
    "AppState",
    "build_app_state",
]
