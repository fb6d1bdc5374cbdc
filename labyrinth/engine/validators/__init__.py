"""
Validators for labyrinth commands.

This package contains the precondition checks for the commands whose
legality depends on the session state. Validators never mutate state.
"""

from labyrinth.engine.validators.combat import AttackValidator
from labyrinth.engine.validators.movement import MovementValidator
from labyrinth.engine.validators.progression import ContinueValidator, SkipValidator

__all__ = ["AttackValidator", "ContinueValidator", "MovementValidator", "SkipValidator"]
