"""Domain value objects (immutable, compared by value)."""

from src.domain.value_objects.password_hash import PasswordHash
from src.domain.value_objects.quota import Quota
from src.domain.value_objects.trial_state import TrialState

__all__ = ["PasswordHash", "Quota", "TrialState"]
