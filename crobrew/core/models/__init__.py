"""
Domain models — Pydantic types for crobrew.

All models are re-exported here for convenient access:

    from crobrew.core.models import Profile, Settings, Action, Receipt
"""

from crobrew.core.models.action import Action, Receipt
from crobrew.core.models.profile import OPERATIONS, Operation, Profile
from crobrew.core.models.settings import Settings

__all__ = [
    # action.py
    "Action",
    "OPERATIONS",
    "Operation",
    # profile.py
    "Profile",
    "Receipt",
    # settings.py
    "Settings",
]
