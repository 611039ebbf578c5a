"""Centralized SQLModel imports to ensure metadata is populated."""

from app.backend.models import user as _user  # noqa: F401
from app.backend.models import tweet as _tweet  # noqa: F401
