"""Composites of the sample application screens."""

from .login_window import LoginWindow
from .user_browse import UserBrowse

__all__ = ["LoginWindow", "UserBrowse"]
