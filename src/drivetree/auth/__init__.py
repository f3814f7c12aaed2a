"""Public auth exports for drivetree."""

from __future__ import annotations

from .auth_info import AuthInfo
from .service_account import ServiceAccountClient

__all__ = ["AuthInfo", "ServiceAccountClient"]
