"""Configuration for drivetree, usually loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Mapping, Optional

from drivetree.auth import AuthInfo
from drivetree.errors import ConfigurationMissingError, InvalidArgumentError
from drivetree.tree.builder import DEFAULT_MAX_CONCURRENCY
from drivetree.tree.cache import DEFAULT_CACHE_TTL
from drivetree.util.time import millis_to_timedelta

ENV_EMAIL = "GOOGLE_SERVICE_ACCOUNT_EMAIL"
ENV_PRIVATE_KEY = "GOOGLE_SERVICE_ACCOUNT_KEY"
ENV_ROOT_FOLDER_ID = "GOOGLE_DRIVE_ROOT_ID"
ENV_CACHE_TTL = "DRIVE_CACHE_TTL"
ENV_MAX_CONCURRENCY = "DRIVE_MAX_CONCURRENCY"


@dataclass(slots=True, frozen=True)
class DriveTreeConfig:
    """
    Service account credentials, root folder and cache tuning.

    Notes:
        - Missing credentials are not an error here; they disable the
          feature, which callers check through `is_configured`.
    """

    email: Optional[str] = None
    private_key: Optional[str] = None
    root_folder_id: Optional[str] = None
    cache_ttl: timedelta = DEFAULT_CACHE_TTL
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> DriveTreeConfig:
        """
        Read configuration from environment variables.

        Raises:
            InvalidArgumentError: if DRIVE_CACHE_TTL or DRIVE_MAX_CONCURRENCY
                is not a valid number.
        """
        env = os.environ if environ is None else environ

        ttl_raw = _env(env, ENV_CACHE_TTL)
        cache_ttl = DEFAULT_CACHE_TTL
        if ttl_raw is not None:
            try:
                cache_ttl = millis_to_timedelta(float(ttl_raw))
            except (ValueError, OverflowError) as exc:
                raise InvalidArgumentError(
                    f"{ENV_CACHE_TTL} must be a non-negative number of milliseconds",
                    details={"value": ttl_raw},
                    cause=exc,
                ) from exc

        concurrency_raw = _env(env, ENV_MAX_CONCURRENCY)
        max_concurrency = DEFAULT_MAX_CONCURRENCY
        if concurrency_raw is not None:
            if not concurrency_raw.isdigit() or int(concurrency_raw) < 1:
                raise InvalidArgumentError(
                    f"{ENV_MAX_CONCURRENCY} must be a positive integer",
                    details={"value": concurrency_raw},
                )
            max_concurrency = int(concurrency_raw)

        return cls(
            email=_env(env, ENV_EMAIL),
            private_key=_env(env, ENV_PRIVATE_KEY),
            root_folder_id=_env(env, ENV_ROOT_FOLDER_ID),
            cache_ttl=cache_ttl,
            max_concurrency=max_concurrency,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.email and self.private_key and self.root_folder_id)

    def auth_info(self) -> AuthInfo:
        """
        Return service account credentials.

        Raises:
            ConfigurationMissingError: if the feature is not configured.
        """
        self.require_configured()
        return AuthInfo(email=self.email, private_key=self.private_key)  # type: ignore[arg-type]

    def require_configured(self) -> None:
        if self.is_configured:
            return
        missing = [
            name
            for name, value in (
                (ENV_EMAIL, self.email),
                (ENV_PRIVATE_KEY, self.private_key),
                (ENV_ROOT_FOLDER_ID, self.root_folder_id),
            )
            if not value
        ]
        raise ConfigurationMissingError(
            "Google Drive credentials are missing. Set " + ", ".join(missing) + ".",
            details={"missing": missing},
        )


def _env(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name, "").strip()
    return value or None
