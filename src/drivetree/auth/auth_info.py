"""Authentication information for drivetree (service account only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Service account credentials.

    The private key is commonly stored in a single-line environment variable
    with literal "\\n" sequences; those are turned back into newlines so the
    PEM block parses.
    """

    email: str
    private_key: str

    def __post_init__(self) -> None:
        for key in ("email", "private_key"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{key} must be a non-empty string")

        object.__setattr__(self, "private_key", self.private_key.replace("\\n", "\n"))

    def to_service_account_info(self, token_uri: str) -> dict[str, str]:
        """Return the mapping google-auth expects for service account keys."""
        return {
            "type": "service_account",
            "client_email": self.email,
            "private_key": self.private_key,
            "token_uri": token_uri,
        }
