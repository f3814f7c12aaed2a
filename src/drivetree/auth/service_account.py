"""Service account credentials and Drive service construction."""

from __future__ import annotations

from typing import Sequence

from drivetree.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

TOKEN_URI: str = "https://oauth2.googleapis.com/token"


class ServiceAccountClient:
    """Create service account credentials and Drive API service objects."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    def get_credentials(self, scopes: Sequence[str]):
        """
        Return service account credentials for the given scopes.

        Returns:
            google.oauth2.service_account.Credentials

        Raises:
            AuthError: if the key cannot be loaded.
            InvalidArgumentError: if scopes is invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        from google.oauth2 import service_account

        try:
            return service_account.Credentials.from_service_account_info(
                self._auth_info.to_service_account_info(TOKEN_URI),
                scopes=list(scopes),
            )
        except Exception as exc:
            raise AuthError(
                "Failed to load service account credentials",
                details={"email": self._auth_info.email},
                cause=exc,
            ) from exc

    def build_drive_service(self, scopes: Sequence[str]):
        """
        Build a Drive API service resource that can be used from many threads.

        httplib2.Http is not thread-safe, so every request gets its own
        authorized transport.

        Returns:
            googleapiclient.discovery.Resource
        """
        import google_auth_httplib2
        import httplib2
        from googleapiclient.discovery import build
        from googleapiclient.http import HttpRequest

        creds = self.get_credentials(scopes)

        def request_builder(_http, *args, **kwargs):
            http = google_auth_httplib2.AuthorizedHttp(creds, http=httplib2.Http())
            return HttpRequest(http, *args, **kwargs)

        try:
            return build(
                "drive",
                "v3",
                http=google_auth_httplib2.AuthorizedHttp(creds, http=httplib2.Http()),
                requestBuilder=request_builder,
                cache_discovery=False,
            )
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc
