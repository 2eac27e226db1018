from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Depends, Header

from normref.core.config import Settings, get_settings
from normref.core.exceptions import AuthError, ConfigError


def require_internal_key(
    x_internal_key: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Check the shared secret sent by internal callers.

    Without a configured key every request is refused, unless unauthenticated
    access was switched on explicitly for local development.
    """
    if not settings.internal_ingest_key:
        if settings.allow_unauth_ingest:
            return
        raise ConfigError("Server misconfigured")
    if not x_internal_key or not secrets.compare_digest(
        x_internal_key.encode("utf-8"), settings.internal_ingest_key.encode("utf-8")
    ):
        raise AuthError("Unauthorized")
