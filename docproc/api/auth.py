"""
HTTP Basic authentication.

Credentials are compared against the configured user name and password.
"""

from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

REALM = "DocumentProcessorApi"

security = HTTPBasic(realm=REALM, auto_error=False)


def require_user(
    request: Request,
    credentials: Annotated[HTTPBasicCredentials | None, Depends(security)],
) -> str:
    """
    Dependency that returns the authenticated user name.

    Raises:
        HTTPException: 401 with a Basic challenge if credentials are missing or wrong
    """
    settings = request.app.state.settings

    if credentials is None or not _matches(credentials, settings.username, settings.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Username or Password.",
            headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
        )
    return credentials.username


def _matches(credentials: HTTPBasicCredentials, username: str, password: str) -> bool:
    user_ok = secrets.compare_digest(credentials.username.encode("utf-8"), username.encode("utf-8"))
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), password.encode("utf-8")
    )
    return user_ok and password_ok
