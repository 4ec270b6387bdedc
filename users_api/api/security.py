# api/security.py
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

UNAUTHORIZED_MESSAGE = "Unauthorized. Invalid token."

# Только для описания схемы bearerAuth в OpenAPI; проверку делаем сами
bearer_scheme = HTTPBearer(scheme_name="bearerAuth", bearerFormat="JWT", auto_error=False)


def require_token(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
):
    """Пропускает запрос только при точном совпадении заголовка Authorization."""
    expected = f"Bearer {request.app.state.settings.API_TOKEN}"
    if request.headers.get("authorization") != expected:
        logging.warning(f"Rejected token for {request.method} {request.url.path}")
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_MESSAGE)
