"""Bearer token verification for the HTTP layer."""

import logging

from authlib.jose import JoseError, jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from folio.config import JWT_ALGORITHM, JWT_SECRET

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def verify_token(token: str, key: str = JWT_SECRET) -> dict:
    claims = jwt.decode(token, key)
    if claims.header.get("alg") != JWT_ALGORITHM:
        raise JoseError("Disallowed JWT algorithm")
    claims.validate()
    return dict(claims)


async def get_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing Bearer token")
    try:
        return verify_token(credentials.credentials)
    except JoseError as exc:
        logger.debug("Token rejected: %s", exc)
        raise HTTPException(status_code=401, detail="Invalid token") from exc
