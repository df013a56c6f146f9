"""Resolve the authenticated caller to a stored user."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.config import IDENTITY_CLAIM
from folio.errors import IdentityNotFound
from folio.models import User

logger = logging.getLogger(__name__)


# Claims a caller can be identified by, and the user column each one matches.
CLAIM_COLUMNS = {
    "email": User.email,
    "sub": User.id,
}


def check_identity_claim(claim_name: str = IDENTITY_CLAIM) -> None:
    if claim_name not in CLAIM_COLUMNS:
        raise ValueError(
            f"Unsupported identity claim {claim_name!r}; expected one of {sorted(CLAIM_COLUMNS)}"
        )


async def find_user_by_claim_value(
    session: AsyncSession, value: str, claim_name: str = IDENTITY_CLAIM
) -> User | None:
    check_identity_claim(claim_name)
    result = await session.execute(select(User).where(CLAIM_COLUMNS[claim_name] == value))
    return result.scalar_one_or_none()


async def resolve_user_id(
    session: AsyncSession,
    claims: Mapping[str, Any],
    claim_name: str = IDENTITY_CLAIM,
) -> str:
    """Map the caller's verified claims to a user id.

    The caller has already passed token verification, so a missing claim or
    unknown user is a configuration problem and is not retried.
    """
    value = claims.get(claim_name)
    if not value:
        logger.warning("Token has no %r claim", claim_name)
        raise IdentityNotFound(f"Token has no '{claim_name}' claim")

    user = await find_user_by_claim_value(session, value, claim_name)
    if user is None:
        logger.warning("No user matches %s=%s", claim_name, value)
        raise IdentityNotFound()
    return user.id
