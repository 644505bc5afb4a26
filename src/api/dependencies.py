"""FastAPI dependencies for the authenticated principal."""

import logging
from typing import Annotated, Optional

from fastapi import Header

from src.domain.principal import Principal, Role

logger = logging.getLogger(__name__)


async def get_principal(
    x_principal_role: Annotated[Optional[str], Header()] = None,
    x_tenant_id: Annotated[Optional[str], Header()] = None,
    x_contractor_id: Annotated[Optional[str], Header()] = None,
) -> Optional[Principal]:
    """
    Principal asserted by the upstream authentication layer.

    Returns None (unauthenticated) when the role is missing or unknown, when
    the tenant is missing, or when a contractor principal has no contractor id.
    """
    if not x_principal_role or not x_tenant_id:
        return None

    try:
        role = Role(x_principal_role)
    except ValueError:
        logger.warning(f"Rejected unknown principal role {x_principal_role!r}")
        return None

    if role == Role.CONTRACTOR and not x_contractor_id:
        return None

    return Principal(
        role=role,
        tenant_id=x_tenant_id,
        contractor_id=x_contractor_id if role == Role.CONTRACTOR else None,
    )
