"""Base class for domain entities"""

import uuid
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Generate a string UUID4 primary key"""
    return str(uuid.uuid4())


class BaseModel(SQLModel):
    """Common parent of all persisted domain entities"""
    pass
