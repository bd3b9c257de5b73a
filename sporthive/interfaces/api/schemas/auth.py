"""Authentication related schemas."""

from pydantic import BaseModel

from sporthive.domain.entities import PermissionLevel


class Token(BaseModel):
    access_token: str
    token_type: str
    permission: PermissionLevel
