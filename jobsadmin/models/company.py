from dataclasses import dataclass
from typing import Optional

from .base import RowMixin


@dataclass
class Company(RowMixin):
    """An employer row from the ``employers`` table."""

    TABLE = "employers"
    COLUMN_MAP = {"name": "company_name"}

    id: str
    company_name: str = ""
    user_id: Optional[str] = None
    tin: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    business_licence: Optional[str] = None
    established_date: Optional[str] = None
    business_description: Optional[str] = None
    website: Optional[str] = None
    is_owner: Optional[bool] = None
    is_verified: Optional[bool] = None
    request_verify: Optional[bool] = None
    hiring_rate: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        self.request_verify = bool(self.request_verify)

    @property
    def is_requesting_verification(self) -> bool:
        return self.request_verify is True and self.is_verified is False
