from dataclasses import dataclass
from typing import Any, List, Optional

from .base import RowMixin


@dataclass
class Freelancer(RowMixin):
    TABLE = "freelancers"

    id: str
    user_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_links: Optional[List[Any]] = None
    professional_title: Optional[str] = None
    about: Optional[str] = None
    profile_image: Optional[str] = None
    profile_completion: Optional[int] = None
    services: Optional[List[str]] = None
    skills: Optional[List[dict]] = None
    work_experiences: Optional[List[dict]] = None
    education: Optional[List[dict]] = None
    certifications: Optional[List[dict]] = None
    languages: Optional[List[dict]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.full_name:
            return self.full_name
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
