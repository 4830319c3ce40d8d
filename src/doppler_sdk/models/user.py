"""
User model — embedded in activity logs, config logs and audit entries.
"""

from typing import Optional
from pydantic import BaseModel


class User(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    profile_image_url: Optional[str] = None
