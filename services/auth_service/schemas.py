from typing import Optional

from pydantic import BaseModel


class CurrentUser(BaseModel):
    """Identity resolved from the session cookie for one request."""
    username: str
    user_id: Optional[int] = None


class AuthFormPage(BaseModel):
    error: str = ""
    form_username: str = ""
