from typing import Optional
from fitcoach.schemas.base import CamelModel


class LoginRequest(CamelModel):
    # Both optional so a missing field is a 400 from the route, not a 422
    phone_number: Optional[str] = None
    pin: Optional[str] = None


class LoginResponse(CamelModel):
    user_id: int
    language: Optional[str] = None
