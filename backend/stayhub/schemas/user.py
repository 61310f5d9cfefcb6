# stayhub/schemas/user.py
from typing import Optional
from pydantic import BaseModel, EmailStr


class GuestInfo(BaseModel):
    """
    What an owner may see about a guest on a reservation.
    Keep this to contact details only.
    """
    id: int
    name: str
    email: EmailStr
    mobile: Optional[str] = None

    model_config = {"from_attributes": True}
