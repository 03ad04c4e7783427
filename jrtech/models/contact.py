from pydantic import BaseModel
from typing import Optional


class ContactSubmission(BaseModel):
    # Optional at parse time; the endpoint rejects missing or empty values
    email: Optional[str] = None
    message: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.email) and bool(self.message)


class ContactResponse(BaseModel):
    success: bool
    message: str
