# ticket_system/core/schemas.py
from pydantic import BaseModel


class MessageOut(BaseModel):
    message: str
