from pydantic import BaseModel
from app.schemas.base import CamelModel


class AdminLogin(BaseModel):
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class DashboardResponse(CamelModel):
    room_count: int
    booking_count: int
    upcoming_booking_count: int
    message: str
