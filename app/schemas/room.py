from app.schemas.base import CamelModel


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    order: int
