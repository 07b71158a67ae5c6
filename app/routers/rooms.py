from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.db import get_db
from app.schemas.room import RoomResponse
from app.utils.booking_lifecycle import get_room as load_room, list_rooms


router = APIRouter(
    prefix="/rooms",
    tags=["rooms"],
)


@router.get("/", response_model=List[RoomResponse])
def get_rooms(db: Session = Depends(get_db)):
    """
    Retrieve all meeting rooms in display order.
    """
    return list_rooms(db)


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a specific meeting room by ID.
    """
    return load_room(db, room_id)
