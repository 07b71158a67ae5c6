from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.models.booking import Booking
from app.schemas.auth import AdminLogin, DashboardResponse, Token
from app.utils.auth import ADMIN_SUBJECT, create_access_token, get_current_admin, verify_password
from app.utils.booking_lifecycle import count_upcoming_bookings, database_errors, get_booking_settings, list_rooms
from app.utils.clock import get_now
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


@router.post("/auth/login", response_model=Token)
def login(credentials: AdminLogin, db: Session = Depends(get_db)):
    """
    Placeholder admin login: checks the shared admin password and returns a bearer token.
    """
    booking_settings = get_booking_settings(db)
    if not verify_password(credentials.password, booking_settings.admin_password_hash):
        logger.warning("Rejected admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token({"sub": ADMIN_SUBJECT}))


@router.get("/admin/dashboard", response_model=DashboardResponse)
def dashboard(
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
    current_admin: dict = Depends(get_current_admin),
):
    """
    Placeholder dashboard with booking totals. Requires the admin token.
    """
    rooms = list_rooms(db)
    with database_errors(db, "counting bookings"):
        booking_count = db.query(Booking).count()
    upcoming_count = count_upcoming_bookings(db, now)
    logger.debug(f"Dashboard for {current_admin['username']}: {booking_count} bookings")
    return DashboardResponse(
        room_count=len(rooms),
        booking_count=booking_count,
        upcoming_booking_count=upcoming_count,
        message="Booking list, room management and settings are not available yet",
    )
