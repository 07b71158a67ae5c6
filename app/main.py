import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from app.config import settings
from app.db import init_database
from app.exceptions import (
    BookingConflictError,
    BookingNotCancellableError,
    BookingValidationError,
    PersistenceUnavailableError,
    RoomNotFoundError,
    SettingsNotFoundError,
)
from app.routers import auth, bookings, calendar, init_data, rooms
from app.routers import settings as settings_router


logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI):
    "lifespan for initing database"
    init_database()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Meeting room reservations",
    description="Weekly room calendar, bookings with conflict checking, lookup and cancellation.",
    version="0.1.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
)


@app.exception_handler(BookingValidationError)
def handle_validation_error(_: Request, exc: BookingValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"errors": exc.errors}},
    )


@app.exception_handler(BookingConflictError)
def handle_conflict(_: Request, exc: BookingConflictError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "The selected time is already booked. Please choose another time."},
    )


@app.exception_handler(BookingNotCancellableError)
def handle_not_cancellable(_: Request, exc: BookingNotCancellableError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(RoomNotFoundError)
def handle_room_not_found(_: Request, exc: RoomNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Room not found"})


@app.exception_handler(SettingsNotFoundError)
def handle_settings_not_found(_: Request, exc: SettingsNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Settings not found. Load the initial data via /init-data."},
    )


@app.exception_handler(PersistenceUnavailableError)
def handle_persistence_unavailable(_: Request, exc: PersistenceUnavailableError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "The service is temporarily unavailable. Please try again."},
    )


app.include_router(auth.router)
app.include_router(rooms.router)
app.include_router(settings_router.router)
app.include_router(calendar.router)
app.include_router(bookings.router)
app.include_router(init_data.router)
