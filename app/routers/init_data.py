from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.utils.seed import seed_initial_data


router = APIRouter(tags=["development"])


@router.post("/init-data", status_code=status.HTTP_200_OK)
def init_data(db: Session = Depends(get_db)):
    """
    Seed the default rooms and settings. Intended for development; run once.
    """
    created = seed_initial_data(db)
    return {"message": "Initial data is in place", "created": created}
