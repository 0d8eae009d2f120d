import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fitcoach.database import get_db
from fitcoach.crud import user_profile as crud_profile
from fitcoach.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Login"])


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Phone + PIN login for profiles created with both. Answers with the
    user id every other endpoint is keyed by.
    """
    phone_number = (request.phone_number or "").strip()
    if not phone_number or not request.pin:
        raise HTTPException(status_code=400, detail="Phone number and PIN are required")

    profile = crud_profile.authenticate(db, phone_number, request.pin)
    if not profile:
        logger.warning(f"Failed login attempt for phone ending {phone_number[-4:]}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid phone number or PIN")

    return LoginResponse(user_id=profile.id, language=profile.language)
