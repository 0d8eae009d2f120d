from typing import Optional
from sqlalchemy.orm import Session
from fitcoach.models.user_profile import UserProfile
from fitcoach.schemas.plan import OnboardingRequest, ProfileUpdate
from fitcoach.utils.security import hash_pin, verify_pin


def get_profile(db: Session, user_id: int) -> Optional[UserProfile]:
    return db.query(UserProfile).filter(UserProfile.id == user_id).first()


def get_by_phone(db: Session, phone_number: str) -> Optional[UserProfile]:
    return db.query(UserProfile).filter(UserProfile.phone_number == phone_number).first()


def create_profile(db: Session, data: OnboardingRequest) -> UserProfile:
    fields = data.model_dump(exclude={"pin"})
    if data.pin:
        fields["pin_hash"] = hash_pin(data.pin)
    profile = UserProfile(**fields)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def authenticate(db: Session, phone_number: str, pin: str) -> Optional[UserProfile]:
    """The profile registered with this phone and PIN, else None."""
    profile = get_by_phone(db, phone_number)
    if not profile or not profile.pin_hash:
        return None
    return profile if verify_pin(pin, profile.pin_hash) else None


def update_profile(db: Session, profile: UserProfile, data: ProfileUpdate) -> UserProfile:
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(profile, key, value)
    db.commit()
    db.refresh(profile)
    return profile
