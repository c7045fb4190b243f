import logging

from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.database import get_session
from storefront.dependencies.checkout import get_auth_strategy
from storefront.exceptions import ValidationFailed
from storefront.models.user import User
from storefront.schemas.auth_schemas import OtpRequest, OtpVerifyRequest, Token, UserRead
from storefront.services.auth_strategy import COUNTRY_CODE, AuthStrategy
from storefront.utils.token import get_current_user, issue_access_token
from storefront.utils.validators import validate_phone_number

logger = logging.getLogger(__name__)

router = APIRouter()


def _international(phone: str) -> str:
    validation = validate_phone_number(phone)
    if not validation.valid:
        raise ValidationFailed(validation.errors["phone"], fields=validation.errors)
    return f"{COUNTRY_CODE}{phone}"


@router.post("/otp")
def request_otp(
    data: OtpRequest,
    strategy: AuthStrategy = Depends(get_auth_strategy),
):
    strategy.send_otp(_international(data.phone))
    return {"message": "OTP sent"}


@router.post("/verify", response_model=Token)
def verify_otp(
    data: OtpVerifyRequest,
    session: Session = Depends(get_session),
    strategy: AuthStrategy = Depends(get_auth_strategy),
):
    identity = strategy.verify_otp(_international(data.phone), data.code)

    user = session.get(User, identity.user_id)
    if user is None:
        user = User(id=identity.user_id, phone=identity.phone)
        session.add(user)
        session.commit()
        session.refresh(user)
        logger.info(f"Registered user {user.id}")

    return Token(
        access_token=issue_access_token(user),
        token_type="bearer",
        user=UserRead(id=user.id, phone=user.phone),
    )


@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return UserRead(id=current_user.id, phone=current_user.phone)
