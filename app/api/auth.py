from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from app.schemas.auth import TokenOut
from app.core.config import settings
from app.core.errors import AppError
from app.core.rate_limit import rate_limit
from app.core.security import create_access_token, verify_password

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenOut, dependencies=[Depends(rate_limit("burst"))])
async def login(form_data: OAuth2PasswordRequestForm = Depends()):
    if (
        not settings.DRIVER_PASSWORD_HASH
        or form_data.username != settings.DRIVER_USERNAME
        or not verify_password(form_data.password, settings.DRIVER_PASSWORD_HASH)
    ):
        raise AppError("Invalid credentials", status_code=400, code="INVALID_CREDENTIALS")

    token = create_access_token(form_data.username)
    return {"access_token": token}
