import re
from dataclasses import dataclass
from datetime import datetime, timezone, timedelta
from jose import jwt, JWTError
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext
from app.core.config import settings
from app.core.errors import AuthenticationError

JWT_ALGORITHM = "HS256"
DRIVER_ROLE = "driver"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except Exception:
        return False

def create_access_token(subject: str, role: str = DRIVER_ROLE, expires_minutes: int | None = None) -> str:
    expires = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire_dt = datetime.now(timezone.utc) + timedelta(minutes=expires)
    to_encode = {"sub": str(subject), "role": role, "exp": expire_dt}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=JWT_ALGORITHM)


@dataclass
class Driver:
    username: str
    role: str = DRIVER_ROLE


async def get_current_driver(token: str = Depends(oauth2_scheme)) -> Driver:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError:
        raise AuthenticationError("Invalid token")
    username = payload.get("sub")
    if username is None or payload.get("role") != DRIVER_ROLE:
        raise AuthenticationError("Invalid token")
    if username != settings.DRIVER_USERNAME:
        raise AuthenticationError("Unknown driver")
    return Driver(username=username)


_SCRIPT_TAG = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_DANGEROUS_TAGS = re.compile(
    r"<(iframe|object|embed)\b[^<]*(?:(?!</\1>)<[^<]*)*</\1>", re.IGNORECASE
)
_SCRIPT_PROTOCOLS = re.compile(r"(javascript|vbscript):|data:text/html|data:application/javascript", re.IGNORECASE)
_EVENT_HANDLERS = re.compile(r"on\w+\s*=", re.IGNORECASE)
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def sanitize_input(value: str, max_length: int = 1000, allow_html: bool = False) -> str:
    """Strip markup that could be replayed into an email or a chat transcript."""
    sanitized = _CONTROL_CHARS.sub("", value.strip())
    if not allow_html:
        sanitized = _SCRIPT_TAG.sub("", sanitized)
        sanitized = _DANGEROUS_TAGS.sub("", sanitized)
        sanitized = _SCRIPT_PROTOCOLS.sub("", sanitized)
        sanitized = _EVENT_HANDLERS.sub("", sanitized)
        sanitized = sanitized.replace("<", "").replace(">", "")
    return sanitized[:max_length].strip()
