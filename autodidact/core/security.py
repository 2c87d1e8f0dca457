"""Password hashing and session cookie signing (session-based auth)."""
import base64
import hmac
import hashlib
import time

from passlib.context import CryptContext

from autodidact.core.config import get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


# Session token: base64(user_id:timestamp).hmac
def _signature(payload: bytes) -> str:
    settings = get_settings()
    return hmac.new(settings.secret_key.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def create_session_token(user_id: int) -> str:
    """Create a signed session token for the user (for auth cookie)."""
    payload = f"{user_id}:{int(time.time())}".encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=") + "." + _signature(payload)


def verify_session_token(token: str | None) -> int | None:
    """Verify signed token and return user_id if valid; None otherwise."""
    if not token or "." not in token:
        return None
    try:
        encoded, sig = token.rsplit(".", 1)
        pad = 4 - len(encoded) % 4
        if pad != 4:
            encoded += "=" * pad
        payload = base64.urlsafe_b64decode(encoded)
        if not hmac.compare_digest(_signature(payload), sig):
            return None
        user_part, ts_part = payload.decode("utf-8").split(":", 1)
        user_id = int(user_part)
        ts = int(ts_part)
    except (ValueError, UnicodeDecodeError):
        return None
    # token outlives the cookie only if the clock moved
    if abs(time.time() - ts) > get_settings().auth_cookie_max_age:
        return None
    return user_id
