# Standard library imports
import hashlib
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


GRAVATAR_URL = "https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def hash_password(plain_password: str) -> str:
    """Hash a plain password using bcrypt (12 rounds)"""
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a bcrypt hash.
    
    A malformed stored hash counts as a mismatch rather than an error.
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def gravatar_url(email: str) -> str:
    """Build the default avatar URL for an email address"""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return GRAVATAR_URL.format(digest=digest)


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a signed access token.
    
    Args:
        payload: Token claims (e.g. ``sub`` and ``email``)
        
    Returns:
        Encoded JWT carrying the claims plus ``iat``/``exp``
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + settings.access_token_expire_minutes * 60
    
    return jwt.encode(
        {**payload, "iat": issued_at, "exp": expires_at},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token
    
    Raises:
        ValueError: If the token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
