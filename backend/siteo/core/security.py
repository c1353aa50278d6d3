from typing import Any

from jose import JWTError, jwt

from siteo.core.config import settings


class TokenDecodeError(Exception):
    pass


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify an agent admin token.

    Tokens are issued by the login service and carry the agent id in ``sub``
    and the website slug in ``slug``. Only verification lives here.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as exc:
        raise TokenDecodeError('Invalid access token') from exc

    if not payload.get('sub') or not payload.get('slug'):
        raise TokenDecodeError('Access token is missing agent claims')
    return payload
