"""Credential primitives: bearer tokens and password hashes.

Everything here is a pure function of its arguments. The signing secret is
always passed in by the caller, and malformed input is reported as ``None`` or
``False`` rather than raised, so the HTTP layer decides how to answer.

Token wire format::

    base64url(header).base64url(payload).base64url(hmac_sha256(header.payload))

Password storage format::

    <salt-hex>:<pbkdf2-sha256-key-hex>
"""

import hmac
import secrets
import time

from jose import JWTError, jwk, jwt
from jose.constants import ALGORITHMS
from jose.utils import base64url_encode
from passlib.crypto.digest import pbkdf2_hmac

TOKEN_ALGORITHM = ALGORITHMS.HS256
TOKEN_TTL_SECONDS = 60 * 60 * 24 * 7

PBKDF2_HASH = "sha256"
PBKDF2_ITERATIONS = 100_000
PBKDF2_KEY_BYTES = 32
SALT_BYTES = 16

# sub is the numeric user id, which jose would otherwise reject as a non-string
_DECODE_OPTIONS = {"require_exp": True, "require_sub": True, "verify_sub": False}


def create_token(user_id: int, secret: str, issued_at: int | None = None) -> str:
    """Create a signed bearer token for a user, valid for seven days."""
    iat = int(time.time()) if issued_at is None else issued_at
    claims = {
        "sub": user_id,
        "iat": iat,
        "exp": iat + TOKEN_TTL_SECONDS,
    }
    return jwt.encode(claims, secret, algorithm=TOKEN_ALGORITHM)


def _sign(signing_input: str, secret: str) -> str:
    key = jwk.construct(secret, TOKEN_ALGORITHM)
    return base64url_encode(key.sign(signing_input.encode("utf-8"))).decode("ascii")


def verify_token(token: str, secret: str) -> int | None:
    """Return the user id carried by a valid token, or None.

    The signature segment must match the canonical encoding exactly, so a
    token differing in any single character never verifies.
    """
    parts = token.split(".")
    if len(parts) != 3 or not all(parts):
        return None

    header, payload, signature = parts
    expected = _sign(f"{header}.{payload}", secret)
    if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
        return None

    try:
        claims = jwt.decode(
            token, secret, algorithms=[TOKEN_ALGORITHM], options=_DECODE_OPTIONS
        )
    except JWTError:
        return None

    user_id = claims["sub"]
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        return None
    return user_id


def _derive_key(password: str, salt: bytes) -> bytes:
    return pbkdf2_hmac(
        PBKDF2_HASH, password.encode("utf-8"), salt, PBKDF2_ITERATIONS, PBKDF2_KEY_BYTES
    )


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    salt = secrets.token_bytes(SALT_BYTES)
    return f"{salt.hex()}:{_derive_key(password, salt).hex()}"


def verify_password(password: str, stored: str) -> bool:
    """Verify a password against its stored ``salt:key`` hash."""
    fields = stored.split(":")
    if len(fields) != 2 or not all(fields):
        return False

    salt_hex, key_hex = fields
    try:
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False

    computed = _derive_key(password, salt).hex()
    return hmac.compare_digest(computed.encode("ascii"), key_hex.encode("utf-8"))
