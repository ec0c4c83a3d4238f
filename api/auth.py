# api/auth.py
"""Caller identity from an optional bearer token.

Tokens are HS256 JSON Web Tokens signed with ``JWT_SECRET``; the ``sub``
claim is the caller ID. Requests without a usable token are served as an
anonymous caller rather than rejected.
"""

import base64
import hmac
import json
import logging
import time
from typing import Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core import config

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _encode_segment(claims: Dict) -> str:
    """JSON-encode a header or payload as an unpadded base64url token segment."""
    raw = json.dumps(claims, separators=(',', ':')).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decode_segment(segment: str) -> bytes:
    # base64url segments are sent without '=' padding
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _signature(header_segment: str, payload_segment: str, secret: str) -> bytes:
    signing_input = f"{header_segment}.{payload_segment}".encode("ascii")
    return hmac.digest(secret.encode("utf-8"), signing_input, "sha256")


def create_access_token(subject: str, expires_in: int = 3600, secret: Optional[str] = None) -> str:
    """Create a signed token for ``subject`` valid for ``expires_in`` seconds."""
    header_segment = _encode_segment({"alg": "HS256", "typ": "JWT"})
    payload_segment = _encode_segment({"sub": subject, "exp": int(time.time()) + expires_in})
    signature = _signature(header_segment, payload_segment, secret or config.JWT_SECRET)
    signature_segment = base64.urlsafe_b64encode(signature).decode("ascii").rstrip("=")
    return ".".join((header_segment, payload_segment, signature_segment))


def decode_access_token(token: str, secret: Optional[str] = None) -> Optional[Dict]:
    """Verify a token and return its claims, or None if it is unusable.

    Checks the structure, the HS256 signature and, when present, ``exp``.
    """
    segments = token.split('.')
    if len(segments) != 3:
        return None
    header_segment, payload_segment, signature_segment = segments
    try:
        header = json.loads(_decode_segment(header_segment))
        claims = json.loads(_decode_segment(payload_segment))
        signature = _decode_segment(signature_segment)
        expected = _signature(header_segment, payload_segment, secret or config.JWT_SECRET)
    except (ValueError, UnicodeError):
        return None

    if not isinstance(header, dict) or header.get("alg") != "HS256":
        return None
    if not hmac.compare_digest(expected, signature):
        return None
    if not isinstance(claims, dict):
        return None
    exp = claims.get("exp")
    if exp is not None and (not isinstance(exp, (int, float)) or exp < time.time()):
        return None
    return claims


def get_caller_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """FastAPI dependency returning the caller ID, or None for anonymous callers."""
    if credentials is None:
        return None
    claims = decode_access_token(credentials.credentials)
    if claims is None:
        logger.debug("Ignoring unusable bearer token")
        return None
    sub = claims.get("sub")
    return str(sub) if sub is not None else None
