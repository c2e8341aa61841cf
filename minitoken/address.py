import re
import logging

from nacl.hash import sha256
from nacl.encoding import RawEncoder, URLSafeBase64Encoder
from nacl.signing import VerifyKey

from minitoken.config import ADDRESS_DIGEST_SIZE, ADDRESS_LENGTH
from minitoken.errors import ParseError

logger = logging.getLogger(__name__)

# Addresses are plain strings; this alias documents intent
Address = str

_ADDRESS_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def _encode(digest: bytes) -> str:
    return URLSafeBase64Encoder.encode(digest).decode().rstrip("=")


def address_from_verify_key(verify_key: VerifyKey) -> Address:
    """Derive the address of an Ed25519 public key: base64url(sha256(key))."""
    digest = sha256(verify_key.encode(), encoder=RawEncoder)
    return _encode(digest)


def parse_address(value) -> Address:
    """
    Validate an address string.

    Accepts only the canonical form: 43 URL-safe base64 characters
    without padding that decode to exactly 32 bytes and re-encode to the
    same text. Raises ParseError otherwise.
    """
    if not isinstance(value, str):
        raise ParseError(f"address must be a string, got {type(value).__name__}")

    if len(value) != ADDRESS_LENGTH:
        raise ParseError(f"address {value!r} must be {ADDRESS_LENGTH} characters long")

    if not _ADDRESS_RE.match(value):
        raise ParseError(f"address {value!r} contains invalid characters")

    try:
        digest = URLSafeBase64Encoder.decode((value + "=").encode())
    except ValueError as e:
        raise ParseError(f"address {value!r} is not valid base64url: {e}")

    if len(digest) != ADDRESS_DIGEST_SIZE or _encode(digest) != value:
        raise ParseError(f"address {value!r} is not canonical")

    return value
