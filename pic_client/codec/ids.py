"""Text encodings for identifiers and opaque blobs on the wire."""
import base64
import binascii
import re
from typing import Union

from ..models.principal import Principal
from ..utils.errors import IdentifierDecodeError

_HEX_RE = re.compile(r'[0-9a-fA-F]*')

def base64_encode(data: Union[bytes, bytearray]) -> str:
    """Encode bytes as standard padded base64."""
    return base64.b64encode(bytes(data)).decode('ascii')

def base64_decode(text: str) -> bytes:
    """Decode standard base64, rejecting anything outside the alphabet."""
    if not isinstance(text, str):
        raise IdentifierDecodeError(f"Expected base64 text, got {type(text).__name__}")
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise IdentifierDecodeError(f"Invalid base64 {text!r}: {e}") from e

def hex_encode(data: Union[bytes, bytearray]) -> str:
    return bytes(data).hex()

def hex_decode(text: str) -> bytes:
    """Decode hex text. Odd lengths and non-hex characters are rejected."""
    if not isinstance(text, str):
        raise IdentifierDecodeError(f"Expected hex text, got {type(text).__name__}")
    if len(text) % 2 != 0:
        raise IdentifierDecodeError(f"Invalid hex {text!r}: odd length")
    if not _HEX_RE.fullmatch(text):
        raise IdentifierDecodeError(f"Invalid hex {text!r}: non-hex character")
    return bytes.fromhex(text)

def encode_id(principal: Union[Principal, bytes]) -> str:
    """Encode an identity for the wire (base64 of its raw bytes)."""
    return base64_encode(bytes(principal))

def decode_id(text: str) -> Principal:
    """Inverse of encode_id."""
    return Principal(base64_decode(text))
