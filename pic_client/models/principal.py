"""Principal identity type shared by senders, canisters and subnets."""
import base64
import zlib
from typing import Union

from ..utils.errors import IdentifierDecodeError

MAX_PRINCIPAL_LENGTH = 29  # bytes
CHECKSUM_LENGTH = 4
GROUP_SIZE = 5

ANONYMOUS_TAG = 0x04

class Principal:
    """Immutable binary identity with a checksummed textual form.

    The textual form is the CRC32 (big endian) of the raw bytes followed by
    the raw bytes, base32 encoded in lowercase without padding and grouped
    into chunks of five characters separated by dashes, e.g. ``aaaaa-aa``
    for the management canister.
    """

    __slots__ = ('_bytes',)

    def __init__(self, raw: Union[bytes, bytearray] = b''):
        raw = bytes(raw)
        if len(raw) > MAX_PRINCIPAL_LENGTH:
            raise IdentifierDecodeError(
                f"Principal is {len(raw)} bytes, maximum is {MAX_PRINCIPAL_LENGTH}"
            )
        self._bytes = raw

    @classmethod
    def from_text(cls, text: str) -> 'Principal':
        """Parse the textual form, validating the checksum and grouping."""
        if not isinstance(text, str):
            raise IdentifierDecodeError(f"Principal text must be a string, got {type(text).__name__}")

        compact = text.replace('-', '').upper()
        padding = '=' * (-len(compact) % 8)
        try:
            decoded = base64.b32decode(compact + padding)
        except (ValueError, TypeError) as e:
            raise IdentifierDecodeError(f"Invalid principal text {text!r}: {e}") from e

        if len(decoded) < CHECKSUM_LENGTH:
            raise IdentifierDecodeError(f"Invalid principal text {text!r}: too short")

        principal = cls(decoded[CHECKSUM_LENGTH:])
        if principal.to_text() != text:
            raise IdentifierDecodeError(
                f"Principal text {text!r} is not canonical, expected {principal.to_text()!r}"
            )
        return principal

    @classmethod
    def from_hex(cls, text: str) -> 'Principal':
        """Build a principal from its hex-encoded bytes."""
        from ..codec.ids import hex_decode
        return cls(hex_decode(text))

    @classmethod
    def anonymous(cls) -> 'Principal':
        return cls(bytes([ANONYMOUS_TAG]))

    @classmethod
    def management_canister(cls) -> 'Principal':
        return cls(b'')

    def to_text(self) -> str:
        checksum = zlib.crc32(self._bytes).to_bytes(CHECKSUM_LENGTH, 'big')
        encoded = base64.b32encode(checksum + self._bytes).decode('ascii')
        encoded = encoded.rstrip('=').lower()
        groups = [encoded[i:i + GROUP_SIZE] for i in range(0, len(encoded), GROUP_SIZE)]
        return '-'.join(groups)

    def to_hex(self) -> str:
        return self._bytes.hex().upper()

    def to_bytes(self) -> bytes:
        return self._bytes

    def is_anonymous(self) -> bool:
        return self._bytes == bytes([ANONYMOUS_TAG])

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)

    def __eq__(self, other) -> bool:
        if isinstance(other, Principal):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Principal, self._bytes))

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Principal({self.to_text()!r})"
