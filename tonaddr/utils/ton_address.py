import base64
import binascii
import logging
import re
from typing import Optional, Union

from pydantic import BaseModel

from tonaddr.errors import (
    ChecksumMismatch,
    InvalidFriendlyLength,
    InvalidHashLength,
    MalformedRaw,
    UnknownAddressFormat,
    WorkchainOutOfRange,
)
from tonaddr.schemas import AddressFormatOptions
from tonaddr.utils.crc import crc16

logger = logging.getLogger(__name__)

BOUNCEABLE_TAG = 0x11
NON_BOUNCEABLE_TAG = 0x51
TEST_FLAG = 0x80

MASTERCHAIN = -1
HASH_LENGTH = 32
FRIENDLY_LENGTH = 36
FRIENDLY_TEXT_LENGTH = 48

# Both checks below look for a matching substring, not a full match.
# The binary parse after them is what rejects malformed input.
_FRIENDLY_CHARS = re.compile(r'[A-Za-z0-9+/_-]+')
_RAW_HASH = re.compile(r'[a-f0-9]{64}', re.IGNORECASE)
_WORKCHAIN = re.compile(r'[+-]?[0-9]+')

BytesLike = Union[bytes, bytearray, memoryview]


class Address:
    """A TON account address: a workchain id plus a 32-byte account hash.

    Instances are immutable. Bounceable and test-only flags belong to the
    friendly text form only, so two friendly strings that differ in those
    flags parse to equal addresses.
    """

    __slots__ = ('_workchain', '_hash')

    def __init__(self, workchain: int, hash: BytesLike):
        if isinstance(workchain, bool) or not isinstance(workchain, int):
            raise TypeError(f"workchain must be int, got {type(workchain).__name__}")
        if not isinstance(hash, (bytes, bytearray, memoryview)):
            raise TypeError(f"hash must be bytes, got {type(hash).__name__}")

        hash = bytes(hash)
        if len(hash) != HASH_LENGTH:
            raise InvalidHashLength(len(hash))

        object.__setattr__(self, '_workchain', workchain)
        object.__setattr__(self, '_hash', hash)

    @property
    def workchain(self) -> int:
        return self._workchain

    @property
    def hash(self) -> bytes:
        return self._hash

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._workchain, self._hash))

    def __eq__(self, other):
        if not isinstance(other, Address):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash((self._workchain, self._hash))

    def __repr__(self):
        return f"Address('{self.to_raw_string()}')"

    def __str__(self):
        return self.to_string()

    @staticmethod
    def is_address(source) -> bool:
        return isinstance(source, Address)

    @staticmethod
    def is_friendly(source: str) -> bool:
        return len(source) == FRIENDLY_TEXT_LENGTH and _FRIENDLY_CHARS.search(source) is not None

    @staticmethod
    def is_raw(source: str) -> bool:
        if ':' not in source:
            return False

        wc, hash_part = source.split(':')[:2]

        return _WORKCHAIN.fullmatch(wc) is not None and _RAW_HASH.search(hash_part) is not None

    @classmethod
    def normalize(cls, source: Union[str, 'Address']) -> str:
        if isinstance(source, str):
            return cls.parse(source).to_raw_string()
        if isinstance(source, Address):
            return source.to_raw_string()
        raise TypeError(f"Cannot normalize {type(source).__name__}")

    @classmethod
    def parse(cls, source: str) -> 'Address':
        if cls.is_friendly(source):
            return cls.parse_friendly(source).address
        elif cls.is_raw(source):
            return cls.parse_raw(source)
        raise UnknownAddressFormat(source)

    @classmethod
    def parse_raw(cls, source: str) -> 'Address':
        parts = source.split(':')
        if len(parts) < 2:
            raise MalformedRaw(f"Missing ':' separator in raw address: {source}")

        wc, hash_hex = parts[0], parts[1]
        if _WORKCHAIN.fullmatch(wc) is None:
            raise MalformedRaw(f"Workchain is not an integer: {wc!r}")

        try:
            hash_bytes = binascii.unhexlify(hash_hex)
        except ValueError as e:
            raise MalformedRaw(f"Hash is not valid hex: {e}") from e

        return cls(int(wc), hash_bytes)

    @classmethod
    def parse_friendly(cls, source: Union[str, BytesLike]) -> 'FriendlyAddress':
        if isinstance(source, str):
            try:
                data = base64.b64decode(source.replace('-', '+').replace('_', '/'))
            except ValueError as e:
                raise InvalidFriendlyLength(
                    f"Unknown address type: cannot decode base64 to {FRIENDLY_LENGTH} bytes ({e})"
                ) from e
        else:
            data = bytes(source)

        if len(data) != FRIENDLY_LENGTH:
            raise InvalidFriendlyLength(
                f"Unknown address type: byte length is not equal to {FRIENDLY_LENGTH} (got {len(data)})"
            )

        addr = data[:34]
        crc = data[34:]
        if crc16(addr) != crc:
            raise ChecksumMismatch(f"Invalid checksum: {crc.hex()} != {crc16(addr).hex()}")

        tag = addr[0]
        is_test_only = (tag & TEST_FLAG) != 0
        is_bounceable = (tag & ~TEST_FLAG) == BOUNCEABLE_TAG
        if (tag & ~TEST_FLAG) not in (BOUNCEABLE_TAG, NON_BOUNCEABLE_TAG):
            logger.warning(f"Unrecognized address tag 0x{tag:02x}, treating as non-bounceable")

        workchain = MASTERCHAIN if addr[1] == 0xff else addr[1]

        return FriendlyAddress(
            address=cls(workchain, addr[2:34]),
            is_bounceable=is_bounceable,
            is_test_only=is_test_only,
        )

    def to_raw_string(self) -> str:
        return f"{self._workchain}:{self._hash.hex()}"

    def equals(self, other: 'Address') -> bool:
        return other.workchain == self._workchain and other.hash == self._hash

    def to_string_buffer(
        self,
        test_only: bool = False,
        bounceable: bool = True,
        options: Optional[AddressFormatOptions] = None
    ) -> bytes:
        if options is not None:
            test_only = options.test_only
            bounceable = options.bounceable

        tag = BOUNCEABLE_TAG if bounceable else NON_BOUNCEABLE_TAG
        if test_only:
            tag |= TEST_FLAG

        addr = bytes([tag, self._workchain_byte()]) + self._hash
        return addr + crc16(addr)

    def to_string(
        self,
        test_only: bool = False,
        bounceable: bool = True,
        url_safe: bool = True,
        options: Optional[AddressFormatOptions] = None
    ) -> str:
        if options is not None:
            url_safe = options.url_safe

        buffer = self.to_string_buffer(test_only=test_only, bounceable=bounceable, options=options)

        if url_safe:
            return base64.urlsafe_b64encode(buffer).decode('utf-8')
        return base64.b64encode(buffer).decode('utf-8')

    def _workchain_byte(self) -> int:
        if self._workchain == MASTERCHAIN:
            return 0xff
        if 0 <= self._workchain < 0xff:
            return self._workchain
        raise WorkchainOutOfRange(self._workchain)


class FriendlyAddress(BaseModel):
    address: Address
    is_bounceable: bool
    is_test_only: bool

    class Config:
        arbitrary_types_allowed = True
        frozen = True
