import logging
from tonaddr.errors import AddressError
from tonaddr.schemas import AddressConvertRequest, AddressConvertResponse
from tonaddr.utils.ton_address import Address

logger = logging.getLogger(__name__)


def convert_address(request: AddressConvertRequest) -> AddressConvertResponse:
    source = request.address.strip()

    is_bounceable = None
    is_test_only = None
    if Address.is_friendly(source):
        parsed = Address.parse_friendly(source)
        address = parsed.address
        is_bounceable = parsed.is_bounceable
        is_test_only = parsed.is_test_only
    else:
        address = Address.parse(source)

    return AddressConvertResponse(
        original=request.address,
        raw=address.to_raw_string(),
        friendly_bounceable=address.to_string(bounceable=True, test_only=bool(is_test_only)),
        friendly_non_bounceable=address.to_string(bounceable=False, test_only=bool(is_test_only)),
        normalized=Address.normalize(address),
        is_bounceable=is_bounceable,
        is_test_only=is_test_only
    )


def is_valid_address(address: str) -> bool:
    if not address:
        return False

    try:
        Address.parse(address.strip())
        return True
    except AddressError as e:
        logger.debug(f"Invalid address {address}: {e}")
        return False
