import logging
from tonaddr.config import settings
from tonaddr.utils.ton_address import Address

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


def main():
    address = Address.parse_raw(settings.demo_address)
    logger.info(f"Parsed demo address {address.to_raw_string()}")

    print(address.to_string(test_only=True))
    print(address.to_string(test_only=False, bounceable=True, url_safe=False))


if __name__ == "__main__":
    main()
