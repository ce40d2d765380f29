import pytest

from tonaddr.utils.ton_address import Address

SAMPLE_RAW = "0:2cf55953e92efbeadab7ba725c3f93a0b23f842cbba72d7b8e6f510a70e422e3"

# Friendly renderings of SAMPLE_RAW.
SAMPLE_TESTNET_BOUNCEABLE = "kQAs9VlT6S776tq3unJcP5Ogsj-ELLunLXuOb1EKcOQi47nL"
SAMPLE_BOUNCEABLE_STD = "EQAs9VlT6S776tq3unJcP5Ogsj+ELLunLXuOb1EKcOQi4wJB"
SAMPLE_BOUNCEABLE = "EQAs9VlT6S776tq3unJcP5Ogsj-ELLunLXuOb1EKcOQi4wJB"
SAMPLE_NON_BOUNCEABLE = "UQAs9VlT6S776tq3unJcP5Ogsj-ELLunLXuOb1EKcOQi41-E"
SAMPLE_TESTNET_NON_BOUNCEABLE = "0QAs9VlT6S776tq3unJcP5Ogsj-ELLunLXuOb1EKcOQi4-QO"

# Friendly renderings of workchains -1 and 1 with a hash of 0x33 bytes.
MASTERCHAIN_BOUNCEABLE = "Ef8zMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzM0vF"
MASTERCHAIN_NON_BOUNCEABLE = "Uf8zMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMxYA"
WORKCHAIN_ONE_BOUNCEABLE = "EQEzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzMzlR"


@pytest.fixture
def sample_hash():
    return bytes.fromhex(SAMPLE_RAW.split(":")[1])


@pytest.fixture
def sample_address(sample_hash):
    return Address(0, sample_hash)


@pytest.fixture
def fill_hash():
    return b"\x33" * 32
