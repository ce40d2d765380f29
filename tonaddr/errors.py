class AddressError(ValueError):
    pass


class InvalidHashLength(AddressError):
    def __init__(self, length: int):
        super().__init__(f"Invalid address hash length: {length}")
        self.length = length


class UnknownAddressFormat(AddressError):
    def __init__(self, source: str):
        super().__init__(f"Unknown address type: {source}")
        self.source = source


class InvalidFriendlyLength(AddressError):
    pass


class ChecksumMismatch(AddressError):
    pass


class MalformedRaw(AddressError):
    pass


class WorkchainOutOfRange(AddressError):
    def __init__(self, workchain: int):
        super().__init__(f"Workchain {workchain} does not fit in a single byte")
        self.workchain = workchain
