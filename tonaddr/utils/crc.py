CRC16_POLY = 0x1021


def crc16(data: bytes) -> bytes:
    """CRC-16/XMODEM of ``data`` as two big-endian bytes."""
    reg = 0
    message = bytes(data) + b'\x00\x00'

    for byte in message:
        mask = 0x80
        while mask > 0:
            reg <<= 1
            if byte & mask:
                reg += 1
            mask >>= 1

            if reg > 0xffff:
                reg &= 0xffff
                reg ^= CRC16_POLY

    return reg.to_bytes(2, byteorder='big')
