from __future__ import annotations

import binascii


def hexlify(data: bytes) -> str:
    return "0x" + bytes(data).hex()


def arrayify(value: str | bytes) -> bytes:
    """
    Convert a hex string (with or without 0x prefix) to bytes.

    Raises:
        ValueError: If the string has odd length or non-hex characters
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raw = value[2:] if value[:2] in ("0x", "0X") else value
    if len(raw) % 2:
        raise ValueError(f"Hex string has odd length: {value!r}")
    try:
        return binascii.unhexlify(raw)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"Invalid hex string: {value!r}") from exc
