from typing import Tuple


def _check_bits(bits: str) -> None:
    if not set(bits).issubset({"0", "1"}):
        raise ValueError("Expected a bitstring containing only '0' and '1'.")


def bytes_to_bitstring(data: bytes) -> str:
    """Convert bytes -> bitstring (8 bits per byte, MSB first)."""
    return "".join(f"{byte:08b}" for byte in data)


def bitstring_to_bytes(bits: str) -> bytes:
    """
    Convert bitstring -> bytes.

    Length must be a multiple of 8.
    """
    _check_bits(bits)
    if len(bits) % 8 != 0:
        raise ValueError(
            f"Bitstring length must be multiple of 8, got {len(bits)}"
        )
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def pack_bits(bits: str) -> Tuple[bytes, int]:
    """
    Pack a bitstring of any length into bytes.

    The last byte is filled with zero bits; returns (packed_bytes, pad_bits).
    """
    _check_bits(bits)
    pad_bits = (8 - len(bits) % 8) % 8
    return bitstring_to_bytes(bits + "0" * pad_bits), pad_bits


def unpack_bits(data: bytes, pad_bits: int) -> str:
    """Reverse of `pack_bits`: drop the trailing `pad_bits` filler bits."""
    if not 0 <= pad_bits <= 7:
        raise ValueError(f"pad_bits must be between 0 and 7, got {pad_bits}")
    if pad_bits and not data:
        raise ValueError("pad_bits given for empty data")
    bits = bytes_to_bitstring(data)
    return bits[:len(bits) - pad_bits]
