"""Utility helpers shared across pipeline components."""

from huffman_codec.utils.bits_bytes_utils import (
    bitstring_to_bytes,
    bytes_to_bitstring,
    pack_bits,
    unpack_bits,
)
from huffman_codec.utils.debug import dbg

__all__ = [
    "bitstring_to_bytes",
    "bytes_to_bitstring",
    "pack_bits",
    "unpack_bits",
    "dbg",
]
