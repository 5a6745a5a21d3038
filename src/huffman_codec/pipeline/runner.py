from dataclasses import dataclass
from typing import Optional

from huffman_codec.coding.huffman import HuffmanEncoded, huffman_decode, huffman_encode
from huffman_codec.pipeline.config import CodecConfig
from huffman_codec.utils.bits_bytes_utils import pack_bits, unpack_bits


@dataclass
class RoundTripResult:
    """
    Outcome of encoding a text and decoding it again.

    - encoded: session container, None for empty text
    - packed: the bitstring packed into bytes, as it would be stored
    - pad_bits: zero bits appended to fill the last byte of `packed`
    - decoded: text recovered from the packed bytes
    """
    encoded: Optional[HuffmanEncoded]
    packed: bytes
    pad_bits: int
    decoded: str

    @property
    def bits(self) -> str:
        return self.encoded.bits if self.encoded is not None else ""


def encode_decode_text(text: str, cfg: Optional[CodecConfig] = None) -> RoundTripResult:
    """
    Encode text, pack the bits into bytes, unpack them and decode.
    Empty text round-trips to empty text without building a tree.
    """
    if cfg is None:
        cfg = CodecConfig()
    if not text:
        return RoundTripResult(encoded=None, packed=b"", pad_bits=0, decoded="")

    enc = huffman_encode(text, cfg)
    packed, pad_bits = pack_bits(enc.bits)

    recovered = HuffmanEncoded(
        bits=unpack_bits(packed, pad_bits),
        tree=enc.tree,
        table=enc.table,
        symbol_count=enc.symbol_count,
    )
    decoded = huffman_decode(recovered)
    return RoundTripResult(encoded=enc, packed=packed, pad_bits=pad_bits, decoded=decoded)
