from huffman_codec.pipeline.config import CodecConfig


def encode_decode_text(*args, **kwargs):
    # Lazy import so importing `huffman_codec.pipeline.config` from the coding
    # modules doesn't import them back in a cycle.
    from huffman_codec.pipeline.runner import encode_decode_text as _encode_decode_text

    return _encode_decode_text(*args, **kwargs)


def run_batch_on_folder(*args, **kwargs):
    from huffman_codec.utils.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "CodecConfig",
    "encode_decode_text",
    "run_batch_on_folder",
]
