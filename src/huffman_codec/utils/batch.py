from pathlib import Path
from typing import Dict, List, Optional

from huffman_codec.errors import HuffmanError
from huffman_codec.pipeline.config import CodecConfig
from huffman_codec.pipeline.runner import encode_decode_text
from huffman_codec.utils.file_utils import iter_files, mirrored_output_path


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: CodecConfig | None = None,
) -> List[Dict[str, object]]:
    """
    Round-trip every text file under `input_root`.

    Writes the bitstring to out_encoded/ and the recovered text to out_decoded/,
    mirroring the input tree. Files that fail to decode as text or to encode
    are reported with status "error" and skipped.
    """
    if cfg is None:
        cfg = CodecConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()

    out_encoded_root = output_root / "out_encoded"
    out_decoded_root = output_root / "out_decoded"

    results: List[Dict[str, object]] = []
    for in_path in iter_files(input_root):
        print("Processing:", in_path)
        results.append(process_file(in_path, input_root, out_encoded_root, out_decoded_root, cfg))
    return results


def process_file(
    in_path: Path,
    input_root: Path,
    out_encoded_root: Path,
    out_decoded_root: Path,
    cfg: CodecConfig,
) -> Dict[str, object]:
    rel_path = in_path.relative_to(input_root)
    result: Dict[str, object] = {"input_path": str(rel_path), "status": "ok", "error": None}

    try:
        text = in_path.read_text(encoding=cfg.encoding)
        round_trip = encode_decode_text(text, cfg)
    except (HuffmanError, UnicodeDecodeError) as exc:
        print(f"Skipping {in_path}: {exc}")
        result["status"] = "error"
        result["error"] = str(exc)
        return result

    encoded_out_path = mirrored_output_path(out_encoded_root, rel_path, "_encoded")
    encoded_out_path.parent.mkdir(parents=True, exist_ok=True)
    encoded_out_path.write_text(round_trip.bits, encoding="ascii")

    decoded_out_path = mirrored_output_path(out_decoded_root, rel_path, "_decoded")
    decoded_out_path.parent.mkdir(parents=True, exist_ok=True)
    decoded_out_path.write_text(round_trip.decoded, encoding=cfg.encoding)

    result["encoded_path"] = str(encoded_out_path)
    result["decoded_path"] = str(decoded_out_path)
    result["compressed_bits"] = len(round_trip.bits)
    return result
