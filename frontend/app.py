"""Streamlit demo: build a Huffman code for a text and inspect the result."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Add the project src/ to the path so the app runs from a plain checkout too
project_src = Path(__file__).resolve().parent.parent / "src"
sys.path.insert(0, str(project_src))

from huffman_codec.coding.frequency import count_symbols  # noqa: E402
from huffman_codec.errors import HuffmanError  # noqa: E402
from huffman_codec.pipeline.config import CodecConfig  # noqa: E402
from huffman_codec.pipeline.runner import encode_decode_text  # noqa: E402
from huffman_codec.reporting.stats import compression_stats  # noqa: E402
from huffman_codec.samples import SAMPLE_TEXT  # noqa: E402
from state import init_session_state  # noqa: E402

BITS_PREVIEW_LEN = 2048

st.set_page_config(page_title="Huffman Coding", layout="wide", initial_sidebar_state="expanded")
init_session_state()

st.markdown(
    """
<style>
.page-header h1 { color: #0f3328; margin-bottom: 0.25rem; }
.page-header p { color: #1b7a5f; }
.section-title { font-weight: 600; color: #0f3328; margin: 0.5rem 0; }
</style>
<div class="page-header">
  <h1>Huffman Coding</h1>
  <p>Build a prefix code from symbol frequencies, encode the text and decode it back.</p>
</div>
""",
    unsafe_allow_html=True,
)


def code_table_frame(table, frequencies) -> pd.DataFrame:
    rows = [
        {
            "symbol": repr(symbol),
            "count": frequencies.get(symbol, 0),
            "code": code,
            "length": len(code),
        }
        for symbol, code in table.items()
    ]
    return pd.DataFrame(rows, columns=["symbol", "count", "code", "length"])


with st.sidebar:
    st.markdown("## Configuration")
    st.markdown('<p class="section-title">Single-symbol input</p>', unsafe_allow_html=True)
    single_symbol = st.radio(
        "Single-symbol policy",
        options=["one_bit", "error"],
        index=0,
        help="one_bit: encode a lone symbol with the code '0'. error: reject such input.",
        label_visibility="collapsed",
    )

    st.markdown("---")

    st.markdown('<p class="section-title">Baseline width</p>', unsafe_allow_html=True)
    bits_per_symbol = st.selectbox(
        "Bits per symbol",
        options=[8, 16, 32],
        index=2,
        help="Fixed width of the uncompressed text used for the size ratio.",
        label_visibility="collapsed",
    )
    include_table = st.checkbox("Count code table in compressed size", value=False)

cfg = CodecConfig(
    single_symbol_policy=single_symbol,
    fixed_bits_per_symbol=bits_per_symbol,
    include_table_overhead=include_table,
)

tab_encode, tab_results = st.tabs(["Encode", "Results"])

with tab_encode:
    st.markdown('<p class="section-title">Input text</p>', unsafe_allow_html=True)
    text = st.text_area("Text", value=SAMPLE_TEXT, height=220, label_visibility="collapsed")

    if st.button("Encode & decode", type="primary"):
        if not text:
            st.warning("Enter some text first.")
        else:
            try:
                st.session_state.current_result = encode_decode_text(text, cfg)
                st.session_state.current_text = text
                st.success("Encoded. See the Results tab.")
            except HuffmanError as exc:
                st.session_state.current_result = None
                st.error(str(exc))

with tab_results:
    result = st.session_state.current_result
    if result is None:
        st.caption("No results yet")
    else:
        source = st.session_state.current_text
        stats = compression_stats(source, result.encoded, cfg)
        ratio = stats.ratio_with_table if cfg.include_table_overhead else stats.ratio

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Original bits", stats.original_bits)
        col2.metric("Compressed bits", stats.compressed_bits)
        col3.metric("Ratio", f"{ratio:.2f}x")
        col4.metric("Bits / symbol", f"{stats.average_code_length:.3f}", help=f"Entropy {stats.entropy_bits:.3f}")

        if result.decoded == source:
            st.success("Decoded text matches the input.")
        else:
            st.error("Decoded text differs from the input.")

        frequencies = count_symbols(source)
        frame = code_table_frame(result.encoded.table, frequencies)
        st.markdown('<p class="section-title">Code table</p>', unsafe_allow_html=True)
        st.dataframe(frame, use_container_width=True, hide_index=True)
        st.bar_chart(frame.set_index("symbol")[["length"]])

        st.markdown('<p class="section-title">Encoded bits</p>', unsafe_allow_html=True)
        st.code(result.bits[:BITS_PREVIEW_LEN], language=None)
        if len(result.bits) > BITS_PREVIEW_LEN:
            st.caption(f"Showing {BITS_PREVIEW_LEN} of {len(result.bits)} bits")
