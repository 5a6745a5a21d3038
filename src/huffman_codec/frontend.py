"""
Launch the Streamlit demo in frontend/app.py.

    huffman-frontend
    huffman-frontend --server.port 8600 --server.headless false

Arguments are passed through to `streamlit run`; any option given there
replaces the matching default below.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[2]
APP_PATH = PROJECT_ROOT / "frontend" / "app.py"

DEFAULT_OPTIONS = {
    "--server.headless": "true",
    "--browser.gatherUsageStats": "false",
}


def _option_name(arg: str) -> str:
    return arg.split("=", 1)[0]


def build_streamlit_command(app_path: Path, extra_args: Sequence[str] = ()) -> List[str]:
    given = {_option_name(arg) for arg in extra_args if arg.startswith("--")}
    command = ["streamlit", "run", str(app_path)]
    for name, value in DEFAULT_OPTIONS.items():
        if name not in given:
            command += [name, value]
    command += list(extra_args)
    return command


def main(argv: Optional[Sequence[str]] = None) -> int:
    extra_args = list(sys.argv[1:] if argv is None else argv)

    if not APP_PATH.exists():
        print(f"Error: could not find the demo app at {APP_PATH}", file=sys.stderr)
        print("Run huffman-frontend from a source checkout (pip install -e '.[frontend]').", file=sys.stderr)
        return 1

    command = build_streamlit_command(APP_PATH, extra_args)
    print(f"Starting Huffman coding demo: {APP_PATH}")
    print("Press Ctrl+C to stop the server")

    try:
        completed = subprocess.run(command)
    except KeyboardInterrupt:
        print("Shutting down server...")
        return 0
    except FileNotFoundError:
        print("Error: streamlit is not installed or not in PATH", file=sys.stderr)
        print("Install it with: pip install 'huffman-codec[frontend]'", file=sys.stderr)
        return 1
    return completed.returncode


if __name__ == "__main__":
    sys.exit(main())
