import sys

from huffman_codec.cli import main

sys.exit(main())
