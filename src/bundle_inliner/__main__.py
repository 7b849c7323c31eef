"""エントリーポイント: uv run python -m bundle_inliner {direct,encoded}"""

import sys

from bundle_inliner.presentation.cli import main


if __name__ == "__main__":
    sys.exit(main())
