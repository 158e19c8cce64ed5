"""Allow ``python -m snapcam`` to launch the viewer."""

from __future__ import annotations

import sys


def main() -> None:
    from snapcam import run

    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
