"""Allow ``python -m bibfzf``."""

from __future__ import annotations

from bibfzf.ui.cli import main


if __name__ == "__main__":
    main()
