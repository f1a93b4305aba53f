"""Allow ``python -m xspfgen``."""

from xspfgen.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
