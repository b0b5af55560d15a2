import logging
import sys

from structural_demo.dispatcher import Dispatcher


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")
    # the currency suffix is not ASCII
    encoding = getattr(sys.stdout, "encoding", None) or ""
    if encoding.lower() != "utf-8" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    Dispatcher().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
