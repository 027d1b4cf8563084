"""Run a cache lifecycle hook.

Usage:
    python -m scripts.cache_lifecycle {install|uninstall|remove}
install enables cache reads, uninstall disables them, remove deletes the
enable flag and global version (index and entries are kept).
"""

import sys

from vcache.composition import build_lifecycle_service
from vcache.shared.telemetry.logging import setup_logging

HOOKS = ("install", "uninstall", "remove")


def main(argv: list[str] | None = None) -> int:
    """Dispatch to the named hook. Returns the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or args[0] not in HOOKS:
        print(
            f"Usage: python -m scripts.cache_lifecycle {{{'|'.join(HOOKS)}}}",
            file=sys.stderr,
        )
        return 1

    setup_logging()
    lifecycle = build_lifecycle_service()
    getattr(lifecycle, f"on_{args[0]}")()
    print(f"Cache {args[0]} hook done (enabled={lifecycle.is_enabled()})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
