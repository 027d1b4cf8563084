"""Delete cache entries older than each name's highest saved version.

Usage:
    python -m scripts.prune_cache [--use-global]
With --use-global the current global version is the cutoff for every name.
"""

import sys

from vcache.composition import build_versioned_cache
from vcache.shared.telemetry.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    """Run one prune sweep. Returns the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if any(a != "--use-global" for a in args):
        print("Usage: python -m scripts.prune_cache [--use-global]", file=sys.stderr)
        return 1

    setup_logging()
    cache = build_versioned_cache()
    deleted = cache.prune_stale_versions(use_global_version_as_cutoff="--use-global" in args)
    print(f"Deleted {deleted} stale cache entries")
    return 0


if __name__ == "__main__":
    sys.exit(main())
