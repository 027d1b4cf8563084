"""Bump the global cache version and prune entries of older versions.

Usage:
    python -m scripts.bump_cache_version <version> [--no-cleanup] [--force]
--no-cleanup keeps old entries; --force accepts a version that is not
newer than the current one (string comparison).
"""

import sys

from vcache.composition import build_versioned_cache
from vcache.shared.telemetry.logging import setup_logging

USAGE = "Usage: python -m scripts.bump_cache_version <version> [--no-cleanup] [--force]"


def main(argv: list[str] | None = None) -> int:
    """Set the global cache version. Returns the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    flags = {a for a in args if a.startswith("--")}
    positional = [a for a in args if not a.startswith("--")]
    unknown = flags - {"--no-cleanup", "--force"}
    if len(positional) != 1 or unknown:
        print(USAGE, file=sys.stderr)
        return 1

    setup_logging()
    cache = build_versioned_cache()
    previous = cache.global_version
    if not cache.set_global_version(
        positional[0],
        cleanup="--no-cleanup" not in flags,
        force="--force" in flags,
    ):
        print(
            f"Cache version not changed: {positional[0]!r} rejected (current {previous})",
            file=sys.stderr,
        )
        return 1
    print(f"Cache version: {previous} -> {cache.global_version}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
