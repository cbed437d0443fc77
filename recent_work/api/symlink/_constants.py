"""Filenames and extensions that are never linked."""

SKIPPED_EXTENSIONS: frozenset[str] = frozenset(
    {
        # compiled objects and binaries
        "o", "a", "dylib", "so", "class", "pyc", "pyo",
        "swiftdeps", "hmap", "modulemap", "wasm",
        "exe", "dll", "bin",
        # archives and disk images
        "zip", "tar", "gz", "tgz", "rar", "7z", "dmg", "iso", "pkg",
        # temp and backup
        "tmp", "swp", "swo", "bak", "orig",
        # IDE project metadata
        "pbxproj", "xcscheme", "plist",
        # logs, caches, maps
        "log", "pid", "cache", "map",
        # databases
        "sqlite", "sqlite-wal", "sqlite-shm", "db",
    }
)  # fmt: skip

SKIPPED_FILENAMES: frozenset[str] = frozenset(
    {
        ".DS_Store",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "Podfile.lock",
        "Package.resolved",
        "Cargo.lock",
        "composer.lock",
        "Gemfile.lock",
        "poetry.lock",
        "flake.lock",
        "output-file-map.json",
    }
)
