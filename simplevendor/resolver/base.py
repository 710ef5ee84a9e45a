# Standard library imports
from pathlib import Path
from typing import Protocol

# Project-local imports
from simplevendor.models.package_record import PackageRecord


class PackageResolver(Protocol):
    """
        Looks up Go package metadata.

        `import_path` raises ResolutionError when the path cannot be resolved.
        `import_dir` raises NoSourcesError for a directory without buildable sources
        and ResolutionError for anything else that goes wrong.
        With `find_only` set, only the package location is needed (no file listing).
    """

    def import_path(self, path: str, find_only: bool = False) -> PackageRecord:
        ...

    def import_dir(self, directory: Path) -> PackageRecord:
        ...
