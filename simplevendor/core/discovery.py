# Standard library imports
import os
import logging
from pathlib import Path

# Project-local imports
from simplevendor.models.errors import NoSourcesError
from simplevendor.resolver.base import PackageResolver

logger = logging.getLogger(__name__)


def discover_local_packages(root_dir: Path, vendor_dir: Path, resolver: PackageResolver) -> set[str]:
    """
        Walks `root_dir` and returns the import paths of every package found there.
        Directories without Go sources are skipped, the vendor directory is never entered.
        Any other resolution failure is raised
    """

    vendor_dir = Path(vendor_dir).resolve()
    local_imports: set[str] = set()

    for root, dirs, _ in os.walk(root_dir, onerror=__raise):
        path = Path(root)
        if path.resolve().is_relative_to(vendor_dir):
            dirs.clear()
            continue

        try:
            pkg = resolver.import_dir(path)
        except NoSourcesError:
            logger.debug("no sources: %s", path)
            continue

        local_imports.add(pkg.import_path)

    return local_imports


def __raise(error: OSError) -> None:
    raise error
