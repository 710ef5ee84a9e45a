# Standard library imports
import sys
import logging
from typing import Iterable

# Project-local imports
from simplevendor.models.errors import VendorError
from simplevendor.models.package_record import PackageRecord
from simplevendor.resolver.base import PackageResolver

logger = logging.getLogger(__name__)

# Pseudo-package used by cgo.
CGO_IMPORT_PATH = "C"

# Import chains are rarely deeper than a few hundred hops.
MIN_RECURSION_LIMIT = 10_000


class TransitiveImports:
    """
        Depth-first walk over the import graph.

        `packages` is both the visited set and the result: a path is recorded before its
        imports are followed, so cycles and diamonds are resolved exactly once.
        Only the paths in `test_enabled` have their test imports followed; the flag is
        never inherited by the packages they import.
    """

    def __init__(self, resolver: PackageResolver, test_enabled: Iterable[str]):
        self.resolver = resolver
        self.test_enabled: frozenset[str] = frozenset(test_enabled)
        self.packages: dict[str, PackageRecord] = {}

    def analyze(self, path: str) -> None:
        if self.is_std(path):
            return
        if path in self.packages:
            return

        pkg = self.resolver.import_path(path)
        self.packages[path] = pkg

        dependencies = list(pkg.imports)
        if path in self.test_enabled:
            dependencies.extend(pkg.all_test_imports())

        for dependency in dependencies:
            self.analyze(dependency)

    def is_std(self, path: str) -> bool:
        """
            Tells whether an import path belongs to the standard library.
            A failed lookup counts as "not standard", the real fetch will report the problem
        """

        if path == CGO_IMPORT_PATH:
            return True

        try:
            located = self.resolver.import_path(path, find_only=True)
        except VendorError as e:
            logger.debug("std probe failed for %s: %s", path, e)
            return False

        return located.goroot


def get_transitive_imports(paths: Iterable[str], resolver: PackageResolver) -> list[PackageRecord]:
    """
        Returns every non-standard package reachable from `paths`, including `paths` themselves.
        The seeds are the only packages whose test imports are followed.
        Order of the result is unspecified
    """

    seeds = set(paths)
    analysis = TransitiveImports(resolver, seeds)

    previous_limit = sys.getrecursionlimit()
    if previous_limit < MIN_RECURSION_LIMIT:
        sys.setrecursionlimit(MIN_RECURSION_LIMIT)

    try:
        for seed in seeds:
            analysis.analyze(seed)
    finally:
        sys.setrecursionlimit(previous_limit)

    return list(analysis.packages.values())
