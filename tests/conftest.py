"""Shared test helpers: an in-memory package resolver and a record builder."""

from collections import Counter
from pathlib import Path

from simplevendor.models.errors import NoSourcesError, ResolutionError
from simplevendor.models.package_record import PackageRecord

GOROOT = Path("/usr/local/go/src")


def make_record(
    import_path: str,
    imports: tuple[str, ...] = (),
    test_imports: tuple[str, ...] = (),
    x_test_imports: tuple[str, ...] = (),
    directory: Path | None = None,
    **files: tuple[str, ...],
) -> PackageRecord:
    """Build a package record with sensible defaults for tests."""
    return PackageRecord(
        import_path=import_path,
        dir=directory or Path("/gopath/src") / import_path,
        imports=tuple(imports),
        test_imports=tuple(test_imports),
        x_test_imports=tuple(x_test_imports),
        **{key: tuple(value) for key, value in files.items()},
    )


class FakeResolver:
    """Resolver backed by dictionaries; counts full fetches per import path."""

    def __init__(
        self,
        packages: list[PackageRecord] | None = None,
        std: dict[str, tuple[str, ...]] | None = None,
        dirs: dict[Path, PackageRecord] | None = None,
        unprobeable: set[str] | None = None,
        broken_dirs: set[Path] | None = None,
    ) -> None:
        self.packages = {pkg.import_path: pkg for pkg in packages or []}
        self.std = std or {}
        self.dirs = {Path(d).resolve(): pkg for d, pkg in (dirs or {}).items()}
        self.unprobeable = unprobeable or set()
        self.broken_dirs = {Path(d).resolve() for d in broken_dirs or set()}
        self.fetches: Counter[str] = Counter()
        self.visited_dirs: list[Path] = []

    def import_path(self, path: str, find_only: bool = False) -> PackageRecord:
        if path in self.std:
            return PackageRecord(
                import_path=path,
                dir=GOROOT / path,
                goroot=True,
                imports=self.std[path],
            )
        if find_only and path in self.unprobeable:
            raise ResolutionError(path, "probe failed")
        if path not in self.packages:
            raise ResolutionError(path, "cannot find package")
        if find_only:
            return PackageRecord(import_path=path, dir=self.packages[path].dir)

        self.fetches[path] += 1
        return self.packages[path]

    def import_dir(self, directory: Path) -> PackageRecord:
        directory = Path(directory).resolve()
        self.visited_dirs.append(directory)
        if directory in self.broken_dirs:
            raise ResolutionError(str(directory), "expected package, found main")
        if directory not in self.dirs:
            raise NoSourcesError(str(directory))
        return self.dirs[directory]

