# Standard library imports
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True)
class PackageRecord:
    """
        Represents a resolved Go package, as reported by `go list -json`
    """

    import_path: str
    dir: Path
    goroot: bool = False

    go_files: tuple[str, ...] = field(default_factory=tuple)
    cgo_files: tuple[str, ...] = field(default_factory=tuple)
    ignored_go_files: tuple[str, ...] = field(default_factory=tuple)
    c_files: tuple[str, ...] = field(default_factory=tuple)
    cxx_files: tuple[str, ...] = field(default_factory=tuple)
    m_files: tuple[str, ...] = field(default_factory=tuple)
    h_files: tuple[str, ...] = field(default_factory=tuple)
    s_files: tuple[str, ...] = field(default_factory=tuple)
    swig_files: tuple[str, ...] = field(default_factory=tuple)
    swig_cxx_files: tuple[str, ...] = field(default_factory=tuple)
    syso_files: tuple[str, ...] = field(default_factory=tuple)

    imports: tuple[str, ...] = field(default_factory=tuple)
    test_imports: tuple[str, ...] = field(default_factory=tuple)
    x_test_imports: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_go_list(cls, data: dict[str, Any]) -> 'PackageRecord':
        """
            Builds a record from a single JSON object printed by `go list -json`.
            Missing keys mean empty lists, which is how `go list` omits them
        """

        def names(key: str) -> tuple[str, ...]:
            return tuple(data.get(key) or ())

        return cls(
            import_path=data.get("ImportPath", ""),
            dir=Path(data.get("Dir", "")),
            goroot=bool(data.get("Goroot", False)),
            go_files=names("GoFiles"),
            cgo_files=names("CgoFiles"),
            ignored_go_files=names("IgnoredGoFiles"),
            c_files=names("CFiles"),
            cxx_files=names("CXXFiles"),
            m_files=names("MFiles"),
            h_files=names("HFiles"),
            s_files=names("SFiles"),
            swig_files=names("SwigFiles"),
            swig_cxx_files=names("SwigCXXFiles"),
            syso_files=names("SysoFiles"),
            imports=names("Imports"),
            test_imports=names("TestImports"),
            x_test_imports=names("XTestImports"),
        )

    def source_files(self) -> Iterator[str]:
        """
            Yields every categorized source file name, in category order
        """

        for group in (
            self.go_files,
            self.cgo_files,
            self.ignored_go_files,
            self.c_files,
            self.cxx_files,
            self.m_files,
            self.h_files,
            self.s_files,
            self.swig_files,
            self.swig_cxx_files,
            self.syso_files,
        ):
            yield from group

    def all_test_imports(self) -> tuple[str, ...]:
        return self.test_imports + self.x_test_imports
