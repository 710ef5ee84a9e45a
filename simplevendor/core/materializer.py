# Standard library imports
import os
import stat
import time
import shutil
import logging
from pathlib import Path
from dataclasses import dataclass

# Project-local imports
from simplevendor.models.config import Config
from simplevendor.models.package_record import PackageRecord

logger = logging.getLogger(__name__)

TEST_FILE_SUFFIX = "_test.go"

# Copied next to the sources when present. Exact, case-sensitive names.
SPECIALS = [
    "license",
    "LICENSE",
    "patents",
    "PATENTS",
    "readme",
    "README",
    "readme.md",
    "README.md",
]


@dataclass(frozen=True)
class CopyAction:
    """
        A single file copy, performed or (in a dry run) only intended
    """

    src: Path
    dst: Path

    def __str__(self) -> str:
        return f"cp {self.src} => {self.dst}"


def vendor_package(vendor_dir: Path, pkg: PackageRecord, config: Config) -> list[CopyAction]:
    """
        Copies the sources of `pkg` into `vendor_dir/<import path>`.
        Test files are left out. Returns the copies made, or the ones that would be made in a dry run
    """

    target_dir = Path(vendor_dir) / pkg.import_path
    actions = plan_copies(pkg, target_dir)

    if not config.dry_run:
        target_dir.mkdir(parents=True, exist_ok=True)

    for action in actions:
        if config.verbose or config.dry_run:
            logger.info(str(action))
        if not config.dry_run:
            copy_file(action.src, action.dst)

    return actions


def plan_copies(pkg: PackageRecord, target_dir: Path) -> list[CopyAction]:
    """
        Lists the copies needed to vendor `pkg` into `target_dir`, without touching the filesystem
    """

    # The SFiles list skips assembly excluded by build constraints; the glob doesn't
    s_files = sorted(p.name for p in pkg.dir.glob("*.s"))

    names = [*pkg.source_files(), *s_files]

    actions = [
        CopyAction(pkg.dir / name, target_dir / name)
        for name in dict.fromkeys(names)
        if not name.endswith(TEST_FILE_SUFFIX)
    ]

    present = set(os.listdir(pkg.dir)) if pkg.dir.is_dir() else set()
    actions.extend(
        CopyAction(pkg.dir / name, target_dir / name)
        for name in SPECIALS
        if name in present and (pkg.dir / name).is_file()
    )

    return actions


def copy_file(src: Path, dst: Path) -> None:
    """
        Copies `src` to `dst`, then applies the permission bits and modification time of `src`.
        Metadata is only stamped once the destination has been fully written and closed
    """

    info = os.stat(src)

    with open(src, "rb") as src_file:
        with open(dst, "wb") as dst_file:
            shutil.copyfileobj(src_file, dst_file)

    os.chmod(dst, stat.S_IMODE(info.st_mode))
    os.utime(dst, ns=(time.time_ns(), info.st_mtime_ns))
