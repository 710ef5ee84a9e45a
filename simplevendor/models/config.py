# Standard library imports
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

VENDOR_DIR_NAME = "vendor"


@dataclass(frozen=True)
class Config:
    """
        Run settings for a single vendoring invocation.
        Built once from the command line flags and handed to every stage explicitly
    """

    project_root: Path
    vendor_dir: Path
    dry_run: bool = False
    verbose: bool = False

    @classmethod
    def from_flags(cls, dry_run: bool, verbose: bool, project_root: Optional[Path] = None) -> 'Config':
        """
            Returns a new Config for the given flags. A dry run always reports what it would do,
            so it switches verbose mode on
        """

        root = (project_root or Path.cwd()).resolve()

        return cls(
            project_root=root,
            vendor_dir=root / VENDOR_DIR_NAME,
            dry_run=dry_run,
            verbose=verbose or dry_run,
        )

