# Standard library imports
import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Optional

# Project-local imports
from simplevendor.models.errors import NoSourcesError, ResolutionError
from simplevendor.models.package_record import PackageRecord

logger = logging.getLogger(__name__)

NO_SOURCES_MARKERS = (
    "no Go files in",
    "build constraints exclude all Go files in",
)


class GoListResolver:
    """
        Resolves packages by asking the Go toolchain: `go list -e -json`.
        With -e, go list reports per-package problems in the "Error" field
        instead of failing, which lets us tell "no sources" apart from real errors
    """

    def __init__(self, working_dir: Path, go_binary: str = "go"):
        self.working_dir = Path(working_dir)
        self.go_binary = go_binary

    def import_path(self, path: str, find_only: bool = False) -> PackageRecord:
        args = ["list", "-e", "-json"]
        if find_only:
            args.append("-find")
        args.append(path)

        data = self.__run(args, self.working_dir, path)
        return self.__to_record(data, path)

    def import_dir(self, directory: Path) -> PackageRecord:
        directory = Path(directory)

        data = self.__run(["list", "-e", "-json", "."], directory, str(directory))
        return self.__to_record(data, str(directory))

    def __run(self, args: list[str], cwd: Path, subject: str) -> dict[str, Any]:
        command = [self.go_binary, *args]
        logger.debug("running %s in %s", " ".join(command), cwd)

        try:
            result = subprocess.run(command, cwd=cwd, capture_output=True, text=True)
        except OSError as e:
            raise ResolutionError(subject, f"cannot run {self.go_binary}: {e}") from e

        if not result.stdout.strip():
            message = result.stderr.strip() or f"{self.go_binary} exited with status {result.returncode}"
            if _is_no_sources(message):
                raise NoSourcesError(subject, message)
            raise ResolutionError(subject, message)

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ResolutionError(subject, f"unreadable go list output: {e}") from e

    @staticmethod
    def __to_record(data: dict[str, Any], subject: str) -> PackageRecord:
        error = _error_message(data)
        if error:
            if _is_no_sources(error):
                raise NoSourcesError(subject, error)
            raise ResolutionError(subject, error)

        return PackageRecord.from_go_list(data)


def _error_message(data: dict[str, Any]) -> Optional[str]:
    error = data.get("Error")
    if not error:
        return None
    if isinstance(error, dict):
        return error.get("Err") or "unknown error"
    return str(error)


def _is_no_sources(message: str) -> bool:
    return any(marker in message for marker in NO_SOURCES_MARKERS)
