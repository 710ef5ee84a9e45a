# Standard library imports
import sys
import logging
import tomllib
from pathlib import Path

# Third-party imports
from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def resource_path(relative_path: str) -> Path:
    """
    Get the absolute path to a resource, works for dev and PyInstaller bundle.

    When running as a PyInstaller bundle, files are unpacked to a temporary folder
    accessible via sys._MEIPASS. This function returns the correct path to the resource.

    Args:
        relative_path: Relative path to the resource file inside your project or bundle.

    Returns:
        An absolute Path object to the resource.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path = Path(sys._MEIPASS)
    else:
        base_path = Path(__file__).resolve().parent.parent.parent

    return base_path / relative_path


def get_meta_info(field: str, default=None):
    """
        Get field value from a pyproject.toml.
        Falls back to `default` (when given) if the file or the field is missing, e.g. in an installed wheel
    """
    pyproject_path = resource_path("pyproject.toml")

    if not pyproject_path.exists():
        if default is not None:
            return default
        raise FileNotFoundError(f"pyproject.toml not found at {pyproject_path}")

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    keys = field.split(".")
    try:
        for key in keys:
            data = data[key]
        return data
    except (KeyError, TypeError):
        if default is not None:
            return default
        raise KeyError(f"Field '{field}' not found in {pyproject_path}")


def configure_logging(verbose: bool) -> None:
    """
        Routes log records to stderr through rich. Every line carries the file:line it was logged from.
        Verbose mode lowers the level to INFO so progress messages show up
    """

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=True,
        rich_tracebacks=True,
    )

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
