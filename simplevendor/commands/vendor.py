# Standard library imports
import logging
from typing import Annotated

# Third-party imports
import rich
import typer

# Project-local imports
from simplevendor.models.config import Config
from simplevendor.models.errors import VendorError
from simplevendor.resolver.base import PackageResolver
from simplevendor.resolver.go_list import GoListResolver
from simplevendor.core.analyzer import get_transitive_imports
from simplevendor.core.discovery import discover_local_packages
from simplevendor.core.materializer import vendor_package
from simplevendor.utils.util import configure_logging

logger = logging.getLogger(__name__)


def vendor(
        dry_run: Annotated[bool, typer.Option(
            "-n",
            help="Dry run: report what would be copied without writing anything (implies -v)"
        )] = False,
        verbose: Annotated[bool, typer.Option(
            "-v",
            help="Verbose mode: log local packages, vendored packages and every file copy"
        )] = False,
):
    """
        Copies the external dependencies of the Go packages in the current directory into ./vendor
    """

    config = Config.from_flags(dry_run=dry_run, verbose=verbose)
    configure_logging(config.verbose)

    try:
        vendored = run(config, GoListResolver(config.project_root))
    except (VendorError, OSError) as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)

    verb = "Would vendor" if config.dry_run else "Vendored"
    rich.print(f"[green]{verb} {len(vendored)} package(s)[/green] into [italic]{config.vendor_dir}[/italic]")


def run(config: Config, resolver: PackageResolver) -> list[str]:
    """
        Discovers the local packages, resolves everything they import and vendors what isn't local.
        Returns the vendored import paths. Errors are not caught here
    """

    # Packages within the project are NOT vendored: they are already under source control.
    local_imports = discover_local_packages(config.project_root, config.vendor_dir, resolver)

    if config.verbose:
        for path in sorted(local_imports):
            logger.info("local: %s", path)

    if not local_imports:
        logger.warning("no Go packages found under %s", config.project_root)
        return []

    vendored: list[str] = []
    for pkg in get_transitive_imports(local_imports, resolver):
        if pkg.import_path in local_imports:
            continue
        if config.verbose:
            logger.info("vendor: %s", pkg.import_path)
        vendor_package(config.vendor_dir, pkg, config)
        vendored.append(pkg.import_path)

    return vendored
