"""Main module entrypoint for command-line audit runs.

This module validates startup configuration, enumerates the catalog and
drives one bounded-concurrency probe run over it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from header_audit.bootstrap import bootstrap_create_audit_scheduler, bootstrap_create_probe_adapter
from header_audit.catalog import CatalogError, catalog_iter_artifact_identifiers
from header_audit.config import SettingsLoadError, config_apply_overrides, config_load_settings
from header_audit.logging_utils import configure_logging

LOGGER = logging.getLogger(__name__)


def main_build_argument_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Parser for the audit entrypoint.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    argument_parser = argparse.ArgumentParser(
        prog="header-audit",
        description="Audit crate download response headers for every version listed in a crates.io index",
    )
    argument_parser.add_argument(
        "catalog_root",
        nargs="?",
        help="Path to a crates.io index checkout",
        type=str,
    )
    argument_parser.add_argument(
        "--concurrency",
        dest="concurrency",
        type=int,
        help="Optional override for the maximum number of in-flight probes",
    )
    argument_parser.add_argument(
        "--base-url",
        dest="base_url",
        type=str,
        help="Optional override for the download base URL",
    )
    return argument_parser


def main(argv: Sequence[str] | None = None) -> None:
    """Run one audit over the catalog named on the command line.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        None: Findings and the summary line are written to stdout.

    Raises:
        SystemExit: Raised with status 1 when settings are invalid or the catalog cannot be read.
    """

    argument_parser = main_build_argument_parser()
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.catalog_root is None:
        argument_parser.print_usage(sys.stdout)
        return

    try:
        settings = config_apply_overrides(
            config_load_settings(),
            audit_concurrency=parsed_arguments.concurrency,
            audit_base_url=parsed_arguments.base_url,
        )
    except SettingsLoadError as error:
        raise SystemExit(str(error)) from error

    configure_logging(settings.audit_log_level)

    with bootstrap_create_probe_adapter(settings) as probe_adapter:
        scheduler = bootstrap_create_audit_scheduler(settings=settings, probe_adapter=probe_adapter)
        try:
            scheduler.job_run(catalog_iter_artifact_identifiers(parsed_arguments.catalog_root))
        except CatalogError as error:
            LOGGER.error("audit.catalog_failed error=%s", error)
            raise SystemExit(1) from error


if __name__ == "__main__":
    main()
