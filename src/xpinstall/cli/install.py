"""CLI command for installing a Firefox add-on."""

import argparse
import asyncio
import logging
import sys
import zipfile
from pathlib import Path
from typing import List, Optional

from ..config import ConfigLoader, XPInstallConfig
from ..errors import XPInstallError
from ..installer import install
from ..logging_config import LogContext, setup_logging


def install_command(
    config: XPInstallConfig,
    extension: Path,
    install_dir_override: Optional[Path] = None,
) -> int:
    """Install one add-on and print its ID.

    Args:
        config: Configuration object
        extension: Path to the .xpi file or add-on directory
        install_dir_override: Optional override for the install directory

    Returns:
        Exit code (0 for success)
    """
    logger = logging.getLogger(__package__ or __name__)

    install_dir = install_dir_override if install_dir_override else Path(config.install.install_dir)
    logger.info(f"Installing {extension} into {install_dir}")

    try:
        with LogContext(logger, extension=str(extension), install_dir=str(install_dir)):
            addon_id = asyncio.run(install(extension, install_dir))
    except XPInstallError as e:
        logger.error(f"Installation failed: {e.message}", extra={"extra_fields": e.context})
        return 1
    except (OSError, zipfile.BadZipFile) as e:
        logger.error(f"Installation failed: {e}")
        return 1

    print(addon_id)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the install command."""
    parser = argparse.ArgumentParser(
        description="Install a Firefox add-on (.xpi file or directory) into an extensions directory"
    )
    parser.add_argument(
        "extension",
        type=Path,
        help="Path to the .xpi file or unpacked add-on directory"
    )
    parser.add_argument(
        "install_dir",
        type=Path,
        nargs="?",
        help="Directory to install into (overrides config)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        config = ConfigLoader().load(defaults_path=args.config)
    except XPInstallError as e:
        setup_logging()
        logging.getLogger(__package__ or __name__).error(e.message)
        return 2

    setup_logging(
        level=args.log_level or config.logging.level,
        format=config.logging.format,
        log_file=Path(config.logging.file) if config.logging.file else None,
    )

    return install_command(
        config=config,
        extension=args.extension,
        install_dir_override=args.install_dir,
    )


if __name__ == "__main__":
    sys.exit(main())
