"""setup command: install the shell integration."""

import os
import subprocess
from importlib import resources

from gwt.commands.context import CommandContext
from gwt.exceptions import GwtError
from gwt.logging_config import get_logger

logger = get_logger(__name__)

INSTALLER = "install.sh"


def setup_command(ctx: CommandContext) -> int:
    """Run the bundled installer with the terminal's own streams.

    Returns:
        The installer's exit code
    """
    ctx.display.highlight("gwt Shell Integration Setup")

    installer = resources.files("gwt") / "shell_integration" / INSTALLER
    with resources.as_file(installer) as script:
        if not script.is_file():
            raise GwtError(
                f"Installation script not found: {script}\n"
                "This might be a packaging issue, please reinstall gwt."
            )

        ctx.display.info("Running shell integration installer...")
        ctx.display.separator()

        logger.debug(f"Running bash {script}")
        try:
            # No capture: the installer prompts on the terminal
            result = subprocess.run(["bash", str(script)], cwd=os.getcwd(), check=False)
        except OSError as e:
            raise GwtError(f"Failed to run installer: {e}") from e

    if result.returncode != 0:
        ctx.display.error(f"Installer exited with code {result.returncode}")
    return result.returncode
