import logging
import os
import sys

from colorama import Back, Fore, Style, init

# Disable colours when logs are captured by a process supervisor or a file
DISABLE_COLORS = os.environ.get("ADMINKIT_DISABLE_COLORS", "").lower() in ("1", "true", "yes") or not sys.stderr.isatty()

_HANDLER_NAME = "adminkit.console"


class ColorizedFormatter(logging.Formatter):
    def __init__(self, *args, use_colors: bool = True, **kwargs):
        self.use_colors = use_colors and not DISABLE_COLORS
        if self.use_colors:
            self.level_colors = {
                logging.DEBUG: Fore.CYAN,
                logging.INFO: Fore.GREEN,
                logging.WARNING: Fore.YELLOW,
                logging.ERROR: Fore.RED,
                logging.CRITICAL: Fore.RED + Back.WHITE + Style.BRIGHT,
            }
        else:
            self.level_colors = {}
        super().__init__(*args, **kwargs)

    def format(self, record):
        message = super().format(record)
        if not self.use_colors:
            return message
        level_color = self.level_colors.get(record.levelno, "")
        return f"{level_color}{message}{Style.RESET_ALL}"


def configure_logging(level="INFO") -> logging.Logger:
    """Attach the colourised console handler to the ``adminkit`` logger exactly once."""
    if not DISABLE_COLORS:
        init(autoreset=True)

    logger = logging.getLogger("adminkit")
    logger.setLevel(level if isinstance(level, int) else str(level).upper())

    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(logger.level)
            return logger

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(ColorizedFormatter("%(asctime)s [%(levelname)s] (%(name)s) %(message)s"))
    logger.addHandler(console_handler)
    logger.propagate = False

    # Quieten the access log when running under uvicorn
    logging.getLogger("uvicorn.access").setLevel("WARNING")
    return logger
