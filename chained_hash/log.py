# ==================================================
# chained_hash/log.py
# ==================================================
import logging
import sys

from colorama import Fore, Style, init

init(autoreset=True)

PKG_PREFIX = "chained_hash."


class ColorFormatter(logging.Formatter):
    """`HH:MM:SS L module  message` lines, colored by level when `color` is set.

    Logger names lose the package prefix (`chained_hash.table` -> `table`)
    and the level is cut to its first letter.
    """

    LEVEL_COLORS = {
        "DEBUG":    Fore.WHITE + Style.DIM,
        "INFO":     Fore.CYAN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }
    TIME_COLOR = Style.DIM

    def __init__(self, datefmt: str = "%H:%M:%S", color: bool = True):
        super().__init__(datefmt=datefmt)
        self.color = color

    @staticmethod
    def short_name(name: str) -> str:
        return name[len(PKG_PREFIX):] if name.startswith(PKG_PREFIX) else name

    def format(self, record):
        stamp = self.formatTime(record, self.datefmt)
        level = record.levelname[:1]
        name  = self.short_name(record.name)
        msg   = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        if not self.color:
            return f"{stamp} {level} {name:<22} {msg}"
        color = self.LEVEL_COLORS.get(record.levelname, "")
        return (f"{self.TIME_COLOR}{stamp}{Style.RESET_ALL} "
                f"{color}{level} {name:<22}{Style.RESET_ALL} {msg}")


def setup_logging(verbose: bool = False, stream=None) -> logging.Handler:
    """Attach a stderr handler to the `chained_hash` logger tree.

    Color is only used when the stream is a terminal.
    """
    stream = stream or sys.stderr
    isatty = getattr(stream, "isatty", None)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(color=bool(isatty and isatty())))
    root = logging.getLogger("chained_hash")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler
