import logging

RED = "\033[91m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
RESET = "\033[0m"
WHITE = "\033[97m"

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s.%(msecs)03d - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("storefront")

_LEVELS = {
    "error": (RED, logging.ERROR),
    "warning": (YELLOW, logging.WARNING),
    "good": (GREEN, logging.INFO),
}


def log_status(status, message, extra=""):
    status = status.lower()
    color, level = _LEVELS.get(status, (WHITE, logging.INFO))

    if not extra:
        logger.log(level, f"{color}{message}{RESET}")
    else:
        logger.log(level, f"{color}{message}{extra}{RESET}")
