import logging
import sys

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(message)s"
LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int | str = logging.INFO) -> None:
    """basic config applied to the root logger, which all `maze_forest` loggers inherit

    the library itself never calls this, it is for scripts and drivers
    """
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
