import logging

from rcl.config import environment


def create_logger(level: int) -> logging.Logger:
    formatter = logging.Formatter(
        fmt="[%(asctime)s] [rcl] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S %z",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logger = logging.getLogger("rcl")
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(handler)

    return logger


logger = create_logger(environment.get_log_level())
