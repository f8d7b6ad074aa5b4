import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"


def setup_logging(name: str) -> logging.Logger:
    """Configures a standard logger."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S"
    )
    return logging.getLogger(name)


logger = setup_logging("exam_results")
