import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # urllib3 logs every request at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
