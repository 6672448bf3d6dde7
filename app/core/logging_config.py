import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; uvicorn keeps its own handlers"""
    root = logging.getLogger()
    if any(getattr(h, "_session_service", False) for h in root.handlers):
        root.setLevel(level.upper())
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._session_service = True

    root.addHandler(handler)
    root.setLevel(level.upper())
