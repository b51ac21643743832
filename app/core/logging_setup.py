import logging
import sys


def setup_logging(level: str = "INFO", log_file: str = ""):
    """Configures logging to write to the console and, optionally, a file."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
    # Let uvicorn log through the root handlers instead of its own
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True
    logging.getLogger("httpx").setLevel(level.upper())
    logging.getLogger("openai").setLevel(level.upper())
