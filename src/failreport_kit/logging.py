import logging
from rich.console import Console
from rich.logging import RichHandler

def setup_logging(level: str = "INFO") -> logging.Logger:
    # stdout carries the report itself; log records go to stderr
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])
    return logging.getLogger("failreport_kit")
