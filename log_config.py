import logging
import sys


def setup_logging(level: str = "INFO"):
    """Configure structured logging for the application."""
    logging.basicConfig(level=level.upper(), format="%(asctime)s - %(levelname)s - %(message)s", handlers=[logging.StreamHandler(sys.stdout)])
    # Ensure stdout is flushed for Docker
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(line_buffering=True)
