"""Logging configuration for the attendance points app."""
import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging once, from the app factory or a script."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))
    root.handlers = [handler]

    # Werkzeug request lines are noisy in development
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
