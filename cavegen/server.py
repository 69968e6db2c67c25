"""
project: CaveGen
module: server.py
License: MIT

Server bootstrap helpers: logging configuration and the development server
entry point used by `run.py server`.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from cavegen import app


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Configure logging and run the Flask development server."""
    _configure_logging()
    logging.getLogger(__name__).info("Starting cave API on %s:%s", host, port)
    app.run(host=host, port=port, debug=debug)


def _configure_logging():
    """Configure logging to both console and a rotating file in instance/.

    The file path will be instance/cavegen.log. Retains a few backups to avoid growth.
    """
    log_dir = app.instance_path
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "cavegen.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    # Rotating file handler
    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)

    # Console handler (for terminals/tasks that show output)
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(formatter)

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
