"""
project: CaveGen
module: __init__.py
License: MIT

Flask application factory and core setup.

The HTTP layer is a thin shell around the cave pipeline: it accepts generation
parameters, runs (or reuses) a generation and hands the mesh buffer back as
JSON to whatever uploads it to a renderer. Configuration is sourced from
environment variables with development defaults; a local `instance/` directory
holds the log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so CAVEGEN_* settings can be supplied without exporting
# shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


app.config.update(
    # Cave generation feature flags / metrics
    CAVEGEN_ENABLE_GENERATION_METRICS=_env_flag("CAVEGEN_ENABLE_GENERATION_METRICS", "1"),
    CAVEGEN_DISABLE_CACHE=_env_flag("CAVEGEN_DISABLE_CACHE", "0"),
    CAVEGEN_CACHE_MAX=int(os.getenv("CAVEGEN_CACHE_MAX", "8")),
)

# Register HTTP blueprints (import after app created)
from cavegen.routes.cave_api import bp_cave  # noqa: E402

app.register_blueprint(bp_cave)


def create_app():
    """Return the Flask app instance."""
    return app


# Error handling: unexpected failures return a short id that matches the log line
@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal error", "error_id": error_id}), 500
