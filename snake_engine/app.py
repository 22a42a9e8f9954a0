"""
HTTP API for a single in-memory game.

The browser is the driver: it posts the milliseconds elapsed since its
previous frame to /api/tick, posts key presses to /api/input and renders
the snapshot that comes back.
"""

import logging
import math
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS

from .config import EngineConfig
from .services.session import GameSession

load_dotenv()

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

CORS(app, resources={r"/api/*": {"origins": allowed_origins}})

# One game per process; the high score lives as long as this session does.
session = GameSession(config=EngineConfig.from_env())


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"}), 200


@app.route("/api/state", methods=["GET"])
def get_state():
    """Current snapshot of the game."""
    try:
        return jsonify(session.snapshot().to_dict()), 200
    except Exception as error:
        logger.error(f"Error reading game state: {error}")
        return jsonify({"error": "Failed to read game state"}), 500


@app.route("/api/tick", methods=["POST"])
def post_tick():
    """
    Advance the simulation.

    Body:
    - elapsed_ms: milliseconds since the previous tick call (>= 0)

    Returns:
    - stepped: whether a simulation step was applied
    - state: the snapshot after the tick
    """
    try:
        data = _json_body()
        elapsed_ms = data.get("elapsed_ms")
        if isinstance(elapsed_ms, bool) or not isinstance(elapsed_ms, (int, float)):
            raise ValueError("'elapsed_ms' must be a number")
        if not math.isfinite(elapsed_ms):
            raise ValueError("'elapsed_ms' must be finite")
        if elapsed_ms < 0:
            raise ValueError("'elapsed_ms' must not be negative")

        stepped, snapshot = session.tick(elapsed_ms)
        return jsonify({"stepped": stepped, "state": snapshot.to_dict()}), 200

    except ValueError as error:
        return jsonify({"error": str(error)}), 400
    except Exception as error:
        logger.error(f"Error applying tick: {error}")
        return jsonify({"error": "Failed to apply tick"}), 500


@app.route("/api/input", methods=["POST"])
def post_input():
    """
    Feed a raw key press (arrow keys, WASD, space/escape to pause, enter to
    restart a finished game). Unknown keys are ignored.
    """
    try:
        data = _json_body()
        key = data.get("key")
        if not isinstance(key, str):
            raise ValueError("'key' must be a string")

        snapshot = session.submit_input(key)
        return jsonify(snapshot.to_dict()), 200

    except ValueError as error:
        return jsonify({"error": str(error)}), 400
    except Exception as error:
        logger.error(f"Error handling input: {error}")
        return jsonify({"error": "Failed to handle input"}), 500


@app.route("/api/pause", methods=["POST"])
def post_pause():
    try:
        return jsonify(session.pause().to_dict()), 200
    except Exception as error:
        logger.error(f"Error pausing game: {error}")
        return jsonify({"error": "Failed to pause game"}), 500


@app.route("/api/resume", methods=["POST"])
def post_resume():
    try:
        return jsonify(session.resume().to_dict()), 200
    except Exception as error:
        logger.error(f"Error resuming game: {error}")
        return jsonify({"error": "Failed to resume game"}), 500


@app.route("/api/restart", methods=["POST"])
def post_restart():
    try:
        return jsonify(session.restart().to_dict()), 200
    except Exception as error:
        logger.error(f"Error restarting game: {error}")
        return jsonify({"error": "Failed to restart game"}), 500


@app.route("/api/config", methods=["GET"])
def get_config():
    try:
        return jsonify(session.config.to_dict()), 200
    except Exception as error:
        logger.error(f"Error reading configuration: {error}")
        return jsonify({"error": "Failed to read configuration"}), 500


def main():
    host = os.getenv("SNAKE_API_HOST", "127.0.0.1")
    port = int(os.getenv("SNAKE_API_PORT", "5000"))
    app.run(host=host, port=port, debug=bool(os.getenv("FLASK_DEBUG")))


if __name__ == "__main__":
    main()
