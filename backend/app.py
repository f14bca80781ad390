import os
import logging
from flask import Flask, jsonify, request, Response
from flask_cors import CORS
from dotenv import load_dotenv

from config import load_config
from domain.errors import InvalidDirectionError
from engine import SnakeGame
from services.game_clock import GameClock

load_dotenv()

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]


def get_allowed_origins():
    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    return DEFAULT_ALLOWED_ORIGINS


def create_app(game: SnakeGame = None, clock: GameClock = None, start_clock: bool = False) -> Flask:
    """
    Build the Flask app around a single SnakeGame.

    The browser front end posts input here and polls /api/state for
    snapshots to draw. With start_clock the server ticks the game itself;
    otherwise the client drives it through /api/tick.
    """
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": get_allowed_origins()}})

    if game is None:
        game = SnakeGame(load_config())
    if clock is None:
        clock = GameClock(game)

    app.config["SNAKE_GAME"] = game
    app.config["GAME_CLOCK"] = clock

    if start_clock:
        clock.start()

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Current snapshot: snake, apples, heading, score, flags."""
        return jsonify(game.get_current_state().to_dict())

    @app.route("/api/heading", methods=["POST"])
    def post_heading():
        """
        Request a heading for the next tick.

        Body: {"direction": "UP" | "DOWN" | "LEFT" | "RIGHT"}
        Reversals are accepted but ignored ("accepted": false).
        """
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        direction = payload.get("direction")
        try:
            accepted = game.set_heading(direction)
        except InvalidDirectionError as error:
            return jsonify({"error": str(error)}), 400
        except Exception as error:
            logging.error(f"Error setting heading: {error}")
            return jsonify({"error": "Failed to set heading"}), 500

        return jsonify({
            "accepted": accepted,
            "state": game.get_current_state().to_dict()
        })

    @app.route("/api/pause", methods=["POST"])
    def post_pause():
        """
        Toggle pause, or set it explicitly with {"paused": true|false}.
        Ignored once the game is over.
        """
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        paused = payload.get("paused")
        if paused is not None and not isinstance(paused, bool):
            return jsonify({"error": "'paused' must be a boolean"}), 400

        try:
            if paused is None:
                state = game.toggle_pause()
            elif paused:
                state = game.pause()
            else:
                state = game.resume()
        except Exception as error:
            logging.error(f"Error toggling pause: {error}")
            return jsonify({"error": "Failed to toggle pause"}), 500

        return jsonify(state.to_dict())

    @app.route("/api/reset", methods=["POST"])
    def post_reset():
        """Start a new, running game. The high score carries over."""
        try:
            state = game.reset()
        except Exception as error:
            logging.error(f"Error resetting game: {error}")
            return jsonify({"error": "Failed to reset game"}), 500
        return jsonify(state.to_dict())

    @app.route("/api/tick", methods=["POST"])
    def post_tick():
        """Advance one tick by hand, for front ends that run their own timer."""
        try:
            state = game.tick()
        except Exception as error:
            logging.error(f"Error advancing game: {error}")
            return jsonify({"error": "Failed to advance game"}), 500
        return jsonify(state.to_dict())

    @app.route("/api/high-score", methods=["GET"])
    def get_high_score():
        return jsonify({"high_score": game.get_current_state().high_score})

    @app.route("/api/board", methods=["GET"])
    def get_board():
        return Response(game.get_current_state().print_board() + "\n", mimetype="text/plain")

    @app.route("/api/config", methods=["GET"])
    def get_config():
        return jsonify({
            "grid_size": game.config.grid_size,
            "apple_count": game.config.apple_count,
            "tick_interval_ms": game.config.tick_interval_ms,
            "server_clock": clock.running
        })

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    port = int(os.getenv("PORT", "5000"))
    app = create_app(start_clock=os.getenv("SNAKE_SERVER_CLOCK", "1") != "0")
    app.run(host="0.0.0.0", port=port, debug=False)
