"""
Tests for the Flask API in app.py.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app, get_allowed_origins
from config import GameConfig
from data_access.high_score import InMemoryHighScoreStore
from domain import GameState, UP


@pytest.fixture
def game():
    from engine import SnakeGame
    config = GameConfig(grid_size=10, apple_count=3)
    return SnakeGame(config, high_score_store=InMemoryHighScoreStore(initial=25), seed=3)


@pytest.fixture
def client(game):
    app = create_app(game=game)
    app.config["TESTING"] = True
    return app.test_client()


def place(game, snake, apples=((0, 0),), paused=False, **kwargs):
    game.state = GameState(
        snake=list(snake),
        apples=list(apples),
        direction=UP,
        grid_size=game.config.grid_size,
        paused=paused,
        **kwargs
    )


class TestStateEndpoints:

    def test_get_state(self, client):
        response = client.get("/api/state")
        assert response.status_code == 200

        data = response.get_json()
        assert data["snake"] == [[5, 5], [5, 6], [5, 7]]
        assert len(data["apples"]) == 3
        assert data["status"] == "paused"
        assert data["high_score"] == 25
        assert data["grid_size"] == 10

    def test_high_score(self, client):
        response = client.get("/api/high-score")
        assert response.get_json() == {"high_score": 25}

    def test_board_is_plain_text(self, client):
        response = client.get("/api/board")
        assert response.status_code == 200
        assert response.mimetype == "text/plain"
        assert "H" in response.get_data(as_text=True)

    def test_config(self, client):
        data = client.get("/api/config").get_json()
        assert data == {
            "grid_size": 10,
            "apple_count": 3,
            "tick_interval_ms": 120,
            "server_clock": False,
        }


class TestInputEndpoints:

    def test_heading_then_tick(self, client, game):
        place(game, [(5, 5), (5, 6), (5, 7)])

        response = client.post("/api/heading", json={"direction": "left"})
        assert response.status_code == 200
        assert response.get_json()["accepted"] is True

        data = client.post("/api/tick").get_json()
        assert data["direction"] == "LEFT"
        assert data["snake"][0] == [4, 5]

    def test_reverse_heading_not_accepted(self, client, game):
        place(game, [(5, 5), (5, 6), (5, 7)])

        response = client.post("/api/heading", json={"direction": "DOWN"})
        assert response.status_code == 200
        assert response.get_json()["accepted"] is False

    @pytest.mark.parametrize("payload", [
        {"direction": "NORTH"},
        {"direction": 3},
        {},
        ["UP"],
        "UP",
        5,
    ])
    def test_bad_heading_rejected(self, client, payload):
        response = client.post("/api/heading", json=payload)
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_pause_toggle(self, client):
        assert client.post("/api/pause").get_json()["status"] == "running"
        assert client.post("/api/pause").get_json()["status"] == "paused"

    def test_pause_explicit(self, client):
        assert client.post("/api/pause", json={"paused": False}).get_json()["paused"] is False
        assert client.post("/api/pause", json={"paused": False}).get_json()["paused"] is False
        assert client.post("/api/pause", json={"paused": True}).get_json()["paused"] is True

    @pytest.mark.parametrize("payload", [{"paused": "yes"}, "x", ["paused"], 0])
    def test_pause_rejects_non_boolean(self, client, payload):
        response = client.post("/api/pause", json=payload)
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_pause_rejects_body_that_is_not_an_object(self, client, game):
        response = client.post("/api/pause", json=[True])

        assert response.status_code == 400
        assert response.get_json() == {"error": "Request body must be a JSON object"}
        assert game.get_current_state().paused is True

    def test_tick_while_paused_does_nothing(self, client):
        data = client.post("/api/tick").get_json()
        assert data["tick"] == 0
        assert data["snake"][0] == [5, 5]

    def test_game_over_then_reset(self, client, game):
        place(game, [(0, 0), (0, 1)], score=40, high_score=40)

        data = client.post("/api/tick").get_json()
        assert data["status"] == "game_over"
        assert data["death_reason"] == "wall"

        data = client.post("/api/reset").get_json()
        assert data["status"] == "running"
        assert data["score"] == 0
        assert data["high_score"] == 40

    def test_eating_reports_new_high_score(self, client, game):
        place(game, [(5, 5), (5, 6)], apples=[(5, 4)], score=20, high_score=25)

        client.post("/api/tick")

        assert client.get("/api/high-score").get_json() == {"high_score": 30}
        assert game.high_score_store.load() == 30

    def test_engine_failure_returns_500(self, client, game, monkeypatch):
        def broken_tick():
            raise RuntimeError("boom")

        monkeypatch.setattr(game, "tick", broken_tick)
        response = client.post("/api/tick")

        assert response.status_code == 500
        assert response.get_json() == {"error": "Failed to advance game"}


class TestCors:

    def test_default_origins(self, monkeypatch):
        monkeypatch.delenv("CORS_ALLOWED_ORIGINS", raising=False)
        assert "http://localhost:3000" in get_allowed_origins()

    def test_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://snake.example, http://localhost:8080 ,")
        assert get_allowed_origins() == ["https://snake.example", "http://localhost:8080"]

    def test_cors_header_on_api(self, client):
        response = client.get("/api/state", headers={"Origin": "http://localhost:3000"})
        assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"
