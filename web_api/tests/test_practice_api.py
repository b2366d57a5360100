"""Tests for prompt practice endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from core import database

PERFECT_PROMPT = "For example, give precise background for the audience."


class TestScorePrompt:
    """Tests for POST /api/practice/score."""

    def test_anonymous_gets_score_without_reward(self, client, mock_auth_anonymous):
        with patch(
            "web_api.routes.practice.award_submission", new_callable=AsyncMock
        ) as mock_award:
            response = client.post(
                "/api/practice/score",
                json={
                    "prompt": "Explain AI in simple terms for beginners, with examples."
                },
            )

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 6
        assert data["maxScore"] == 10
        assert data["feedback"] == [
            "Add specific details or requirements to make the prompt more targeted.",
            "Provide context, such as the purpose or intended audience.",
        ]
        assert data["reward"] is None
        mock_award.assert_not_called()

    def test_signed_in_user_gets_reward(self, client, mock_auth, mock_conn):
        reward = {"points": 15, "pointsAwarded": 5, "badgeAwarded": True}
        with (
            patch(
                "web_api.routes.practice.get_transaction", return_value=mock_conn
            ),
            patch(
                "web_api.routes.practice.award_submission",
                new_callable=AsyncMock,
                return_value=reward,
            ) as mock_award,
        ):
            response = client.post(
                "/api/practice/score", json={"prompt": PERFECT_PROMPT}
            )

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 10
        assert data["feedback"] == []
        assert data["reward"] == reward
        mock_award.assert_awaited_once_with(mock_conn, mock_auth["sub"], 10)

    def test_blank_prompt_rejected(self, client, mock_auth_anonymous):
        response = client.post("/api/practice/score", json={"prompt": "   "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Please enter a prompt."

    def test_missing_prompt_is_validation_error(self, client, mock_auth_anonymous):
        response = client.post("/api/practice/score", json={})
        assert response.status_code == 422

    def test_database_failure_returns_500(self, client, mock_auth, mock_conn):
        error = OperationalError("UPDATE user_points", {}, Exception("connection lost"))
        with (
            patch(
                "web_api.routes.practice.get_transaction", return_value=mock_conn
            ),
            patch(
                "web_api.routes.practice.award_submission",
                new_callable=AsyncMock,
                side_effect=error,
            ),
            patch("web_api.routes.practice.sentry_sdk") as mock_sentry,
        ):
            response = client.post(
                "/api/practice/score", json={"prompt": PERFECT_PROMPT}
            )

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to update points:")
        mock_sentry.capture_exception.assert_called_once_with(error)


class TestScorePromptWithoutDatabase:
    """The reward step runs against the real engine, which can't connect."""

    @pytest.fixture(autouse=True)
    def fresh_engine(self, monkeypatch):
        monkeypatch.setattr(database, "_engine", None)

    def test_database_url_not_set(self, client, mock_auth, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with patch("web_api.routes.practice.sentry_sdk") as mock_sentry:
            response = client.post(
                "/api/practice/score", json={"prompt": PERFECT_PROMPT}
            )

        assert response.status_code == 500
        assert response.json()["detail"] == (
            "Failed to update points: DATABASE_URL is not set"
        )
        mock_sentry.capture_exception.assert_called_once()

    def test_database_unreachable(self, client, mock_auth, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@127.0.0.1:1/db")
        with patch("web_api.routes.practice.sentry_sdk") as mock_sentry:
            response = client.post(
                "/api/practice/score", json={"prompt": PERFECT_PROMPT}
            )

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to update points:")
        mock_sentry.capture_exception.assert_called_once()
