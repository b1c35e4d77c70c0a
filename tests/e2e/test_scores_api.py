"""End-to-end tests for scores and diamonds."""

from fastapi.testclient import TestClient
import jwt
import pytest

from quiz.config import Settings


class TestAuthGuard:
    """Bearer authentication on protected routes."""

    def test_missing_header_is_401(self, client: TestClient):
        response = client.get("/api/scores")

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Access token required",
        }

    def test_invalid_token_is_403(self, client: TestClient):
        response = client.get(
            "/api/scores", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Invalid or expired token"

    def test_token_for_deleted_user_is_404(self, client: TestClient):
        """A well-signed token whose user no longer exists."""
        settings = Settings()
        token = jwt.encode(
            {
                "user_id": "00000000-0000-0000-0000-000000000000",
                "iat": 1_700_000_000,
                "exp": 4_000_000_000,
            },
            settings.auth.jwt_secret,
            algorithm=settings.auth.jwt_algorithm,
        )

        response = client.get(
            "/api/scores", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}


class TestScoresAPI:
    """GET/POST /api/scores and GET /api/scores/diamonds."""

    def test_submit_credits_diamonds(self, client: TestClient, auth_headers):
        # Act
        response = client.post(
            "/api/scores",
            json={"score": 7, "category": "math", "correctAnswers": 3},
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Score saved successfully"
        assert body["diamondsEarned"] == 15
        assert body["totalDiamonds"] == 15
        assert body["score"]["score"] == 7
        assert body["score"]["category"] == "math"
        assert body["score"]["correctAnswers"] == 3

    def test_balance_accumulates(self, client: TestClient, auth_headers):
        client.post(
            "/api/scores",
            json={"score": 2, "category": "math", "correctAnswers": 2},
            headers=auth_headers,
        )
        second = client.post(
            "/api/scores",
            json={"score": 7, "category": "math", "correctAnswers": 3},
            headers=auth_headers,
        )

        assert second.json()["diamondsEarned"] == 15
        assert second.json()["totalDiamonds"] == 25

        diamonds = client.get("/api/scores/diamonds", headers=auth_headers)
        assert diamonds.json() == {"success": True, "diamonds": 25}

    def test_omitted_correct_answers(self, client: TestClient, auth_headers):
        response = client.post(
            "/api/scores", json={"score": 5, "category": "art"}, headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["diamondsEarned"] == 0
        assert response.json()["totalDiamonds"] == 0

    def test_history_round_trip(self, client: TestClient, auth_headers):
        for score, category in [(3, "math"), (9, "science")]:
            client.post(
                "/api/scores",
                json={"score": score, "category": category, "correctAnswers": 1},
                headers=auth_headers,
            )

        response = client.get("/api/scores", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert [(s["score"], s["category"]) for s in body["scores"]] == [
            (3, "math"),
            (9, "science"),
        ]
        assert body["diamonds"] == 10

    def test_missing_category_is_400(self, client: TestClient, auth_headers):
        response = client.post("/api/scores", json={"score": 5}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Score and category are required",
        }

    def test_non_numeric_score_is_400(self, client: TestClient, auth_headers):
        response = client.post(
            "/api/scores",
            json={"score": "lots", "category": "math"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_score_beyond_int32_is_400(self, client: TestClient, auth_headers):
        # Act
        response = client.post(
            "/api/scores",
            json={"score": 3_000_000_000, "category": "math"},
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "score is out of range",
        }

    def test_correct_answers_beyond_int32_is_400(
        self, client: TestClient, auth_headers
    ):
        response = client.post(
            "/api/scores",
            json={"score": 5, "category": "math", "correctAnswers": 2**31},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "correctAnswers is out of range"
        assert client.get("/api/scores/diamonds", headers=auth_headers).json()[
            "diamonds"
        ] == 0

    @pytest.mark.parametrize(
        "body",
        [
            {"score": True, "category": "math"},
            {"score": 5, "category": "math", "correctAnswers": True},
            {"score": "5", "category": "math"},
        ],
    )
    def test_non_integer_json_is_400(self, client: TestClient, auth_headers, body):
        response = client.post("/api/scores", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["success"] is False
        history = client.get("/api/scores", headers=auth_headers).json()
        assert history["scores"] == []
