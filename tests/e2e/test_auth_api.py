"""End-to-end tests for signup and login."""

from tests.e2e.conftest import signup


class TestSignupAPI:
    """POST /api/auth/signup."""

    def test_signup_returns_token_and_profile(self, client):
        body = signup(client)

        assert body["success"] is True
        assert body["message"] == "User created successfully"
        assert body["token"]
        user = body["user"]
        assert user["email"] == "ada@example.com"
        assert user["fullName"] == "Ada Lovelace"
        assert user["diamonds"] == 0
        assert user["scores"] == []
        assert "password" not in user
        assert "passwordHash" not in user

    def test_token_authenticates_new_user(self, client):
        token = signup(client)["token"]

        response = client.get(
            "/api/scores/diamonds", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "diamonds": 0}

    def test_duplicate_email_is_409(self, client):
        signup(client)

        response = client.post(
            "/api/auth/signup",
            json={"email": "ada@example.com", "fullName": "Imposter", "password": "x"},
        )

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "User already exists with this email",
        }

    def test_missing_field_is_400(self, client):
        response = client.post(
            "/api/auth/signup", json={"email": "ada@example.com", "password": "pw"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "fullName" in body["message"]

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/api/auth/signup",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestLoginAPI:
    """POST /api/auth/login."""

    def test_login_returns_token_for_same_user(self, client):
        created = signup(client)

        response = client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "pw123"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"]["id"] == created["user"]["id"]

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        signup(client)

        wrong_password = client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "nope"}
        )
        unknown_email = client.post(
            "/api/auth/login", json={"email": "bob@example.com", "password": "pw123"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "Invalid email or password"
