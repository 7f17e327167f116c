"""End-to-end tests for registration, login and logout."""

from tests.harness import create_client_fixture

client = create_client_fixture()


class TestRegister:
    """POST /auth/register."""

    def test_register_creates_account_and_sets_cookie(self, client):
        """Should return 201 with a token and set the session cookie."""
        # Act
        response = client.post(
            "/auth/register", json={"username": "alice", "password": "wonderland"}
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["token"]
        assert data["user_id"]
        assert "auth_token" in response.cookies

    def test_register_duplicate_username_conflicts(self, client):
        client.post(
            "/auth/register", json={"username": "alice", "password": "wonderland"}
        )

        response = client.post(
            "/auth/register", json={"username": "alice", "password": "other"}
        )

        assert response.status_code == 409

    def test_register_blank_password_rejected(self, client):
        response = client.post(
            "/auth/register", json={"username": "alice", "password": ""}
        )

        assert response.status_code == 400

    def test_register_overlong_password_rejected(self, client):
        """A 100 character password is a client error, and logging in with it fails."""
        response = client.post(
            "/auth/register", json={"username": "bob", "password": "x" * 100}
        )

        assert response.status_code == 400
        assert "72 bytes" in response.json()["detail"]
        login = client.post(
            "/auth/login", json={"username": "bob", "password": "x" * 100}
        )
        assert login.status_code == 404

    def test_register_missing_fields_rejected(self, client):
        response = client.post("/auth/register", json={"username": "alice"})

        assert response.status_code == 422


class TestLogin:
    """POST /auth/login."""

    def test_login_returns_token_for_valid_credentials(self, client):
        # Arrange
        registered = client.post(
            "/auth/register", json={"username": "alice", "password": "wonderland"}
        ).json()
        client.cookies.clear()

        # Act
        response = client.post(
            "/auth/login", json={"username": "alice", "password": "wonderland"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user_id"] == registered["user_id"]
        assert "auth_token" in response.cookies

    def test_login_wrong_password_is_unauthorized(self, client):
        client.post(
            "/auth/register", json={"username": "alice", "password": "wonderland"}
        )

        response = client.post(
            "/auth/login", json={"username": "alice", "password": "looking-glass"}
        )

        assert response.status_code == 401

    def test_login_unknown_user_is_not_found(self, client):
        response = client.post(
            "/auth/login", json={"username": "nobody", "password": "whatever"}
        )

        assert response.status_code == 404


class TestLogout:
    """POST /auth/logout."""

    def test_logout_clears_session(self, client):
        """After logout the cookie is gone and quotes require auth again."""
        # Arrange
        client.post(
            "/auth/register", json={"username": "alice", "password": "wonderland"}
        )
        assert client.get("/quotes").status_code == 200

        # Act
        response = client.post("/auth/logout")

        # Assert
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get("/quotes").status_code == 401


class TestHealth:
    """GET /health."""

    def test_health_needs_no_auth(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
