from unittest.mock import MagicMock

from hospital_records.core.config import Settings
from hospital_records.core.database import get_db
from hospital_records.main import app


class TestApplication:

    def test_root(self, client):
        """Test the root endpoint lists the resources."""
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["resources"] == ["/doctor", "/patient"]
        assert "version" in data

    def test_health(self, client):
        """Test the health check when the store answers pings."""
        app.dependency_overrides[get_db] = lambda: MagicMock()

        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_store_down(self, broken_client):
        """Test the health check when the store is unreachable."""
        response = broken_client.get("/health")
        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    def test_process_time_header(self, client):
        """Test every response carries its processing time."""
        response = client.get("/")
        assert "X-Process-Time" in response.headers

    def test_unknown_route(self, client):
        """Test the error body for an unknown path."""
        response = client.get("/nurse")
        assert response.status_code == 404

        data = response.json()
        assert data["error"] == "Not Found"
        assert data["path"] == "/nurse"

    def test_method_not_allowed(self, client):
        """Test a verb the resource does not support."""
        response = client.patch("/doctor")
        assert response.status_code == 405
        assert "GET" in response.headers["allow"]

    def test_any_host_accepted_by_default(self, client):
        """Test requests addressed to a deployment hostname are served."""
        response = client.get(
            "/doctor",
            headers={"Host": "records.hospital.internal:3000"}
        )
        assert response.status_code == 200
        assert response.json() == []


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TESTING", raising=False)
        settings = Settings(_env_file=None)

        assert settings.PORT == 3000
        assert settings.MONGODB_TIMEOUT_MS == 30000
        assert settings.get_database_name == "hospital_records"
        assert settings.ALLOWED_HOSTS == ["*"]

    def test_testing_database(self, monkeypatch):
        monkeypatch.setenv("TESTING", "1")
        settings = Settings(_env_file=None)

        assert settings.TESTING is True
        assert settings.get_database_name == "hospital_records_test"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://db.internal:27017/")
        monkeypatch.setenv("PORT", "8080")
        settings = Settings(_env_file=None)

        assert settings.MONGODB_URI == "mongodb://db.internal:27017/"
        assert settings.PORT == 8080
