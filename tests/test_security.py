"""
Unit tests for token and password helpers, settings parsing and health checks.
"""

import json
import logging
from datetime import timedelta

import pytest
from jose import JWTError, jwt

from jobboard.core.config import Settings, settings
from jobboard.core.logging_config import JobBoardJsonFormatter
from jobboard.core.security import (
    create_access_token,
    decode_token,
    get_password_hash,
    verify_password,
)


class TestPasswordHashing:
    """bcrypt helpers"""

    def test_hash_and_verify(self):
        hashed = get_password_hash("password123")

        assert hashed != "password123"
        assert verify_password("password123", hashed)
        assert not verify_password("password124", hashed)

    def test_hashes_are_salted(self):
        assert get_password_hash("password123") != get_password_hash("password123")

    def test_long_password_truncated_to_bcrypt_limit(self):
        """Only the first 72 bytes take part in the hash"""
        base = "a" * 72
        hashed = get_password_hash(base + "tail")

        assert verify_password(base, hashed)
        assert verify_password(base + "different-tail", hashed)


class TestTokens:
    """JWT helpers"""

    def test_round_trip_claims(self):
        token = create_access_token({"sub": "user-1"})

        payload = decode_token(token)
        assert payload["sub"] == "user-1"
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-5))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_foreign_signature_rejected(self):
        token = jwt.encode({"sub": "user-1"}, "some-other-secret", algorithm="HS256")

        with pytest.raises(JWTError):
            decode_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(JWTError):
            decode_token("invalidtoken")


class TestSettings:
    """Environment parsing"""

    def test_cors_origins_comma_separated(self):
        s = Settings(BACKEND_CORS_ORIGINS="http://a.test, http://b.test")
        assert s.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_database_url_override(self):
        s = Settings(DATABASE_URL="sqlite:///./local.db")
        assert s.SQLALCHEMY_DATABASE_URI == "sqlite:///./local.db"

    def test_postgres_url_from_parts(self):
        s = Settings(
            DATABASE_URL=None,
            POSTGRES_USER="u",
            POSTGRES_PASSWORD="p",
            POSTGRES_SERVER="db",
            POSTGRES_PORT="5433",
            POSTGRES_DB="jobs",
        )
        assert s.SQLALCHEMY_DATABASE_URI == "postgresql://u:p@db:5433/jobs"


class TestHealthChecks:
    """Monitoring endpoints"""

    def test_basic_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_check(self, client):
        response = client.get("/health/detailed")
        assert response.status_code == 200
        data = response.json()
        assert data["checks"]["database"]["status"] == "healthy"

    def test_root_reports_variant(self, client, open_client):
        assert client.get("/").json()["auth_enabled"] is True
        assert open_client.get("/").json()["auth_enabled"] is False


class TestLogging:
    """JSON log formatting"""

    def test_json_formatter_fields(self):
        formatter = JobBoardJsonFormatter("%(message)s %(module)s %(funcName)s")
        record = logging.LogRecord("jobboard.test", logging.WARNING, "/srv/jobs.py", 12, "hello", None, None)

        data = json.loads(formatter.format(record))

        assert data["message"] == "hello"
        assert data["level"] == "WARNING"
        assert data["logger"] == "jobboard.test"
        assert data["service"] == settings.PROJECT_NAME
        assert data["location"] == "/srv/jobs.py:12"

    def test_info_records_have_no_location(self):
        formatter = JobBoardJsonFormatter("%(message)s")
        record = logging.LogRecord("jobboard.test", logging.INFO, "/srv/jobs.py", 12, "hi", None, None)

        assert "location" not in json.loads(formatter.format(record))
