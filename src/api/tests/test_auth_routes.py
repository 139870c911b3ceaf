"""Unit tests for authentication routes and the bearer-token dependency."""

import unittest
import sys
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi.testclient import TestClient
from api.main import app
from api.dependencies import get_user_repo
from api.security import create_access_token, verify_token
from adapter.fake.user_repository import FakeUserRepository


@patch('services.auth_service.BCRYPT_ROUNDS', 4)
class TestAuthRoutes(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeUserRepository()
        app.dependency_overrides[get_user_repo] = lambda: self.repo

    def tearDown(self):
        app.dependency_overrides.clear()

    def _register(self, email="reader@example.com", password="Secret123", name="Reader"):
        return self.client.post("/auth/register", json={"email": email, "password": password, "name": name})

    def test_register_returns_token_and_user(self):
        response = self._register()

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["user"]["email"], "reader@example.com")
        self.assertNotIn("password_hash", data["user"])
        self.assertEqual(verify_token(data["token"]), data["user"]["id"])

    def test_register_duplicate_is_409(self):
        self._register()

        self.assertEqual(self._register().status_code, 409)

    def test_register_weak_password_is_400(self):
        self.assertEqual(self._register(password="weak").status_code, 400)

    def test_login(self):
        self._register()

        response = self.client.post("/auth/login", json={"email": "reader@example.com", "password": "Secret123"})

        self.assertEqual(response.status_code, 200)
        self.assertIn("token", response.json())

    def test_login_wrong_password_is_401(self):
        self._register()

        response = self.client.post("/auth/login", json={"email": "reader@example.com", "password": "Wrong1234"})

        self.assertEqual(response.status_code, 401)

    def test_me_with_bearer_token(self):
        token = self._register().json()["token"]

        response = self.client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Reader")

    def test_me_without_token_is_401(self):
        self.assertEqual(self.client.get("/auth/me").status_code, 401)

    def test_me_with_invalid_token_is_401(self):
        response = self.client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

        self.assertEqual(response.status_code, 401)

    def test_me_for_deleted_user_is_401(self):
        token = create_access_token("no-such-user")

        response = self.client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        self.assertEqual(response.status_code, 401)


if __name__ == '__main__':
    unittest.main()
