import asyncio
import unittest
from datetime import datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.auth import create_access_token, hash_password, verify_password
from app.models.user import RevokedToken
from tests.base import API, ApiTestCase


class PasswordHashingTests(unittest.TestCase):
    def test_hash_and_verify(self):
        hashed = hash_password("correct-horse-battery")
        self.assertNotEqual(hashed, "correct-horse-battery")
        self.assertTrue(verify_password("correct-horse-battery", hashed))
        self.assertFalse(verify_password("wrong-password", hashed))

    def test_long_passwords_are_accepted(self):
        hashed = hash_password("x" * 100)
        self.assertTrue(verify_password("x" * 100, hashed))


class AuthApiTests(ApiTestCase):
    def test_register_login_and_me(self):
        headers = self.signup("owner@example.com")

        response = self.client.get(f"{API}/auth/me", headers=headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["email"], "owner@example.com")
        self.assertNotIn("hashed_password", response.json())

    def test_duplicate_email_is_rejected(self):
        self.signup("owner@example.com")
        response = self.client.post(
            f"{API}/auth/register",
            json={"email": "owner@example.com", "password": self.password},
        )
        self.assertEqual(response.status_code, 409)

    def test_wrong_password(self):
        self.signup("owner@example.com")
        response = self.client.post(
            f"{API}/auth/login", json={"email": "owner@example.com", "password": "nope-nope"}
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers["www-authenticate"], "Bearer")

    def test_data_routes_require_authentication(self):
        for path in ("/customers/", "/vehicles/", "/services/", "/dashboard/stats", "/export/customers"):
            response = self.client.get(f"{API}{path}")
            self.assertEqual(response.status_code, 401, path)

    def test_malformed_and_expired_tokens(self):
        self.signup("owner@example.com")
        response = self.client.get(
            f"{API}/customers/", headers={"Authorization": "Bearer not-a-token"}
        )
        self.assertEqual(response.status_code, 401)

        expired = create_access_token(1, expires_delta=timedelta(minutes=-5))
        response = self.client.get(
            f"{API}/customers/", headers={"Authorization": f"Bearer {expired}"}
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Token has expired")

    def test_logout_revokes_token(self):
        headers = self.signup("owner@example.com")

        response = self.client.post(f"{API}/auth/logout", headers=headers)
        self.assertEqual(response.status_code, 204)

        response = self.client.get(f"{API}/customers/", headers=headers)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Token has been revoked")

    def test_logout_drops_expired_revocations(self):
        headers = self.signup("owner@example.com")
        now = datetime.now(timezone.utc)

        async def seed():
            async with async_sessionmaker(self.engine)() as session:
                session.add(RevokedToken(jti="stale", expires_at=now - timedelta(hours=1)))
                session.add(RevokedToken(jti="live", expires_at=now + timedelta(hours=1)))
                await session.commit()

        async def revoked_ids():
            async with async_sessionmaker(self.engine)() as session:
                return set((await session.execute(select(RevokedToken.jti))).scalars())

        asyncio.run(seed())
        response = self.client.post(f"{API}/auth/logout", headers=headers)
        self.assertEqual(response.status_code, 204)

        remaining = asyncio.run(revoked_ids())
        self.assertNotIn("stale", remaining)
        self.assertIn("live", remaining)
        self.assertEqual(len(remaining), 2)
