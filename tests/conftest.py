import os

import pytest
from fastapi.testclient import TestClient

# Predictable settings before the app module is imported.
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/phone_verify_test")
os.environ.setdefault("OTP_TTL_SECONDS", "0")

import phone_verify.main as main  # noqa: E402  (import after env vars are set)
from phone_verify.core.database import MongoDB  # noqa: E402
from phone_verify.modules.otp.repository import OTPRepository  # noqa: E402
from phone_verify.modules.users.repository import UserRepository  # noqa: E402


class InMemoryUserRepository:
    def __init__(self):
        self.users = {}

    async def create_user_if_absent(self, user):
        if user.phone in self.users:
            return False
        self.users[user.phone] = user.model_dump()
        return True

    async def update_user_details(self, phone, name, dob, gender):
        user = self.users.get(phone)
        if user is None:
            return False
        user.update({"name": name, "dob": dob, "gender": gender})
        return True


class InMemoryOTPRepository:
    def __init__(self):
        self.otps = {}

    async def upsert_otp(self, record):
        self.otps[record.phone] = record.model_dump()

    async def find_otp(self, phone):
        return self.otps.get(phone)

    async def consume_otp(self, phone, otp):
        record = self.otps.get(phone)
        if record is None or record["otp"] != otp:
            return None
        return self.otps.pop(phone)


@pytest.fixture()
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture()
def otp_repo():
    return InMemoryOTPRepository()


@pytest.fixture()
def client(monkeypatch, user_repo, otp_repo):
    """TestClient with Mongo startup patched out and in-memory repositories."""

    async def _connect(*args, **kwargs):
        return MongoDB()

    async def _close(*args, **kwargs):
        return None

    monkeypatch.setattr(main, "connect_to_mongo", _connect)
    monkeypatch.setattr(main, "close_mongo_connection", _close)

    main.app.dependency_overrides[UserRepository] = lambda: user_repo
    main.app.dependency_overrides[OTPRepository] = lambda: otp_repo

    with TestClient(main.app) as test_client:
        yield test_client

    main.app.dependency_overrides.clear()
