from datetime import date

import pytest
from fastapi.testclient import TestClient

from healthportal.core.config import Settings
from healthportal.main import create_app
from healthportal.services.seed import seed_sample_data
from healthportal.services.storage import MemStorage

# Cheap hashing keeps the seeded store fast to build
FAST_HASH = "pbkdf2:sha256:1000"

SEED_DAY = date(2024, 5, 1)


@pytest.fixture
def settings():
    return Settings(
        SEED_SAMPLE_DATA=False,
        PASSWORD_HASH_METHOD=FAST_HASH,
        TYPING_DELAY_MS=0,
        MAX_UPLOAD_BYTES=1024,
    )


@pytest.fixture
def store():
    return MemStorage(password_hash_method=FAST_HASH)


@pytest.fixture
def seeded_store(store):
    seed_sample_data(store, today=SEED_DAY)
    return store


@pytest.fixture
def client(settings, seeded_store):
    return TestClient(create_app(settings=settings, store=seeded_store))
