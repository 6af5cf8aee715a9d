import pytest


def _registration(**overrides):
    body = {
        "username": "ann.lee",
        "email": "ann@example.com",
        "password": "pw-123",
        "firstName": "Ann",
        "lastName": "Lee",
        "role": "patient",
    }
    body.update(overrides)
    return body


def test_patient_login(client):
    res = client.post(
        "/api/auth/login",
        json={"email": "john@example.com", "password": "password123", "role": "patient"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["user"]["firstName"] == "John"
    assert body["doctorProfile"] is None
    assert "password" not in body["user"]
    assert "passwordHash" not in body["user"]


def test_doctor_login_includes_profile(client):
    res = client.post(
        "/api/auth/login",
        json={"email": "sarah@example.com", "password": "doctor123", "role": "doctor"},
    )

    assert res.status_code == 200
    assert res.json()["doctorProfile"]["specialty"] == "Cardiology"


@pytest.mark.parametrize(
    "credentials",
    [
        {"email": "john@example.com", "password": "wrong", "role": "patient"},
        {"email": "john@example.com", "password": "password123", "role": "doctor"},
        {"email": "ghost@example.com", "password": "password123", "role": "patient"},
    ],
)
def test_login_failures_look_the_same(client, credentials):
    res = client.post("/api/auth/login", json=credentials)

    assert res.status_code == 401
    assert res.json() == {"detail": "Invalid credentials"}


def test_login_rejects_malformed_email(client):
    res = client.post("/api/auth/login", json={"email": "john", "password": "x", "role": "patient"})

    assert res.status_code == 400
    assert res.json()["detail"] == "Validation error"


def test_register_patient(client):
    res = client.post("/api/auth/register", json=_registration())

    assert res.status_code == 201
    user = res.json()["user"]
    assert user["id"] == 8
    assert user["role"] == "patient"
    assert "password" not in user

    login = client.post(
        "/api/auth/login",
        json={"email": "ann@example.com", "password": "pw-123", "role": "patient"},
    )
    assert login.status_code == 200


def test_register_doctor_with_profile(client):
    res = client.post(
        "/api/auth/register",
        json=_registration(
            role="doctor",
            doctorProfile={"specialty": "Oncology", "licenseId": "MED-99999", "rating": 42},
        ),
    )

    assert res.status_code == 201
    profile = res.json()["doctorProfile"]
    assert profile["userId"] == res.json()["user"]["id"]
    assert profile["displayRating"] == 4.2

    doctor = client.get(f"/api/doctors/{profile['userId']}")
    assert doctor.status_code == 200


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "john@example.com"},
        {"email": "john@example.com", "username": "someone.else", "firstName": "Other"},
        {"username": "john.doe"},
    ],
)
def test_register_duplicate_is_conflict(client, overrides):
    res = client.post("/api/auth/register", json=_registration(**overrides))

    assert res.status_code == 409


def test_register_rejects_profile_for_patient(client, seeded_store):
    res = client.post(
        "/api/auth/register",
        json=_registration(doctorProfile={"specialty": "Oncology", "licenseId": "MED-1"}),
    )

    assert res.status_code == 400
    assert seeded_store.get_user_by_email("ann@example.com") is None


def test_register_validation_errors(client):
    missing = client.post("/api/auth/register", json={"email": "x@example.com"})
    unknown = client.post("/api/auth/register", json=_registration(favouriteColour="blue"))
    bad_role = client.post("/api/auth/register", json=_registration(role="admin"))

    for res in (missing, unknown, bad_role):
        assert res.status_code == 400
        assert res.json()["errors"]


def test_register_bad_profile_creates_nothing(client, seeded_store):
    res = client.post(
        "/api/auth/register",
        json=_registration(role="doctor", doctorProfile={"specialty": "Oncology"}),
    )

    assert res.status_code == 400
    assert len(seeded_store.users) == 7
