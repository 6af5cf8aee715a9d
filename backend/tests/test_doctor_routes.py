def test_list_doctors(client):
    res = client.get("/api/doctors")

    assert res.status_code == 200
    doctors = res.json()
    assert len(doctors) == 6
    assert doctors[0]["firstName"] == "Sarah"
    assert doctors[0]["profile"]["rating"] == 45
    assert doctors[0]["profile"]["displayRating"] == 4.5
    assert doctors[0]["profile"]["stars"] == {"full": 4, "half": 1, "empty": 0}
    assert all("password" not in d and "passwordHash" not in d for d in doctors)


def test_list_skips_profiles_without_user(client, seeded_store):
    seeded_store.users.remove(2)

    doctors = client.get("/api/doctors").json()

    assert len(doctors) == 5
    assert "Sarah" not in [d["firstName"] for d in doctors]


def test_list_doctors_filters(client):
    by_specialty = client.get("/api/doctors", params={"specialty": "Neurology"}).json()
    by_search = client.get("/api/doctors", params={"search": "chen"}).json()
    by_rating = client.get("/api/doctors", params={"minRating": 5}).json()

    assert [d["lastName"] for d in by_specialty] == ["Patel"]
    assert [d["lastName"] for d in by_search] == ["Chen"]
    assert sorted(d["lastName"] for d in by_rating) == ["Chen", "Wilson"]


def test_get_doctor(client):
    res = client.get("/api/doctors/3")

    assert res.status_code == 200
    assert res.json()["profile"]["specialty"] == "General Practice"


def test_get_doctor_not_found(client):
    assert client.get("/api/doctors/1").status_code == 404
    assert client.get("/api/doctors/999").status_code == 404


def test_get_doctor_without_profile(client):
    registered = client.post(
        "/api/auth/register",
        json={
            "username": "new.doc",
            "email": "newdoc@example.com",
            "password": "pw",
            "firstName": "New",
            "lastName": "Doc",
            "role": "doctor",
        },
    ).json()

    res = client.get(f"/api/doctors/{registered['user']['id']}")

    assert res.status_code == 404
    assert res.json()["detail"] == "Doctor profile not found"


def test_non_numeric_doctor_id(client):
    assert client.get("/api/doctors/abc").status_code == 400


def test_doctor_appointments_include_patient_summary(client):
    res = client.get("/api/doctors/2/appointments")

    assert res.status_code == 200
    appointments = res.json()
    assert len(appointments) == 1
    assert appointments[0]["patient"] == {
        "id": 1,
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@example.com",
    }
