BOOKING = {
    "patientId": 1,
    "doctorId": 4,
    "date": "2024-06-10",
    "time": "09:15",
    "visitType": "video",
    "reason": "Rash",
}


def test_create_appointment(client):
    res = client.post("/api/appointments", json=BOOKING)

    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 3
    assert body["status"] == "scheduled"
    assert body["time"] == "09:15:00"


def test_identical_bookings_are_both_accepted(client):
    first = client.post("/api/appointments", json=BOOKING).json()
    second = client.post("/api/appointments", json=BOOKING).json()

    assert second["id"] > first["id"]
    assert len(client.get("/api/doctors/4/appointments").json()) == 2


def test_create_appointment_validation(client):
    bad_visit = client.post("/api/appointments", json={**BOOKING, "visitType": "phone"})
    missing_date = client.post("/api/appointments", json={k: v for k, v in BOOKING.items() if k != "date"})

    assert bad_visit.status_code == 400
    assert missing_date.status_code == 400


def test_update_status(client):
    res = client.patch("/api/appointments/1/status", json={"status": "completed"})

    assert res.status_code == 200
    assert res.json()["status"] == "completed"
    statuses = [a["status"] for a in client.get("/api/patients/1/appointments").json()]
    assert statuses == ["completed", "scheduled"]


def test_update_status_errors(client):
    assert client.patch("/api/appointments/99/status", json={"status": "completed"}).status_code == 404
    assert client.patch("/api/appointments/1/status", json={"status": "done"}).status_code == 400
    assert client.patch("/api/appointments/x/status", json={"status": "completed"}).status_code == 400
