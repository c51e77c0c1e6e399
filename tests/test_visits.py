"""Visit history for a doctor's patients."""

from conftest import create_patient


def record_visit(client, headers, patient_id, **fields):
    payload = {"patient": patient_id, "reason": "Checkup", **fields}
    response = client.post("/api/visits", json=payload, headers=headers)
    assert response.status_code == 201, response.json()
    return response.json()["visit"]


def test_create_visit_with_medications(client, doctor):
    headers, body = doctor
    patient = create_patient(client, headers)

    visit = record_visit(
        client, headers, patient["id"],
        visitDate="2024-02-01T09:30:00",
        diagnosis="Seasonal flu",
        prescribedMedications=[
            {"name": "Oseltamivir", "dosage": "75mg", "frequency": "Twice daily", "duration": "5 days"}
        ],
        nextAppointment="2024-02-08T09:30:00",
    )

    assert visit["patient"] == patient["id"]
    assert visit["doctor"] == body["id"]
    assert visit["visitDate"].startswith("2024-02-01T09:30:00")
    assert visit["prescribedMedications"][0]["duration"] == "5 days"
    assert visit["nextAppointment"].startswith("2024-02-08")


def test_visit_date_defaults_to_now(client, doctor):
    headers, _ = doctor
    patient = create_patient(client, headers)

    visit = record_visit(client, headers, patient["id"])

    assert visit["visitDate"]


def test_incomplete_medication_is_rejected(client, doctor):
    headers, _ = doctor
    patient = create_patient(client, headers)

    response = client.post("/api/visits", json={
        "patient": patient["id"],
        "reason": "Checkup",
        "prescribedMedications": [{"name": "Ibuprofen", "dosage": "200mg"}],
    }, headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_create_requires_valid_patient_id(client, doctor):
    headers, _ = doctor

    response = client.post("/api/visits", json={"patient": "bogus", "reason": "Checkup"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Valid Patient ID is required in the request body"


def test_cannot_record_visit_for_other_doctors_patient(client, doctor, other_doctor):
    headers, _ = doctor
    other_headers, _ = other_doctor
    patient = create_patient(client, other_headers)

    response = client.post("/api/visits", json={"patient": patient["id"], "reason": "Checkup"}, headers=headers)

    assert response.status_code == 404


def test_list_requires_patient_id(client, doctor):
    headers, _ = doctor

    response = client.get("/api/visits", headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Valid Patient ID is required as a query parameter"


def test_list_is_newest_first(client, doctor):
    headers, _ = doctor
    patient = create_patient(client, headers)
    record_visit(client, headers, patient["id"], reason="First", visitDate="2024-01-01T10:00:00")
    record_visit(client, headers, patient["id"], reason="Third", visitDate="2024-03-01T10:00:00")
    record_visit(client, headers, patient["id"], reason="Second", visitDate="2024-02-01T10:00:00")

    response = client.get(f"/api/visits?patientId={patient['id']}", headers=headers)

    assert response.status_code == 200
    assert [v["reason"] for v in response.json()["visits"]] == ["Third", "Second", "First"]


def test_list_for_other_doctors_patient_is_not_found(client, doctor, other_doctor):
    headers, _ = doctor
    other_headers, _ = other_doctor
    patient = create_patient(client, other_headers)
    record_visit(client, other_headers, patient["id"])

    response = client.get(f"/api/visits?patientId={patient['id']}", headers=headers)

    assert response.status_code == 404


def test_get_visit_embeds_patient_name(client, doctor, other_doctor):
    headers, _ = doctor
    other_headers, _ = other_doctor
    patient = create_patient(client, headers)
    visit = record_visit(client, headers, patient["id"])

    response = client.get(f"/api/visits/{visit['id']}", headers=headers)

    assert response.status_code == 200
    embedded = response.json()["visit"]["patient"]
    assert embedded["id"] == patient["id"]
    assert embedded["firstName"] == "Sarah"
    assert embedded["lastName"] == "Johnson"

    assert client.get(f"/api/visits/{visit['id']}", headers=other_headers).status_code == 404
    assert client.get("/api/visits/nope", headers=headers).status_code == 400


def test_update_keeps_patient_and_doctor(client, doctor, other_doctor):
    headers, body = doctor
    _, other_body = other_doctor
    patient = create_patient(client, headers)
    second = create_patient(client, headers, contactNumber="+15550002", email="second@a.co")
    visit = record_visit(client, headers, patient["id"])

    response = client.put(f"/api/visits/{visit['id']}", json={
        "diagnosis": "Migraine",
        "treatmentNotes": "Rest",
        "patient": second["id"],
        "doctor": other_body["id"],
    }, headers=headers)

    assert response.status_code == 200
    updated = response.json()["visit"]
    assert updated["diagnosis"] == "Migraine"
    assert updated["treatmentNotes"] == "Rest"
    assert updated["patient"] == patient["id"]
    assert updated["doctor"] == body["id"]


def test_update_and_delete_are_doctor_scoped(client, doctor, other_doctor):
    headers, _ = doctor
    other_headers, _ = other_doctor
    patient = create_patient(client, headers)
    visit = record_visit(client, headers, patient["id"])

    assert client.put(f"/api/visits/{visit['id']}", json={"reason": "x"}, headers=other_headers).status_code == 404
    assert client.delete(f"/api/visits/{visit['id']}", headers=other_headers).status_code == 404

    response = client.delete(f"/api/visits/{visit['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Visit deleted successfully"}
    assert client.get(f"/api/visits/{visit['id']}", headers=headers).status_code == 404
