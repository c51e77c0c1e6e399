"""Bearer token gate in front of the protected API routes."""

from datetime import timedelta

import pytest
from jose import jwt

from doctor_portal.config import settings
from doctor_portal.core.security import create_access_token

from conftest import create_patient


PROTECTED = ["/api/patients", "/api/visits?patientId=65f1c2a9e4b0a1b2c3d4e5f6", "/api/appointments"]


@pytest.mark.parametrize("path", PROTECTED)
def test_missing_token(client, path):
    response = client.get(path)

    assert response.status_code == 401
    assert response.json() == {"message": "Authentication token missing"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_non_bearer_scheme_counts_as_missing(client):
    response = client.get("/api/patients", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert response.status_code == 401
    assert response.json()["message"] == "Authentication token missing"


def test_expired_token(client, doctor):
    _, body = doctor
    token = create_access_token({"id": body["id"]}, expires_delta=timedelta(minutes=-1))

    response = client.get("/api/patients", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"message": "Token expired"}


def test_tampered_token(client, doctor):
    headers, body = doctor
    create_patient(client, headers)
    forged = jwt.encode({"id": body["id"]}, "attacker-key", algorithm=settings.JWT_ALGORITHM)

    response = client.get("/api/patients", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid or expired token"}
    assert "patients" not in response.json()


def test_token_without_doctor_id_reaches_handler_unauthorized(client):
    token = create_access_token({"email": "nobody@clinic.com"})

    response = client.get("/api/patients", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Unauthorized or Invalid Doctor ID"


def test_token_with_malformed_doctor_id(client):
    token = create_access_token({"id": "not-an-object-id"})

    response = client.get("/api/appointments", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Unauthorized or Invalid Doctor ID"


def test_client_supplied_doctor_header_is_ignored(client, doctor, other_doctor):
    headers, _ = doctor
    other_headers, other_body = other_doctor
    create_patient(client, other_headers)

    spoofed = {**headers, "X-Doctor-ID": other_body["id"]}
    response = client.get("/api/patients", headers=spoofed)

    assert response.status_code == 200
    assert response.json()["patients"] == []


def test_spoofed_header_without_token_is_rejected(client, other_doctor):
    _, other_body = other_doctor

    response = client.get("/api/patients", headers={"X-Doctor-ID": other_body["id"]})

    assert response.status_code == 401


def test_public_routes_need_no_token(client):
    assert client.get("/health").status_code == 200
    assert client.get("/ready").json() == {"status": "ready"}
    assert client.post("/api/auth/login", json={"email": "a@b.co", "password": "x"}).status_code == 401
