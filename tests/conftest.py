"""Shared fixtures: the real application backed by an in-memory MongoDB."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from doctor_portal import database
from doctor_portal.main import app


@pytest.fixture
def client(monkeypatch):
    """Test client whose lifespan connects Beanie to a fresh mock database."""
    monkeypatch.setattr(database, "AsyncIOMotorClient", AsyncMongoMockClient)
    with TestClient(app) as test_client:
        yield test_client


def signup(client, email="house@clinic.com", password="Vicodin42", name="Dr. Gregory House",
           specialty="Diagnostics"):
    return client.post("/api/auth/signup", json={
        "name": name,
        "email": email,
        "password": password,
        "specialty": specialty,
    })


def auth_headers(client, email="house@clinic.com", password="Vicodin42", **kwargs):
    """Sign a doctor up, log in and return the bearer header plus the doctor body."""
    signup(client, email=email, password=password, **kwargs)
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    body = response.json()
    return {"Authorization": f"Bearer {body['token']}"}, body["doctor"]


def patient_payload(**overrides):
    payload = {
        "firstName": "Sarah",
        "lastName": "Johnson",
        "dateOfBirth": "1990-05-15",
        "gender": "Female",
        "contactNumber": "+15550001",
        "email": "sarah.johnson@email.com",
        "address": "123 Main St",
    }
    payload.update(overrides)
    return payload


def create_patient(client, headers, **overrides):
    response = client.post("/api/patients", json=patient_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.json()
    return response.json()["patient"]


@pytest.fixture
def doctor(client):
    headers, body = auth_headers(client)
    return headers, body


@pytest.fixture
def other_doctor(client):
    headers, body = auth_headers(
        client, email="wilson@clinic.com", password="Oncology1",
        name="Dr. James Wilson", specialty="Oncology",
    )
    return headers, body
