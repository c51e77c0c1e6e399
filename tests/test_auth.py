"""Signup, login and current-doctor endpoints."""

from doctor_portal.core.security import create_access_token, decode_token

from conftest import signup


def test_signup_returns_doctor_without_hash(client):
    response = signup(client)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Doctor registered successfully"
    doctor = body["doctor"]
    assert doctor["email"] == "house@clinic.com"
    assert doctor["specialty"] == "Diagnostics"
    assert doctor["id"]
    assert "passwordHash" not in doctor
    assert "password_hash" not in doctor
    assert "createdAt" in doctor


def test_signup_duplicate_email_conflicts(client):
    assert signup(client).status_code == 201

    response = signup(client, name="Dr. Impostor")

    assert response.status_code == 409
    assert response.json()["message"] == "Email already in use"


def test_signup_missing_fields_is_bad_request(client):
    response = client.post("/api/auth/signup", json={"email": "x@clinic.com", "password": "pw"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert "name" in body["errors"]
    assert "specialty" in body["errors"]


def test_login_issues_token_with_doctor_claims(client):
    doctor = signup(client).json()["doctor"]

    response = client.post("/api/auth/login", json={"email": "house@clinic.com", "password": "Vicodin42"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["doctor"]["id"] == doctor["id"]
    assert "passwordHash" not in body["doctor"]
    payload = decode_token(body["token"])
    assert payload["id"] == doctor["id"]
    assert payload["email"] == "house@clinic.com"
    assert payload["name"] == "Dr. Gregory House"


def test_wrong_password_and_unknown_email_look_the_same(client):
    signup(client)

    wrong_password = client.post("/api/auth/login", json={"email": "house@clinic.com", "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "cuddy@clinic.com", "password": "nope"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


def test_login_requires_both_fields(client):
    response = client.post("/api/auth/login", json={"email": "house@clinic.com"})

    assert response.status_code == 400


def test_me_returns_calling_doctor(client, doctor):
    headers, body = doctor

    response = client.get("/api/auth/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["doctor"]["id"] == body["id"]


def test_me_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401


def test_me_for_unknown_doctor(client):
    token = create_access_token({"id": "65f1c2a9e4b0a1b2c3d4e5f6"})

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Doctor not found"
