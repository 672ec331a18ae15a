from datetime import datetime

import pytest


def test_create_then_get_round_trips_fields(client, profile_payload):
    test_client, _ = client

    resp = test_client.post("/profiles", json=profile_payload)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Profile created successfully"

    resp = test_client.get(f"/profiles/{body['id']}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == body["id"]
    assert data["name"] == profile_payload["name"]
    assert data["email"] == profile_payload["email"]
    assert data["education"] == profile_payload["education"]
    assert data["skills"] == profile_payload["skills"]
    assert data["projects"] == profile_payload["projects"]
    assert data["created_at"]
    assert data["updated_at"]


def test_create_defaults_optional_fields(client):
    test_client, _ = client

    resp = test_client.post("/profiles", json={"name": "Min", "email": "min@example.com"})
    assert resp.status_code == 201

    data = test_client.get(f"/profiles/{resp.json()['id']}").json()
    assert data["education"] is None
    assert data["skills"] == []
    assert data["projects"] == []


def test_project_links_default_to_empty(client):
    test_client, _ = client
    payload = {
        "name": "Linkless",
        "email": "linkless@example.com",
        "projects": [{"title": "Solo", "description": "No links here"}],
    }

    profile_id = test_client.post("/profiles", json=payload).json()["id"]

    data = test_client.get(f"/profiles/{profile_id}").json()
    assert data["projects"] == [{"title": "Solo", "description": "No links here", "links": []}]


def test_profile_body_keys_match_row_columns(client, profile_payload):
    test_client, _ = client
    profile_id = test_client.post("/profiles", json=profile_payload).json()["id"]

    expected = {"id", "name", "email", "education", "skills", "projects", "created_at", "updated_at"}
    assert set(test_client.get(f"/profiles/{profile_id}").json()) == expected
    assert set(test_client.get("/profiles").json()[0]) == expected

    result = test_client.get("/search/projects", params={"q": "Bernoulli"}).json()[0]
    assert set(result) == {"title", "description", "links", "profileId", "profileName"}


def test_duplicate_email_returns_conflict(client, profile_payload):
    test_client, store = client

    assert test_client.post("/profiles", json=profile_payload).status_code == 201
    resp = test_client.post("/profiles", json={**profile_payload, "name": "Someone Else"})

    assert resp.status_code == 409
    assert resp.json() == {"error": "Email already exists", "code": "CONFLICT"}
    assert store.count_profiles() == 1


def test_empty_name_is_rejected_without_insert(client, profile_payload):
    test_client, store = client

    resp = test_client.post("/profiles", json={**profile_payload, "name": ""})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Name and email are required"
    assert store.count_profiles() == 0


def test_missing_email_is_rejected(client):
    test_client, store = client

    resp = test_client.post("/profiles", json={"name": "No Email"})

    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
    assert store.count_profiles() == 0


def test_malformed_body_is_a_validation_error(client):
    test_client, store = client

    resp = test_client.post(
        "/profiles",
        json={"name": "Bad", "email": "bad@example.com", "skills": "python"},
    )

    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
    assert "skills" in resp.json()["error"]
    assert store.count_profiles() == 0


def test_get_missing_profile_returns_404(client):
    test_client, _ = client

    resp = test_client.get("/profiles/999")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Profile not found", "code": "NOT_FOUND"}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
@pytest.mark.parametrize(
    "raw_id",
    ["abc", "0", "-1", "1.5", "99999999999999999999", "9223372036854775808", "\u0661"],
)
def test_ids_that_cannot_match_a_row_return_404(seeded_client, profile_payload, method, raw_id):
    test_client, store = seeded_client

    resp = test_client.request(method, f"/profiles/{raw_id}", json=profile_payload)

    assert resp.status_code == 404
    assert resp.json() == {"error": "Profile not found", "code": "NOT_FOUND"}
    assert store.count_profiles() == 3


def test_largest_storable_id_is_just_missing(client):
    test_client, _ = client

    resp = test_client.get("/profiles/9223372036854775807")

    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"


def test_update_to_empty_skills_returns_empty_list(client, profile_payload):
    test_client, _ = client
    profile_id = test_client.post("/profiles", json=profile_payload).json()["id"]

    resp = test_client.put(f"/profiles/{profile_id}", json={**profile_payload, "skills": []})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Profile updated successfully"}

    data = test_client.get(f"/profiles/{profile_id}").json()
    assert data["skills"] == []


def test_update_replaces_every_field(client, profile_payload):
    test_client, _ = client
    profile_id = test_client.post("/profiles", json=profile_payload).json()["id"]
    before = test_client.get(f"/profiles/{profile_id}").json()

    resp = test_client.put(
        f"/profiles/{profile_id}",
        json={"name": "Ada King", "email": "ada@example.com"},
    )
    assert resp.status_code == 200

    after = test_client.get(f"/profiles/{profile_id}").json()
    assert after["name"] == "Ada King"
    assert after["education"] is None
    assert after["skills"] == []
    assert after["projects"] == []
    assert after["created_at"] == before["created_at"]
    assert datetime.fromisoformat(after["updated_at"]) >= datetime.fromisoformat(before["updated_at"])


def test_update_missing_profile_returns_404(client, profile_payload):
    test_client, _ = client

    resp = test_client.put("/profiles/42", json=profile_payload)

    assert resp.status_code == 404


def test_update_requires_name_and_email(client, profile_payload):
    test_client, _ = client
    profile_id = test_client.post("/profiles", json=profile_payload).json()["id"]

    resp = test_client.put(f"/profiles/{profile_id}", json={"name": "Only Name"})

    assert resp.status_code == 400
    assert test_client.get(f"/profiles/{profile_id}").json()["email"] == profile_payload["email"]


def test_update_to_another_profiles_email_conflicts(client, profile_payload):
    test_client, _ = client
    first_id = test_client.post("/profiles", json=profile_payload).json()["id"]
    test_client.post("/profiles", json={"name": "Grace", "email": "grace@example.com"})

    resp = test_client.put(
        f"/profiles/{first_id}",
        json={**profile_payload, "email": "grace@example.com"},
    )

    assert resp.status_code == 409
    assert test_client.get(f"/profiles/{first_id}").json()["email"] == "ada@example.com"


def test_delete_then_get_and_delete_again_return_404(client, profile_payload):
    test_client, store = client
    profile_id = test_client.post("/profiles", json=profile_payload).json()["id"]

    resp = test_client.delete(f"/profiles/{profile_id}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Profile deleted successfully"}

    assert test_client.get(f"/profiles/{profile_id}").status_code == 404
    assert test_client.delete(f"/profiles/{profile_id}").status_code == 404
    assert store.count_profiles() == 0


def test_list_returns_seeded_profiles_with_arrays(seeded_client):
    test_client, _ = seeded_client

    resp = test_client.get("/profiles")

    assert resp.status_code == 200
    profiles = resp.json()
    assert [p["name"] for p in profiles] == ["John Doe", "Jane Smith", "Mike Johnson"]
    assert all(isinstance(p["skills"], list) for p in profiles)
    assert all(isinstance(p["projects"], list) for p in profiles)


def test_skill_filter_is_a_substring_match(seeded_client):
    test_client, _ = seeded_client

    resp = test_client.get("/profiles", params={"skill": "Script"})

    assert resp.status_code == 200
    profiles = resp.json()
    assert [p["name"] for p in profiles] == ["John Doe"]
    assert any("Script" in skill for skill in profiles[0]["skills"])


def test_skill_filter_matches_several_profiles(seeded_client):
    test_client, _ = seeded_client

    names = [p["name"] for p in test_client.get("/profiles", params={"skill": "Java"}).json()]

    # "Java" is also a substring of "JavaScript"
    assert names == ["John Doe", "Mike Johnson"]


def test_skill_filter_is_case_sensitive(seeded_client):
    test_client, _ = seeded_client

    resp = test_client.get("/profiles", params={"skill": "script"})

    assert resp.status_code == 200
    assert resp.json() == []


def test_skill_filter_treats_wildcards_literally(client):
    test_client, _ = client
    test_client.post("/profiles", json={"name": "Percent", "email": "p@example.com", "skills": ["100%"]})
    test_client.post("/profiles", json={"name": "Plain", "email": "q@example.com", "skills": ["Go"]})

    profiles = test_client.get("/profiles", params={"skill": "%"}).json()

    assert [p["name"] for p in profiles] == ["Percent"]
