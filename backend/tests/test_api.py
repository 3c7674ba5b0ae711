"""API tests using FastAPI TestClient."""
import pytest
from fastapi.testclient import TestClient

from embed_filter import container
from embed_filter.core import config
from embed_filter.domain.embed.tokens import token_for_question
from embed_filter.main import app

from conftest import MODULE_CONTEXT, set_filter_state


@pytest.fixture
def client(db_path):
    container.get_embed_helpers.cache_clear()
    return TestClient(app)


@pytest.fixture
def auth_headers(client):
    login = client.post("/auth/login", json={"username": "admin", "password": "admin"})
    token = login.json()["token"]
    return {"Authorization": f"Bearer {token}"}


# ------------------------------------------------------------------
# Health + auth
# ------------------------------------------------------------------
def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_login_bad_password(client):
    resp = client.post("/auth/login", json={"username": "admin", "password": "wrongpassword"})
    assert resp.status_code == 401


def test_profile(client, auth_headers):
    resp = client.get("/auth/profile", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["username"] == "admin"


# ------------------------------------------------------------------
# Helpers over HTTP
# ------------------------------------------------------------------
def test_filter_warnings(client, db_path):
    resp = client.get(f"/contexts/{MODULE_CONTEXT}/filter-warnings")
    assert "site-wide filter settings" in resp.json()["html"]

    set_filter_state(db_path, 1, 1)
    resp = client.get(f"/contexts/{MODULE_CONTEXT}/filter-warnings")
    assert resp.json()["html"] == ""


def test_relevant_course(client):
    assert client.get(f"/contexts/{MODULE_CONTEXT}/relevant-course").json() == {"courseid": 5}
    assert client.get("/contexts/9999/relevant-course").status_code == 404


def test_category_lookup(client):
    assert client.get(f"/contexts/{MODULE_CONTEXT}/categories/1").json() == {"ids": [1]}


def test_category_choices(client):
    choices = client.get(f"/contexts/{MODULE_CONTEXT}/category-choices").json()
    assert choices[0] == {"value": "", "label": "Choose..."}
    assert {"value": "1", "label": "Shared &amp; public (3)"} in choices


def test_question_choices(client):
    choices = client.get("/categories/1/question-choices").json()
    assert [c["label"] for c in choices] == ["Choose...", "Alpha", "Beta", "Gamma"]


def test_question_lookup(client):
    resp = client.get("/categories/1/questions/1")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Beta"
    assert client.get("/categories/1/questions/2").status_code == 404


def test_behaviours(client):
    data = client.get("/behaviours").json()
    assert "interactive" in data
    assert "deferredfeedback" not in data


# ------------------------------------------------------------------
# Attempts
# ------------------------------------------------------------------
def test_verify_own_usage(client, auth_headers):
    resp = client.get("/usages/1/verify", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"verified": True}


@pytest.mark.parametrize("usage_id", [2, 3])
def test_verify_foreign_usage(client, auth_headers, usage_id):
    resp = client.get(f"/usages/{usage_id}/verify", headers=auth_headers)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "This is not your attempt."


def test_verify_requires_login(client):
    assert client.get("/usages/1/verify").status_code == 401


def test_show_question_with_bad_token(client):
    resp = client.get("/showquestion", params={"catid": 1, "qid": "1", "token": "forged"})
    assert resp.status_code == 200
    assert "This question may not be embedded here." in resp.text
    assert "Beta" not in resp.text


def test_show_question(client):
    token = token_for_question(1, "1", config.SECRET_KEY)
    resp = client.get("/showquestion", params={"catid": 1, "qid": "1", "token": token})
    assert resp.status_code == 200
    assert "Beta" in resp.text
    assert "What is 2 + 2?" in resp.text
