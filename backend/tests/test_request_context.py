from __future__ import annotations

import pytest

from jobportal.core.security import TokenAuth
from jobportal.middleware.trace import generate_trace_id

PROTECTED_ROUTES = [
    ("POST", "/add", {"name": "ibm", "location": "bng", "field": "sw"}),
    ("GET", "/view/allcomp", None),
    ("GET", "/viewcompany/123", None),
    ("POST", "/add/4", {"name": "developer", "salary": "30000", "notice_period": "3 weeks"}),
    ("GET", "/view/all", None),
    ("GET", "/job/view?cid=4", None),
    ("GET", "/viewjob/15", None),
]

PUBLIC_ROUTES = [
    ("POST", "/signup", {"username": "abc", "email": "abc@gmail.com", "password": "990"}),
    ("POST", "/signin", {"email": "abc@gmail.com", "password": "990"}),
]


@pytest.mark.parametrize("method,path,body", PROTECTED_ROUTES + PUBLIC_ROUTES)
def test_missing_trace_id_is_500(untraced_client, fake_service, auth_headers, method, path, body):
    res = untraced_client.request(method, path, json=body, headers=auth_headers)
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert fake_service.calls == []


@pytest.mark.parametrize("method,path,body", PROTECTED_ROUTES)
def test_missing_claims_is_401(service_client, fake_service, method, path, body):
    res = service_client.request(method, path, json=body)
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}
    assert res.headers.get("www-authenticate") == "Bearer"
    assert fake_service.calls == []


def test_missing_claims_checked_before_bad_path_param(service_client):
    res = service_client.get("/viewcompany/abc")
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_malformed_token_is_401(service_client):
    res = service_client.get("/view/allcomp", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_non_bearer_scheme_is_401(service_client):
    res = service_client.get("/view/allcomp", headers={"Authorization": "Basic YWJjOjEyMw=="})
    assert res.status_code == 401


def test_expired_token_is_401(service_client, token_auth):
    expired = TokenAuth("test_jwt_secret", expire_minutes=-5, issuer=token_auth.issuer).generate_token(1)
    res = service_client.get("/view/allcomp", headers={"Authorization": f"Bearer {expired}"})
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_token_signed_with_other_secret_is_401(service_client, token_auth):
    forged = TokenAuth("some_other_secret", issuer=token_auth.issuer).generate_token(1)
    res = service_client.get("/view/allcomp", headers={"Authorization": f"Bearer {forged}"})
    assert res.status_code == 401


def test_valid_token_reaches_handler(service_client, fake_service, auth_headers):
    fake_service.results["view_all_companies"] = []
    res = service_client.get("/view/allcomp", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == []
    assert fake_service.calls == [("view_all_companies",)]


def test_trace_id_header_is_reused(service_client):
    res = service_client.get("/check", headers={"X-Request-ID": "trace-456"})
    assert res.status_code == 200
    assert res.headers["x-request-id"] == "trace-456"


def test_trace_id_generated_when_absent(service_client):
    res = service_client.get("/check")
    trace_id = res.headers["x-request-id"]
    assert len(trace_id) == 32
    int(trace_id, 16)


def test_generate_trace_id():
    assert generate_trace_id("  abc  ") == "abc"
    assert generate_trace_id("   ") != "   "
    assert generate_trace_id(None) != generate_trace_id(None)


def test_liveness_needs_no_trace_or_auth(untraced_client):
    res = untraced_client.get("/check")
    assert res.status_code == 200
    assert res.json() == {"Message": "ok"}
