from fastapi.testclient import TestClient

from listing_compliance.services.listing_validator import ListingValidator
from listing_compliance.ui.api import create_api


def make_client(tmp_path) -> TestClient:
    validator = ListingValidator(audit_log_path=tmp_path / "audit.jsonl")
    return TestClient(create_api(validator=validator))


def test_root_reports_ruleset(tmp_path):
    response = make_client(tmp_path).get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "listing-compliance"


def test_compliance_endpoint_returns_camel_case_result(tmp_path):
    client = make_client(tmp_path)
    response = client.post(
        "/compliance",
        json={"address": "8 Hill Road", "draftCopy": "This stunning 3 bedroom house is the best deal, won't last long!"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["isCompliant"] is False
    assert body["score"] == 10
    assert body["summary"] == {"errors": 3, "warnings": 0, "infos": 0}
    assert body["issues"][0]["type"] == "error"
    assert "field" not in body["issues"][0]


def test_compliance_endpoint_rejects_empty_address(tmp_path):
    response = make_client(tmp_path).post("/compliance", json={"address": " ", "draftCopy": "Tidy home."})
    assert response.status_code == 400


def test_validate_endpoint_returns_publish_gate(tmp_path):
    client = make_client(tmp_path)
    response = client.post(
        "/validate",
        json={
            "listing": {
                "address": "8 Hill Road",
                "draftCopy": "A well-presented 3 bedroom house in a popular suburb, close to local schools.",
                "variantsJson": {"standard": "Three bedroom house.", "headlines": ["Family home"]},
                "cv": 700000,
                "rv": 680000,
            },
            "facts": {"bedrooms": 3, "features": []},
            "listing_id": "lst_9",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["overall"] == {"isValid": True, "canPublish": True, "combinedScore": 100}
    assert body["ai"]["compliance_score"] == 100
    assert body["compliance"]["score"] == 100
    assert (tmp_path / "audit.jsonl").exists()


def test_check_text_endpoint(tmp_path):
    response = make_client(tmp_path).post("/check-text", json={"text": "Prices will double, great value"})
    assert response.status_code == 200
    issues = response.json()
    assert [issue["type"] for issue in issues] == ["error", "warning"]


def test_alternatives_endpoint(tmp_path):
    client = make_client(tmp_path)
    response = client.get("/alternatives", params={"phrase": "AMAZING"})
    assert response.status_code == 200
    assert response.json() == ["impressive", "notable", "well-appointed", "attractive"]
    assert client.get("/alternatives").status_code == 422


def test_suggestions_endpoint(tmp_path):
    response = make_client(tmp_path).get("/suggestions")
    assert response.status_code == 200
    assert len(response.json()) == 8
