from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_list_rule_sections():
    r = client.get("/rules")
    assert r.status_code == 200
    assert [s["id"] for s in r.json()] == ["scientific", "sigfigs", "operations"]


def test_get_rule_section():
    r = client.get("/rules/sigfigs")
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Significant Figures Rules"
    assert len(body["rules"]) == 5


def test_get_rule_section_404():
    assert client.get("/rules/calculus").status_code == 404
