"""HTTP API tests via FastAPI's TestClient.

Covers the two scoring endpoints, the catalog/report extras, reference
data, and the error mapping (malformed body → 400, unknown id → 404).
"""

import pytest

from maternal_server.errors import INVALID_INPUT_MESSAGE


# =====================================================================
# Risk assessment
# =====================================================================


class TestRiskEndpoints:

    def test_score_high(self, client):
        resp = client.post("/risk-assessment/score", json={"age": 30, "symptoms": ["bleeding"]})
        assert resp.status_code == 200
        assert resp.json() == {"riskLevel": "high"}

    def test_score_low(self, client):
        body = {"age": 28, "symptoms": ["none"], "medicalHistory": ["none"]}
        resp = client.post("/risk-assessment/score", json=body)
        assert resp.json() == {"riskLevel": "low"}

    def test_score_empty_body_object(self, client):
        resp = client.post("/risk-assessment/score", json={})
        assert resp.status_code == 200
        assert resp.json() == {"riskLevel": "low"}

    @pytest.mark.parametrize(
        "body",
        [
            {"age": "old"},
            {"age": True},
            {"symptoms": "bleeding"},
            ["bleeding"],
        ],
    )
    def test_score_malformed_body_is_400(self, client, body):
        resp = client.post("/risk-assessment/score", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"detail": INVALID_INPUT_MESSAGE}

    def test_score_non_json_body_is_400(self, client):
        resp = client.post(
            "/risk-assessment/score",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400

    def test_report(self, client):
        body = {"age": 38, "pregnancyStage": "first", "symptoms": ["vision"],
                "medicalHistory": ["hypertension"]}
        resp = client.post("/risk-assessment/report", json=body)
        assert resp.status_code == 200
        data = resp.json()
        assert data["riskLevel"] == "high"
        assert data["title"] == "High Risk Assessment"
        labels = [f["label"] for f in data["keyFindings"]]
        assert labels == ["Age", "Pregnancy stage", "Reported symptoms", "Medical conditions"]


# =====================================================================
# Eligibility
# =====================================================================


class TestEligibilityEndpoints:

    def test_score(self, client):
        body = {
            "profile": {"state": "Delhi", "category": "Mother and Child Welfare", "isPregnant": True},
            "schemes": [
                {"id": 1, "state": "Delhi", "category": "Mother and Child Welfare",
                 "eligibility": "all pregnant women", "description": ""},
                {"id": 2, "state": "Gujarat", "category": "Healthcare",
                 "eligibility": "BPL families only", "description": ""},
            ],
        }
        resp = client.post("/eligibility/score", json=body)
        assert resp.status_code == 200
        data = resp.json()
        assert data["scores"] == {"1": 75, "2": 0}
        assert [s["id"] for s in data["ranked"]] == [1]

    def test_score_form_strings(self, client):
        """The browser form posts numbers as strings and blanks as ""."""
        body = {
            "profile": {"state": "Gujarat", "income": "50000", "familySize": "1",
                        "occupation": "", "isPregnant": True},
            "schemes": [{"id": 4, "state": "Gujarat", "category": "Healthcare",
                         "eligibility": "BPL women in rural areas of Gujarat."}],
        }
        resp = client.post("/eligibility/score", json=body)
        assert resp.status_code == 200
        # 30 state + 15 BPL
        assert resp.json()["scores"] == {"4": 45}

    @pytest.mark.parametrize(
        "body",
        [
            {"profile": {"state": "Delhi"}, "schemes": {"id": 1}},
            {"profile": {"state": "Delhi"}},
            {"schemes": []},
            {"profile": {"state": "Delhi"}, "schemes": [{"id": 1}]},
            {"profile": {"state": "Delhi"}, "schemes": [{"state": "Delhi"}]},
            {"profile": {"state": "Delhi"},
             "schemes": [{"id": 1, "state": "Delhi"}, {"id": 1, "state": "Goa"}]},
            {"profile": {"state": "Delhi", "income": True}, "schemes": []},
        ],
    )
    def test_score_malformed_body_is_400(self, client, body):
        resp = client.post("/eligibility/score", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"detail": INVALID_INPUT_MESSAGE}

    def test_ranked_echo_omits_unsent_fields(self, client):
        body = {
            "profile": {"state": "Delhi", "isPregnant": True},
            "schemes": [{"id": 9, "state": "Delhi", "eligibility": "pregnant women",
                         "customTag": "t1"}],
        }
        resp = client.post("/eligibility/score", json=body)
        assert resp.status_code == 200
        assert resp.json()["ranked"] == [
            {"id": 9, "state": "Delhi", "eligibility": "pregnant women", "customTag": "t1"}
        ]

    def test_check_against_catalog(self, client):
        body = {"profile": {"state": "Gujarat", "income": 50000, "isPregnant": True,
                            "category": "Healthcare"}}
        resp = client.post("/eligibility/check", json=body)
        assert resp.status_code == 200
        data = resp.json()
        # JSY: 30 + 25 + 20 = 75 (its text says "Below Poverty Line", not "BPL")
        # Chiranjeevi: 30 + 25 + 15 = 70; PMMVY: 30 + 20 = 50; PMJAY: 30; KCR: 0
        assert data["scores"] == {"1": 50, "2": 75, "3": 30, "4": 70, "5": 0}
        assert [s["id"] for s in data["ranked"]] == [2, 4, 1]
        assert data["ranked"][0]["applicationProcess"]


# =====================================================================
# Reference data
# =====================================================================


class TestReferenceEndpoints:

    def test_list_schemes(self, client):
        resp = client.get("/reference/schemes")
        assert resp.status_code == 200
        assert [s["id"] for s in resp.json()] == [1, 2, 3, 4, 5]

    def test_filter_schemes(self, client):
        resp = client.get("/reference/schemes", params={"q": "kit", "state": "Telangana"})
        assert [s["id"] for s in resp.json()] == [5]

    def test_get_scheme(self, client):
        resp = client.get("/reference/schemes/2")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Janani Suraksha Yojana"

    def test_get_unknown_scheme_is_404(self, client):
        resp = client.get("/reference/schemes/999")
        assert resp.status_code == 404

    def test_questionnaire(self, client):
        resp = client.get("/reference/questionnaire")
        assert [q["id"] for q in resp.json()][0] == "age"

    def test_vocabularies(self, client):
        data = client.get("/reference/vocabularies").json()
        assert "Delhi" in data["states"]
        assert len(data["categories"]) == 7

    def test_risk_levels(self, client):
        data = client.get("/reference/risk-levels").json()
        assert [lvl["id"] for lvl in data] == ["low", "moderate", "high"]


def test_health(client):
    resp = client.get("/health")
    assert resp.json() == {"status": "ok", "schemes": 5}
