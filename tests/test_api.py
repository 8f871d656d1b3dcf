"""
Insurance Playground API tests.

Runs every endpoint against a freshly seeded SQLite database.
"""

from datetime import date, datetime, timedelta, timezone

from sqlalchemy import select, func

from insurance_playground.models import Broker, Claim, Customer, Policy
from insurance_playground.services.numbers import record_numbers

WIZARD_EMAIL = "wizard.mcspellcaster@email.com"
WIZARD_PASSWORD = "password123"


def row_count(db, model) -> int:
    return db.fetch_one(select(func.count(model.id).label("n")))["n"]


def age_in_years(date_of_birth: str) -> float:
    today = datetime.now(timezone.utc).date()
    return (today - date.fromisoformat(date_of_birth)).days / 365.25


class TestHealthAndFallback:
    def test_health(self, test_client):
        response = test_client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "OK"

    def test_unknown_endpoint_lists_available_endpoints(self, test_client):
        response = test_client.get("/api/does-not-exist")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Endpoint not found"
        assert "GET /api/customers" in body["availableEndpoints"]

    def test_non_integer_id_is_a_bad_request(self, test_client):
        response = test_client.get("/api/customers/abc")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"


class TestAuth:
    def test_customer_login(self, test_client):
        """Seeded customer can log in and never sees their password hash."""
        response = test_client.post("/api/auth/login", json={"email": WIZARD_EMAIL, "password": WIZARD_PASSWORD})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["customer"]["first_name"] == "Wizard"
        assert data["token"]
        assert "password" not in data["customer"]

    def test_email_is_case_insensitive(self, test_client):
        response = test_client.post(
            "/api/auth/login", json={"email": WIZARD_EMAIL.upper(), "password": WIZARD_PASSWORD}
        )
        assert response.status_code == 200

    def test_wrong_password(self, test_client):
        response = test_client.post("/api/auth/login", json={"email": WIZARD_EMAIL, "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid email or password"}

    def test_missing_credentials(self, test_client):
        response = test_client.post("/api/auth/login", json={"email": WIZARD_EMAIL})
        assert response.status_code == 400
        assert response.json()["message"] == "Email and password are required"

    def test_admin_login(self, test_client):
        response = test_client.post("/api/admin/login", json={"username": "admin", "password": "admin"})
        assert response.status_code == 200
        assert response.json()["data"]["admin"]["username"] == "admin"

    def test_admin_wrong_password(self, test_client):
        response = test_client.post("/api/admin/login", json={"username": "admin", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"


class TestCustomers:
    def test_list_without_filters_returns_every_row(self, test_client, db):
        first = test_client.get("/api/customers").json()
        second = test_client.get("/api/customers").json()
        assert first["count"] == row_count(db, Customer) == 6
        assert [c["id"] for c in first["data"]] == [c["id"] for c in second["data"]]
        assert all("password" not in c for c in first["data"])

    def test_substring_filter_is_case_insensitive(self, test_client):
        body = test_client.get("/api/customers", params={"first_name": "wiz"}).json()
        assert body["count"] == 1
        assert body["data"][0]["first_name"] == "Wizard"
        assert body["data"][0]["agent_first_name"] == "Luna"

    def test_like_wildcards_match_literally(self, test_client):
        body = test_client.get("/api/customers", params={"email": "%"}).json()
        assert body["count"] == 0

    def test_income_range(self, test_client):
        body = test_client.get("/api/customers", params={"income_min": "70000", "income_max": "90000"}).json()
        assert body["count"] == 3
        assert all(70000 <= c["annual_income"] <= 90000 for c in body["data"])

    def test_blank_filter_is_ignored(self, test_client):
        body = test_client.get("/api/customers", params={"first_name": "", "income_min": ""}).json()
        assert body["count"] == 6

    def test_malformed_number_is_rejected(self, test_client):
        response = test_client.get("/api/customers", params={"income_min": "abc"})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_status_and_type_filters(self, test_client):
        body = test_client.get("/api/customers", params={"customer_status": "pending"}).json()
        assert [c["customer_number"] for c in body["data"]] == ["CUST003"]

    def test_age_range(self, test_client):
        everyone = test_client.get("/api/customers").json()["data"]
        body = test_client.get("/api/customers", params={"age_min": "35", "age_max": "45"}).json()
        returned = {c["id"] for c in body["data"]}
        assert returned
        for customer in everyone:
            age = age_in_years(customer["date_of_birth"])
            if customer["id"] in returned:
                assert 35 - 0.01 <= age <= 45 + 0.01
            else:
                assert age < 35 + 0.01 or age > 45 - 0.01

    def test_registration_from(self, test_client):
        today = datetime.now(timezone.utc).date()
        since_yesterday = test_client.get(
            "/api/customers", params={"registration_from": (today - timedelta(days=1)).isoformat()}
        ).json()
        assert since_yesterday["count"] == 6

        future = test_client.get(
            "/api/customers", params={"registration_from": (today + timedelta(days=2)).isoformat()}
        ).json()
        assert future["count"] == 0

    def test_credit_min(self, test_client):
        body = test_client.get("/api/customers", params={"credit_min": "740"}).json()
        assert {c["customer_number"] for c in body["data"]} == {"CUST002", "CUST004", "CUST006"}
        assert all(c["credit_score"] >= 740 for c in body["data"])

    def test_agent_filter(self, test_client):
        body = test_client.get("/api/customers", params={"agent_id": "1"}).json()
        assert {c["customer_number"] for c in body["data"]} == {"CUST001", "CUST004"}
        assert all(c["agent_id"] == 1 for c in body["data"])

    def test_search(self, test_client):
        body = test_client.get("/api/customers/search", params={"q": "sparkles"}).json()
        assert body["query"] == "sparkles"
        assert [c["customer_number"] for c in body["data"]] == ["CUST004"]

    def test_search_by_full_name(self, test_client):
        body = test_client.get("/api/customers/search", params={"q": "Captain Awesome"}).json()
        assert body["count"] == 1

    def test_search_requires_query(self, test_client):
        response = test_client.get("/api/customers/search", params={"q": "  "})
        assert response.status_code == 400
        assert response.json()["message"] == "Search query is required"

    def test_get_customer_nests_policies_and_claims(self, test_client):
        body = test_client.get("/api/customers/1").json()
        assert body["data"]["customer_number"] == "CUST001"
        assert len(body["data"]["policies"]) == 2
        assert len(body["data"]["claims"]) == 2

    def test_missing_customer(self, test_client):
        response = test_client.get("/api/customers/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Customer not found"

    def test_register_then_fetch(self, test_client):
        """Round trip: core fields come back with a fresh customer number."""
        payload = {
            "email": "gandalf.grey@email.com",
            "password": "youshallnotpass",
            "first_name": "Gandalf",
            "last_name": "Grey",
            "date_of_birth": "1960-01-01",
            "city": "Hobbiton",
            "annual_income": 42000,
        }
        created = test_client.post("/api/customers", json=payload)
        assert created.status_code == 201
        customer = created.json()["data"]
        assert customer["customer_number"].startswith("CUST")

        fetched = test_client.get(f"/api/customers/{customer['id']}").json()["data"]
        for field in ("email", "first_name", "last_name", "date_of_birth", "city", "annual_income"):
            assert fetched[field] == payload[field]
        assert fetched["customer_type"] == "individual"

        numbers = [c["customer_number"] for c in test_client.get("/api/customers").json()["data"]]
        assert numbers.count(customer["customer_number"]) == 1

        login = test_client.post("/api/auth/login", json={"email": payload["email"], "password": payload["password"]})
        assert login.status_code == 200

    def test_register_duplicate_email(self, test_client):
        payload = {"email": WIZARD_EMAIL, "password": "x", "first_name": "Copy", "last_name": "Cat"}
        response = test_client.post("/api/customers", json=payload)
        assert response.status_code == 409
        assert response.json()["message"] == "Email already exists"

    def test_register_requires_fields(self, test_client):
        response = test_client.post("/api/customers", json={"email": "a@b.com"})
        assert response.status_code == 400

    def test_register_rejects_bad_email(self, test_client):
        payload = {"email": "not-an-email", "password": "x", "first_name": "A", "last_name": "B"}
        response = test_client.post("/api/customers", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email format"

    def test_register_rejects_overlong_password(self, test_client, db):
        payload = {"email": "long.pass@email.com", "password": "x" * 80, "first_name": "Long", "last_name": "Pass"}
        response = test_client.post("/api/customers", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Password cannot be longer than 72 bytes"
        assert row_count(db, Customer) == 6

    def test_password_limit_counts_bytes(self, test_client):
        payload = {"email": "accent@email.com", "password": "é" * 37, "first_name": "Ren", "last_name": "Ee"}
        assert test_client.post("/api/customers", json=payload).status_code == 400

        payload["password"] = "é" * 36
        assert test_client.post("/api/customers", json=payload).status_code == 201


class TestPolicies:
    def test_list_joins_customer_and_broker(self, test_client, db):
        body = test_client.get("/api/policies").json()
        assert body["count"] == row_count(db, Policy) == 5
        pol001 = next(p for p in body["data"] if p["policy_number"] == "POL001")
        assert pol001["first_name"] == "Wizard"
        assert pol001["broker_company"] == "Silverstone Insurance Brokers"

    def test_coverage_range_is_inclusive(self, test_client):
        body = test_client.get("/api/policies", params={"coverage_min": "50000", "coverage_max": "300000"}).json()
        assert {p["policy_number"] for p in body["data"]} == {"POL001", "POL002"}
        assert all(50000 <= p["coverage_amount"] <= 300000 for p in body["data"])

    def test_customer_name_filter(self, test_client):
        body = test_client.get("/api/policies", params={"customer_name": "wizard mcspell"}).json()
        assert {p["policy_number"] for p in body["data"]} == {"POL001", "POL002"}

    def test_date_range(self, test_client):
        body = test_client.get("/api/policies", params={"date_from": "2024-02-01", "date_to": "2024-03-31"}).json()
        assert {p["policy_number"] for p in body["data"]} == {"POL002", "POL003"}

    def test_underwriting_status_filter(self, test_client):
        body = test_client.get("/api/policies", params={"underwriting_status": "pending"}).json()
        assert [p["policy_number"] for p in body["data"]] == ["POL004"]
        assert all(p["underwriting_status"] == "pending" for p in body["data"])

    def test_broker_filter(self, test_client):
        body = test_client.get("/api/policies", params={"broker_id": "2"}).json()
        assert [p["policy_number"] for p in body["data"]] == ["POL002"]
        assert all(p["broker_id"] == 2 for p in body["data"])

    def test_malformed_date(self, test_client):
        response = test_client.get("/api/policies", params={"date_from": "yesterday"})
        assert response.status_code == 400

    def test_search(self, test_client):
        body = test_client.get("/api/policies/search", params={"q": "renters"}).json()
        assert [p["policy_number"] for p in body["data"]] == ["POL005"]

    def test_get_policy_includes_coverage(self, test_client):
        body = test_client.get("/api/policies/1").json()
        assert body["data"]["email"] == WIZARD_EMAIL
        assert [c["coverage_type"] for c in body["data"]["coverage_details"]] == [
            "Liability", "Collision", "Comprehensive"
        ]

    def test_create_policy_with_coverage(self, test_client, new_policy_payload):
        new_policy_payload["coverage_details"] = [
            {"coverage_type": "Liability", "coverage_limit": 30000, "premium_portion": 500},
        ]
        created = test_client.post("/api/policies", json=new_policy_payload)
        assert created.status_code == 201
        policy = created.json()["data"]
        assert policy["policy_number"].startswith("POL")

        fetched = test_client.get(f"/api/policies/{policy['id']}").json()["data"]
        assert len(fetched["coverage_details"]) == 1

    def test_create_without_broker_inserts_nothing(self, test_client, db, new_policy_payload):
        before = row_count(db, Policy)
        del new_policy_payload["broker_id"]
        response = test_client.post("/api/policies", json=new_policy_payload)
        assert response.status_code == 400
        assert row_count(db, Policy) == before

    def test_create_with_unknown_broker(self, test_client, db, new_policy_payload):
        before = row_count(db, Policy)
        new_policy_payload["broker_id"] = 999
        response = test_client.post("/api/policies", json=new_policy_payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Broker not found"
        assert row_count(db, Policy) == before

    def test_end_before_start(self, test_client, new_policy_payload):
        new_policy_payload["end_date"] = "2024-06-01"
        response = test_client.post("/api/policies", json=new_policy_payload)
        assert response.status_code == 400

    def test_update_policy(self, test_client, new_policy_payload):
        update = {k: v for k, v in new_policy_payload.items() if k not in ("customer_id", "broker_id")}
        update["premium_amount"] = 1500
        response = test_client.put("/api/policies/1", json=update)
        assert response.status_code == 200
        assert response.json()["data"]["premium_amount"] == 1500

    def test_update_missing_policy(self, test_client, new_policy_payload):
        response = test_client.put("/api/policies/999", json=new_policy_payload)
        assert response.status_code == 404

    def test_status_must_be_known(self, test_client):
        response = test_client.put("/api/policies/4/status", json={"status": "flying"})
        assert response.status_code == 400
        assert response.json()["message"].startswith("Status must be one of: submission")
        assert test_client.get("/api/policies/4").json()["data"]["status"] == "pending"

    def test_status_update_keeps_notes_when_absent(self, test_client):
        test_client.put("/api/policies/4/status", json={"status": "quoted", "notes": "sent to customer"})
        body = test_client.put("/api/policies/4/status", json={"status": "booked"}).json()
        assert body["data"]["status"] == "booked"
        assert body["data"]["notes"] == "sent to customer"

    def test_underwriting_approval_activates(self, test_client):
        body = test_client.put(
            "/api/policies/4/underwriting", json={"underwriting_status": "approved", "risk_score": 3}
        ).json()
        assert body["data"]["underwriting_status"] == "approved"
        assert body["data"]["status"] == "active"
        assert body["data"]["risk_score"] == 3

    def test_underwriting_rejection(self, test_client):
        body = test_client.put("/api/policies/4/underwriting", json={"underwriting_status": "rejected"}).json()
        assert body["data"]["status"] == "rejected"

    def test_underwriting_review_leaves_status(self, test_client):
        for decision in ("requires_review", "pending"):
            body = test_client.put("/api/policies/4/underwriting", json={"underwriting_status": decision}).json()
            assert body["data"]["underwriting_status"] == decision
            assert body["data"]["status"] == "pending"

    def test_underwriting_status_must_be_known(self, test_client):
        response = test_client.put("/api/policies/4/underwriting", json={"underwriting_status": "maybe"})
        assert response.status_code == 400

    def test_delete_policy_with_claims_is_blocked(self, test_client, db):
        response = test_client.delete("/api/policies/1")
        assert response.status_code == 400
        assert response.json()["message"] == "Cannot delete policy with existing claims. Please handle claims first."
        assert test_client.get("/api/policies/1").status_code == 200

    def test_delete_policy_without_claims(self, test_client):
        response = test_client.delete("/api/policies/4")
        assert response.status_code == 200
        assert test_client.get("/api/policies/4").status_code == 404

    def test_delete_missing_policy(self, test_client):
        assert test_client.delete("/api/policies/999").status_code == 404


class TestClaims:
    def test_list_and_filters(self, test_client, db):
        body = test_client.get("/api/claims").json()
        assert body["count"] == row_count(db, Claim) == 3

        body = test_client.get("/api/claims", params={"status": "paid"}).json()
        assert [c["claim_number"] for c in body["data"]] == ["CLM003"]

        body = test_client.get("/api/claims", params={"amount_min": "1200", "amount_max": "3500"}).json()
        assert {c["claim_number"] for c in body["data"]} == {"CLM001", "CLM003"}

    def test_search(self, test_client):
        body = test_client.get("/api/claims/search", params={"q": "burst pipe"}).json()
        assert [c["claim_number"] for c in body["data"]] == ["CLM002"]

    def test_get_claim(self, test_client):
        body = test_client.get("/api/claims/1").json()
        assert body["data"]["policy_number"] == "POL001"
        assert body["data"]["documents"] == []

    def test_submit_claim(self, test_client):
        payload = {
            "policy_id": 3,
            "customer_id": 2,
            "claim_type": "windshield",
            "incident_date": "2024-09-01",
            "claim_amount": 450,
            "description": "Cracked windshield from road debris",
        }
        response = test_client.post("/api/claims", json=payload)
        assert response.status_code == 201
        claim = response.json()["data"]
        assert claim["claim_number"].startswith("CLM")
        assert claim["status"] == "submitted"
        assert claim["priority"] == "medium"

    def test_claim_against_someone_elses_policy(self, test_client, db):
        before = row_count(db, Claim)
        payload = {
            "policy_id": 3,
            "customer_id": 1,
            "claim_type": "theft",
            "incident_date": "2024-09-01",
            "claim_amount": 1000,
            "description": "Not my car",
        }
        response = test_client.post("/api/claims", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Policy not found or does not belong to customer"
        assert row_count(db, Claim) == before

    def test_status_update_with_companion_fields(self, test_client):
        body = test_client.put(
            "/api/claims/2/status", json={"status": "approved", "approved_amount": 8000, "notes": "adjusted"}
        ).json()
        assert body["data"]["status"] == "approved"
        assert body["data"]["approved_amount"] == 8000

        body = test_client.put("/api/claims/2/status", json={"status": "paid"}).json()
        assert body["data"]["approved_amount"] == 8000
        assert body["data"]["notes"] == "adjusted"

    def test_status_must_be_known(self, test_client):
        response = test_client.put("/api/claims/1/status", json={"status": "lost"})
        assert response.status_code == 400

    def test_missing_claim(self, test_client):
        assert test_client.put("/api/claims/999/status", json={"status": "closed"}).status_code == 404


class TestBrokersAndAgents:
    def test_list_ordered_by_name(self, test_client):
        body = test_client.get("/api/brokers").json()
        assert body["count"] == 5
        last_names = [b["last_name"] for b in body["data"]]
        assert last_names == sorted(last_names)

    def test_filter_and_search(self, test_client):
        body = test_client.get("/api/brokers", params={"territory": "coast"}).json()
        assert [b["broker_code"] for b in body["data"]] == ["BRK002"]

        body = test_client.get("/api/brokers/search", params={"q": "ironbridge"}).json()
        assert [b["broker_code"] for b in body["data"]] == ["BRK003"]

    def test_create_update_delete(self, test_client, new_broker_payload):
        created = test_client.post("/api/brokers", json=new_broker_payload)
        assert created.status_code == 201
        broker = created.json()["data"]
        assert broker["broker_code"].startswith("BRK")
        assert broker["commission_rate"] == 0.05
        assert broker["status"] == "active"

        new_broker_payload["territory"] = "Pacific"
        updated = test_client.put(f"/api/brokers/{broker['id']}", json=new_broker_payload)
        assert updated.json()["data"]["territory"] == "Pacific"

        assert test_client.delete(f"/api/brokers/{broker['id']}").status_code == 200
        assert test_client.get(f"/api/brokers/{broker['id']}").status_code == 404

    def test_create_validation(self, test_client, new_broker_payload):
        del new_broker_payload["company_name"]
        response = test_client.post("/api/brokers", json=new_broker_payload)
        assert response.status_code == 400

        new_broker_payload["company_name"] = "Co"
        new_broker_payload["email"] = "iris@nowhere"
        response = test_client.post("/api/brokers", json=new_broker_payload)
        assert response.json()["message"] == "Invalid email format"

    def test_duplicate_email(self, test_client, new_broker_payload):
        new_broker_payload["email"] = "marcus.silverstone@silverstone-insurance.com"
        response = test_client.post("/api/brokers", json=new_broker_payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Email already exists"

    def test_duplicate_broker_code(self, test_client, db, new_broker_payload, monkeypatch):
        monkeypatch.setattr(record_numbers, "broker_code", lambda: "BRK001")
        response = test_client.post("/api/brokers", json=new_broker_payload)
        assert response.status_code == 409
        assert response.json()["message"] == "Broker already exists"
        assert row_count(db, Broker) == 5

    def test_delete_referenced_broker_is_blocked(self, test_client, db):
        response = test_client.delete("/api/brokers/1")
        assert response.status_code == 400
        assert "1 associated policies" in response.json()["message"]
        assert db.fetch_one(select(Broker.id).where(Broker.id == 1)) is not None

    def test_update_missing_broker(self, test_client, new_broker_payload):
        assert test_client.put("/api/brokers/999", json=new_broker_payload).status_code == 404

    def test_agents(self, test_client):
        body = test_client.get("/api/agents").json()
        assert body["count"] == 5
        assert body["data"][0]["last_name"] == "Brightforge"


class TestQuotes:
    def test_auto_quote(self, test_client):
        response = test_client.get(
            "/api/quotes", params={"policy_type": "auto", "coverage_amount": "100000", "customer_age": "30"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["estimated_premium"] == 150.0
        assert data["quote_id"].startswith("QTE")

    def test_quote_requires_coverage(self, test_client):
        response = test_client.get("/api/quotes", params={"policy_type": "auto"})
        assert response.status_code == 400


class TestAdmin:
    def test_customers_with_counts(self, test_client):
        body = test_client.get("/api/admin/customers").json()
        wizard = next(c for c in body["data"] if c["customer_number"] == "CUST001")
        assert wizard["policy_count"] == 2
        assert wizard["claim_count"] == 2

    def test_create_customer(self, test_client):
        payload = {
            "email": "merlin@email.com", "password": "owl", "first_name": "Merlin", "last_name": "Ambrosius",
            "credit_score": 800, "kyc_status": "approved", "agent_id": 2,
        }
        created = test_client.post("/api/admin/customers", json=payload)
        assert created.status_code == 201
        assert created.json()["data"]["credit_score"] == 800

        again = test_client.post("/api/admin/customers", json=payload)
        assert again.status_code == 409
        assert again.json()["message"] == "Customer with this email already exists"

    def test_partial_update(self, test_client):
        response = test_client.put("/api/admin/customers/6", json={"city": "Boulder"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["city"] == "Boulder"
        assert data["first_name"] == "Lady"

    def test_update_rejects_unknown_fields(self, test_client):
        response = test_client.put("/api/admin/customers/6", json={"customer_number": "HACKED"})
        assert response.status_code == 400

    def test_update_rejects_empty_body(self, test_client):
        response = test_client.put("/api/admin/customers/6", json={})
        assert response.status_code == 400

    def test_update_duplicate_email(self, test_client):
        response = test_client.put("/api/admin/customers/6", json={"email": WIZARD_EMAIL})
        assert response.status_code == 409

    def test_update_rejects_overlong_password(self, test_client):
        response = test_client.put("/api/admin/customers/6", json={"password": "x" * 80})
        assert response.status_code == 400
        assert response.json()["message"] == "Password cannot be longer than 72 bytes"

    def test_delete_customer_with_policies_is_blocked(self, test_client):
        response = test_client.delete("/api/admin/customers/1")
        assert response.status_code == 400
        body = response.json()
        assert body["policy_count"] == 2
        assert body["claim_count"] == 2

    def test_delete_customer(self, test_client):
        assert test_client.delete("/api/admin/customers/6").status_code == 200
        assert test_client.get("/api/customers/6").status_code == 404
        assert test_client.delete("/api/admin/customers/6").status_code == 404

    def test_reset_is_idempotent(self, test_client, db):
        """Two resets in a row leave identical row counts and fresh ids."""
        test_client.post("/api/brokers", json={
            "first_name": "Temp", "last_name": "Broker", "email": "temp@broker.com", "company_name": "Temp",
        })

        counts = []
        for _ in range(2):
            response = test_client.post("/api/admin/reset-database")
            assert response.status_code == 200
            assert response.json()["success"] is True
            counts.append({model.__name__: row_count(db, model) for model in (Customer, Policy, Claim, Broker)})

        assert counts[0] == counts[1] == {"Customer": 6, "Policy": 5, "Claim": 3, "Broker": 5}
        assert test_client.get("/api/customers/1").json()["data"]["customer_number"] == "CUST001"
