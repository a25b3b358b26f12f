"""
HTTP tests for the site backend: page and menu routes, the /send-email relay
endpoint and the mailto helper endpoint.
"""

import pytest
from fastapi.testclient import TestClient

import app as app_module
from app import app, get_relay, get_guard
from menu_data import MENU_ITEMS, CATEGORY_ORDER
from reservation import BaseRelay, RelayResult, SubmissionGuard

FORM = {
    "name": "Anna Schmidt",
    "phone": "0170 1234567",
    "person": "50",
    "reservationDate": "2026-11-20",
    "reservationTime": "19:30",
    "message": "Geburtstag",
}


class RecordingRelay(BaseRelay):
    """Relay double that records dispatches and returns a fixed outcome."""

    def __init__(self, ok=True):
        self.ok = ok
        self.dispatched = []

    async def submit(self, booking):
        self.check(booking)
        self.dispatched.append(booking)
        if self.ok:
            return RelayResult(ok=True, detail="Email sent successfully")
        return RelayResult(ok=False, detail="Error sending email")


@pytest.fixture
def relay():
    return RecordingRelay()


@pytest.fixture
def client(relay):
    app_module._ip_hits.clear()
    app.dependency_overrides[get_relay] = lambda: relay
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class TestPages:

    def test_root_serves_rendered_menu(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert resp.text.count('class="menu-card') == len(MENU_ITEMS)
        assert "Getränke" in resp.text

    def test_menu_records(self, client):
        records = client.get("/menu").json()
        headers = [r for r in records if r["kind"] == "header"]
        items = [r for r in records if r["kind"] == "item"]
        assert [h["key"] for h in headers] == list(CATEGORY_ORDER)
        assert len(items) == len(MENU_ITEMS)
        assert items[0]["price"] == "10,00 €"

    def test_healthz(self, client):
        assert client.get("/healthz").json()["ok"] is True


class TestSendEmail:

    def test_form_submission(self, client, relay):
        resp = client.post("/send-email", data=FORM)
        assert resp.status_code == 200
        assert resp.text == "Email sent successfully"
        assert len(relay.dispatched) == 1
        assert relay.dispatched[0].date == "2026-11-20"

    def test_json_submission(self, client, relay):
        resp = client.post("/send-email", json={**FORM, "person": 80})
        assert resp.status_code == 200
        assert relay.dispatched[0].person == 80

    def test_missing_phone_never_dispatches(self, client, relay):
        resp = client.post("/send-email", data={**FORM, "phone": ""})
        assert resp.status_code == 400
        assert resp.text == "Bitte füllen Sie alle Pflichtfelder aus."
        assert relay.dispatched == []

    @pytest.mark.parametrize("persons, status", [("49", 400), ("50", 200)])
    def test_party_size_boundary(self, client, relay, persons, status):
        resp = client.post("/send-email", data={**FORM, "person": persons})
        assert resp.status_code == status

    def test_address_not_required_on_server(self, client, relay):
        resp = client.post("/send-email", data=FORM)
        assert resp.status_code == 200
        assert relay.dispatched[0].address is None

    def test_transport_failure_is_500(self, client):
        app.dependency_overrides[get_relay] = lambda: RecordingRelay(ok=False)
        resp = client.post("/send-email", data=FORM)
        assert resp.status_code == 500
        assert resp.text == "Error sending email"

    def test_malformed_json(self, client, relay):
        resp = client.post("/send-email", content=b"{not json", headers={"content-type": "application/json"})
        assert resp.status_code == 400
        assert relay.dispatched == []

    @pytest.mark.parametrize("persons", ["inf", "1e400"])
    def test_overflowing_party_size_is_rejected(self, client, relay, persons):
        resp = client.post("/send-email", data={**FORM, "person": persons})
        assert resp.status_code == 400
        assert "mindestens 50" in resp.text
        assert relay.dispatched == []

    def test_submission_in_flight_is_429(self, client, relay):
        guard = SubmissionGuard()
        guard._in_flight.add("testclient")
        app.dependency_overrides[get_guard] = lambda: guard
        resp = client.post("/send-email", data=FORM)
        assert resp.status_code == 429
        assert resp.text == "Submission already in progress"
        assert relay.dispatched == []
        assert guard.busy("testclient")


class TestMailtoEndpoint:

    def test_returns_mailto_link(self, client):
        resp = client.post("/reservation/mailto", json={**FORM, "address": "Hauptstr. 1"})
        assert resp.status_code == 200
        assert resp.json()["mailto"].startswith("mailto:")

    def test_client_path_requires_address(self, client):
        resp = client.post("/reservation/mailto", json=FORM)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Bitte füllen Sie alle Pflichtfelder aus."
