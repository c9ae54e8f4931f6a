"""API tests for the waitlist sign-up endpoint."""

from startup911.models import WaitlistEntry


class TestJoinWaitlist:
    def test_created(self, client, db):
        resp = client.post("/api/v1/waitlist", json={"email": "founder@startup.in", "source": "landing_page"})
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Successfully added to waitlist!"
        assert body["data"]["email"] == "founder@startup.in"
        assert body["data"]["source"] == "landing_page"
        assert db.query(WaitlistEntry).count() == 1

    def test_default_source(self, client):
        resp = client.post("/api/v1/waitlist", json={"email": "founder@startup.in"})
        assert resp.status_code == 201
        assert resp.json()["data"]["source"] == "grant_snap_extension"

    def test_missing_email(self, client):
        for body in ({}, {"email": ""}, {"email": "   "}, {"email": 42}):
            resp = client.post("/api/v1/waitlist", json=body)
            assert resp.status_code == 400
            assert resp.json() == {"detail": "Email is required"}

    def test_no_body(self, client):
        resp = client.post("/api/v1/waitlist")
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Email is required"}

    def test_invalid_email(self, client, db):
        for email in ("not-an-email", "founder@", "founder @startup.in"):
            resp = client.post("/api/v1/waitlist", json={"email": email})
            assert resp.status_code == 400
            assert resp.json() == {"detail": "Please enter a valid email address"}
        assert db.query(WaitlistEntry).count() == 0

    def test_duplicate_is_case_insensitive(self, client, db):
        assert client.post("/api/v1/waitlist", json={"email": "founder@startup.in"}).status_code == 201
        resp = client.post("/api/v1/waitlist", json={"email": " Founder@Startup.IN "})
        assert resp.status_code == 409
        assert resp.json() == {"detail": "This email is already on the waitlist"}
        assert db.query(WaitlistEntry).count() == 1


def test_waitlist_status(client):
    resp = client.get("/api/v1/waitlist")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Waitlist API is working"}
