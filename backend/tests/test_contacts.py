"""Contact form submissions and their notification side effect."""

from artline.models.contact import ContactSubmission
from artline.services import email_service
from tests.conftest import auth_headers


def _submit(client, **overrides):
    body = {"name": "Айгуль", "phone": "+7 701 000 00 00", "email": "client@example.com", "service": "Billboards"}
    body.update(overrides)
    return client.post("/api/contacts", json=body)


def test_create_submission_is_public(client, db, monkeypatch):
    sent = []
    monkeypatch.setattr(email_service, "notify_new_submission", lambda submission: sent.append(submission))

    resp = _submit(client)
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["processed"] is False
    assert data["submissionId"] > 0
    assert db.query(ContactSubmission).count() == 1
    assert sent and sent[0]["phone"] == "+7 701 000 00 00"


def test_create_submission_validation(client):
    resp = client.post("/api/contacts", json={"name": "", "phone": "123"})
    assert resp.status_code == 422


def test_notification_failure_does_not_fail_submission(client, db, monkeypatch):
    def broken(submission):
        raise RuntimeError("smtp down")

    monkeypatch.setattr(email_service, "send_admin_notification", broken)
    resp = _submit(client)
    assert resp.status_code == 201
    assert db.query(ContactSubmission).count() == 1


def test_email_skipped_when_smtp_not_configured(monkeypatch):
    monkeypatch.setattr(email_service.settings, "SMTP_HOST", "")
    monkeypatch.setattr(email_service.settings, "ADMIN_EMAIL", "admin@art-line.kz")
    submission = {"submission_id": 1, "name": "A", "phone": "1", "email": "a@example.com"}
    assert email_service.send_admin_notification(submission) is False
    assert email_service.send_user_confirmation(submission) is False


def test_user_confirmation_needs_email():
    assert email_service.send_user_confirmation({"name": "A", "phone": "1", "email": None}) is False


def test_admin_notification_escapes_html():
    html = email_service.format_admin_notification(
        {"name": "<script>", "phone": "1", "message": "a & b", "created_at": "2024-01-01"}
    )
    assert "&lt;script&gt;" in html
    assert "a &amp; b" in html
    assert "2024-01-01" in html


def test_list_and_filter_submissions(client, db, seed_users, monkeypatch):
    monkeypatch.setattr(email_service, "notify_new_submission", lambda submission: None)
    first = _submit(client, name="First").json()
    _submit(client, name="Second")
    headers = auth_headers(client)

    resp = client.patch(f"/api/contacts/{first['submissionId']}", json={"processed": True}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["processed"] is True

    all_rows = client.get("/api/contacts", headers=headers).json()
    assert len(all_rows) == 2
    pending = client.get("/api/contacts?processed=false", headers=headers).json()
    assert [row["name"] for row in pending] == ["Second"]


def test_list_submissions_requires_auth(client):
    resp = client.get("/api/contacts")
    assert resp.status_code in (401, 403)


def test_get_unknown_submission(client, seed_users):
    resp = client.get("/api/contacts/999", headers=auth_headers(client))
    assert resp.status_code == 404
