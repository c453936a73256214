from artline.models.contact import ContactSubmission
from artline.services import content_service
from tests.conftest import auth_headers


def test_stats_counts(client, db, seed_users):
    for language in ("ru", "kz"):
        content_service.save_content(
            db, section_type="hero", section_key="main", language=language, content={"title": "x"}, actor_id=None
        )
    content_service.save_content(
        db, section_type="hero", section_key="main", language="ru", content={"title": "y"}, actor_id=None
    )
    content_service.save_content(
        db, section_type="services", section_key="a", language="ru", content={"title": "z"}, actor_id=None
    )
    db.add(ContactSubmission(name="A", phone="1", processed=False))
    db.add(ContactSubmission(name="B", phone="2", processed=True))
    db.commit()

    resp = client.get("/api/stats", headers=auth_headers(client))
    assert resp.status_code == 200
    data = resp.json()
    assert data["totalContent"] == 3
    assert data["totalRevisions"] == 1
    assert data["totalMedia"] == 0
    assert data["totalContacts"] == 2
    assert data["unprocessedContacts"] == 1
    assert data["contentBySection"] == {"hero": 2, "services": 1}
    assert data["contentByLanguage"] == {"ru": 2, "kz": 1, "en": 0}


def test_stats_requires_admin(client, seed_users):
    resp = client.get("/api/stats", headers=auth_headers(client, "editor"))
    assert resp.status_code == 403
