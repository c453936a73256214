"""Field level translation rules and the auto-translate fan-out."""

import time

from artline.config import settings
from artline.models.content import ContentItem, ContentRevision
from artline.services import content_service, translation_service
from tests.conftest import auth_headers, uppercase_translator, use_translator


def _failing_for(language):
    def translator(text, source_lang, target_lang):
        if target_lang == language:
            raise RuntimeError("provider unavailable")
        return text.upper()
    return translator


def _save_payload(**overrides):
    body = {
        "sectionType": "about",
        "sectionKey": "main",
        "language": "ru",
        "content": {"title": "Привет"},
        "autoTranslate": True,
    }
    body.update(overrides)
    return body


def test_fields_for_section():
    assert translation_service.fields_for_section("hero") == ["title", "description", "content"]
    assert translation_service.fields_for_section("about") == ["title", "description", "content"]
    assert translation_service.fields_for_section("testimonials") == ["content"]


def test_translate_content_only_touches_allowlisted_fields():
    content = {"title": "заголовок", "description": "описание", "icon": "star", "price": 100}
    result, untranslated = translation_service.translate_content(
        content, ["title", "description", "content"], "ru", "en", uppercase_translator
    )
    assert result == {"title": "ЗАГОЛОВОК", "description": "ОПИСАНИЕ", "icon": "star", "price": 100}
    assert untranslated == []
    # the source document is not mutated
    assert content["title"] == "заголовок"


def test_translate_nested_field_round_trips_through_json():
    content = {"content": {"items": ["один", "два"]}}
    result, untranslated = translation_service.translate_content(content, ["content"], "ru", "kz", uppercase_translator)
    assert result == {"content": {"ITEMS": ["ОДИН", "ДВА"]}}
    assert untranslated == []


def test_translate_nested_field_strips_code_fence():
    def fenced(text, source_lang, target_lang):
        return f"```json\n{text}\n```"

    content = {"content": [{"name": "x"}]}
    result, untranslated = translation_service.translate_content(content, ["content"], "ru", "en", fenced)
    assert result == content
    assert untranslated == []


def test_translate_nested_field_falls_back_on_invalid_json():
    def broken_json(text, source_lang, target_lang):
        return "not json at all"

    content = {"title": "текст", "content": {"text": "привет"}}
    result, untranslated = translation_service.translate_content(
        content, ["title", "content"], "ru", "en", broken_json
    )
    assert result["title"] == "not json at all"
    assert result["content"] == {"text": "привет"}
    assert untranslated == ["content"]


def test_translate_nested_field_falls_back_when_json_type_changes():
    def to_object(text, source_lang, target_lang):
        return '{"wrapped": true}'

    result, untranslated = translation_service.translate_content(
        {"content": ["a", "b"]}, ["content"], "ru", "en", to_object
    )
    assert result == {"content": ["a", "b"]}
    assert untranslated == ["content"]


def test_translate_provider_error_keeps_source_text():
    result, untranslated = translation_service.translate_content(
        {"title": "текст", "content": "тело"}, ["title", "content"], "ru", "en", _failing_for("en")
    )
    assert result == {"title": "текст", "content": "тело"}
    assert untranslated == ["title", "content"]


def test_translate_skips_empty_values():
    calls = []

    def recording(text, source_lang, target_lang):
        calls.append(text)
        return text.upper()

    result, _ = translation_service.translate_content(
        {"title": "", "description": None, "content": []}, ["title", "description", "content"], "ru", "en", recording
    )
    assert result == {"title": "", "description": None, "content": []}
    assert calls == []


def test_translate_bare_string_content():
    result, untranslated = translation_service.translate_content("текст", ["content"], "ru", "en", uppercase_translator)
    assert result == "ТЕКСТ"
    assert untranslated == []


def test_fan_out_isolates_failing_language():
    results = translation_service.fan_out(
        {"content": "текст"}, ["content"], "ru", ["kz", "en"], _failing_for("en")
    )
    by_lang = {r.language: r for r in results}
    assert by_lang["kz"].content == {"content": "ТЕКСТ"}
    assert by_lang["kz"].untranslated_fields == []
    assert by_lang["en"].content == {"content": "текст"}
    assert by_lang["en"].untranslated_fields == ["content"]


def test_fan_out_times_out_slow_language():
    def slow_for_kz(text, source_lang, target_lang):
        if target_lang == "kz":
            time.sleep(1.0)
        return text.upper()

    results = translation_service.fan_out(
        {"content": "текст"}, ["content"], "ru", ["kz", "en"], slow_for_kz, timeout=0.2
    )
    by_lang = {r.language: r for r in results}
    assert by_lang["kz"].error == "Translation timed out"
    assert by_lang["kz"].ok is False
    assert by_lang["en"].content == {"content": "ТЕКСТ"}


def test_auto_translate_creates_other_languages(client, db, seed_users):
    headers = auth_headers(client)
    resp = client.post("/api/content", json=_save_payload(), headers=headers)
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["original"]["language"] == "ru"
    assert data["original"]["content"] == {"title": "Привет"}
    assert data["translationsCreated"] is True
    assert sorted(data["languages"]) == ["en", "kz"]
    assert data["translationError"] is None

    for lang in ("kz", "en"):
        row = content_service.get_content(db, "about", "main", lang)
        assert row.content == {"title": "ПРИВЕТ"}
        assert row.created_by == seed_users["admin"].user_id
    assert db.query(ContentRevision).count() == 0

    resp = client.get("/api/content?sectionType=about&sectionKey=main")
    all_languages = resp.json()
    assert all(all_languages[lang] is not None for lang in ("ru", "kz", "en"))


def test_auto_translate_updates_existing_translations_with_revisions(client, db, seed_users):
    headers = auth_headers(client)
    client.post("/api/content", json=_save_payload(content={"title": "один"}), headers=headers)
    client.post("/api/content", json=_save_payload(content={"title": "два"}), headers=headers)

    for lang in ("ru", "kz", "en"):
        row = content_service.get_content(db, "about", "main", lang)
        revisions = db.query(ContentRevision).filter(ContentRevision.content_id == row.content_id).all()
        assert len(revisions) == 1
    assert content_service.get_content(db, "about", "main", "en").content == {"title": "ДВА"}


def test_auto_translate_partial_failure_still_succeeds(client, db, seed_users):
    use_translator(_failing_for("en"))
    headers = auth_headers(client)
    resp = client.post("/api/content", json=_save_payload(), headers=headers)
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["translationsCreated"] is False
    assert "en" in data["translationError"]
    results = {r["language"]: r for r in data["results"]}
    assert results["kz"]["translated"] is True
    assert results["en"]["saved"] is True
    assert results["en"]["translated"] is False
    assert results["en"]["untranslatedFields"] == ["title"]

    assert content_service.get_content(db, "about", "main", "ru").content == {"title": "Привет"}
    assert content_service.get_content(db, "about", "main", "kz").content == {"title": "ПРИВЕТ"}
    assert content_service.get_content(db, "about", "main", "en").content == {"title": "Привет"}


def test_auto_translate_save_failure_for_one_language(client, db, seed_users, monkeypatch):
    original_save = content_service.save_content

    def save_failing_for_kz(db, **kwargs):
        if kwargs["language"] == "kz":
            raise RuntimeError("disk full")
        return original_save(db, **kwargs)

    monkeypatch.setattr(content_service, "save_content", save_failing_for_kz)
    headers = auth_headers(client)
    resp = client.post("/api/content", json=_save_payload(), headers=headers)
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["languages"] == ["en"]
    results = {r["language"]: r for r in data["results"]}
    assert results["kz"]["saved"] is False
    assert results["kz"]["error"] == "Error saving translation"

    assert content_service.get_content(db, "about", "main", "kz") is None
    assert content_service.get_content(db, "about", "main", "en").content == {"title": "ПРИВЕТ"}


def test_auto_translate_timeout_leaves_existing_translation_untouched(client, db, seed_users, monkeypatch):
    content_service.save_content(
        db, section_type="about", section_key="main", language="kz", content={"title": "ескі"}, actor_id=None
    )

    def slow_for_kz(text, source_lang, target_lang):
        if target_lang == "kz":
            time.sleep(1.0)
        return text.upper()

    monkeypatch.setattr(settings, "TRANSLATION_FANOUT_TIMEOUT_SECONDS", 0.2)
    use_translator(slow_for_kz)
    resp = client.post("/api/content", json=_save_payload(), headers=auth_headers(client))
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["translationsCreated"] is False
    assert data["languages"] == ["en"]
    results = {r["language"]: r for r in data["results"]}
    assert results["kz"]["saved"] is False
    assert results["kz"]["error"] == "Translation timed out"
    assert results["en"]["saved"] is True

    db.expire_all()
    kz = content_service.get_content(db, "about", "main", "kz")
    assert kz.content == {"title": "ескі"}
    assert db.query(ContentRevision).filter(ContentRevision.content_id == kz.content_id).count() == 0
    assert content_service.get_content(db, "about", "main", "ru").content == {"title": "Привет"}
    assert content_service.get_content(db, "about", "main", "en").content == {"title": "ПРИВЕТ"}


def test_auto_translate_ignored_for_non_source_language(client, db, seed_users):
    headers = auth_headers(client)
    resp = client.post("/api/content", json=_save_payload(language="en", content={"title": "Hello"}), headers=headers)
    assert resp.status_code == 201
    assert "original" not in resp.json()
    assert db.query(ContentItem).count() == 1


def test_auto_translate_off_by_default(client, db, seed_users):
    headers = auth_headers(client)
    body = _save_payload()
    del body["autoTranslate"]
    resp = client.post("/api/content", json=body, headers=headers)
    assert resp.status_code == 201
    assert resp.json()["language"] == "ru"
    assert db.query(ContentItem).count() == 1


def test_auto_translate_uses_section_allowlist(client, db, seed_users):
    headers = auth_headers(client)
    body = _save_payload(sectionType="testimonials", content={"author": "Иван", "content": "отлично"})
    resp = client.post("/api/content", json=body, headers=headers)
    assert resp.status_code == 201
    assert content_service.get_content(db, "testimonials", "main", "kz").content == {
        "author": "Иван",
        "content": "ОТЛИЧНО",
    }


def test_translate_endpoint(client, seed_users):
    headers = auth_headers(client)
    resp = client.post(
        "/api/translate",
        json={"text": "привет", "sourceLang": "ru", "targetLang": "en"},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["translatedText"] == "ПРИВЕТ"


def test_translate_endpoint_rejects_unknown_language(client, seed_users):
    headers = auth_headers(client)
    resp = client.post(
        "/api/translate",
        json={"text": "привет", "sourceLang": "ru", "targetLang": "fr"},
        headers=headers,
    )
    assert resp.status_code == 422
