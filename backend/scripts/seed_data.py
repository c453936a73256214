"""Seed the database with initial site content in all languages."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from artline.database import SessionLocal, engine, Base
import artline.models  # noqa: F401

from artline.models.content import ContentItem
from artline.services import content_service
from artline.services.auth_service import ensure_default_admin

SEED_CONTENT = {
    ("hero", "main"): {
        "ru": {
            "title": "Рекламное агентство Art Line",
            "description": "Наружная реклама, полиграфия и брендинг в Казахстане",
            "content": "Создаём рекламу, которую замечают.",
        },
        "kz": {
            "title": "Art Line жарнама агенттігі",
            "description": "Қазақстандағы сыртқы жарнама, полиграфия және брендинг",
            "content": "Байқалатын жарнама жасаймыз.",
        },
        "en": {
            "title": "Art Line advertising agency",
            "description": "Outdoor advertising, printing and branding in Kazakhstan",
            "content": "We create advertising that gets noticed.",
        },
    },
    ("about", "main"): {
        "ru": {"title": "О нас", "content": "Более 15 лет на рынке рекламы."},
        "kz": {"title": "Біз туралы", "content": "Жарнама нарығында 15 жылдан астам."},
        "en": {"title": "About us", "content": "More than 15 years in the advertising market."},
    },
    ("services", "outdoor"): {
        "ru": {"title": "Наружная реклама", "description": "Билборды, вывески, световые короба", "icon": "billboard"},
        "kz": {"title": "Сыртқы жарнама", "description": "Билбордтар, маңдайшалар, жарық қораптары", "icon": "billboard"},
        "en": {"title": "Outdoor advertising", "description": "Billboards, signage, light boxes", "icon": "billboard"},
    },
}


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        admin = ensure_default_admin(db)
        if db.query(ContentItem).count() > 0:
            print("Database already seeded. Skipping.")
            return

        for (section_type, section_key), languages in SEED_CONTENT.items():
            for language, content in languages.items():
                content_service.save_content(
                    db,
                    section_type=section_type,
                    section_key=section_key,
                    language=language,
                    content=content,
                    actor_id=admin.user_id,
                )
        print(f"Seeded {db.query(ContentItem).count()} content rows.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
