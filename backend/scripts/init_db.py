"""Initialize the database - creates all tables and the default admin."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from artline.database import engine, Base, SessionLocal
import artline.models  # noqa: F401 - registers all models
from artline.services.auth_service import ensure_default_admin


def init_db():
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        admin = ensure_default_admin(db)
        print(f"Admin user: {admin.username}")
    finally:
        db.close()
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
