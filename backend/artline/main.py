"""FastAPI application entry point. Registers middleware, API routers and static file serving."""

import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from artline.config import settings
from artline.database import Base, SessionLocal, engine
import artline.models  # noqa: F401 - registers models on the metadata
from artline.routers import auth, content, revisions, contacts, media, stats, translate
from artline.services.auth_service import ensure_default_admin

app = FastAPI(
    title="Art Line CMS",
    description="Content management backend for the Art Line advertising agency website",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers
app.include_router(auth.router)
app.include_router(content.router)
app.include_router(revisions.router)
app.include_router(contacts.router)
app.include_router(media.router)
app.include_router(stats.router)
app.include_router(translate.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_admin(db)
    finally:
        db.close()


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Art Line CMS"}


@app.get("/api/status")
def status():
    return {"status": "ok", "message": "Art Line API is running"}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Serve the built client when present
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "client", "dist")
if os.path.exists(frontend_dir):
    app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
