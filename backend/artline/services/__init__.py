"""Service layer package."""

from artline.services import (
    auth_service,
    revision_service,
    translation_service,
    content_service,
    contact_service,
    email_service,
    media_service,
    stats_service,
    bulk_import_service,
)
