"""SQLAlchemy model package; importing it registers every table on the metadata."""

from artline.models.user import User
from artline.models.content import ContentItem, ContentRevision
from artline.models.contact import ContactSubmission
from artline.models.media import Media

__all__ = [
    "User",
    "ContentItem", "ContentRevision",
    "ContactSubmission",
    "Media",
]
