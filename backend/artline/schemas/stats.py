"""Pydantic schema for the admin dashboard counters."""

from typing import Dict

from artline.schemas.common import CamelModel


class StatsOut(CamelModel):
    total_content: int
    total_revisions: int
    total_media: int
    total_contacts: int
    unprocessed_contacts: int
    content_by_section: Dict[str, int]
    content_by_language: Dict[str, int]
