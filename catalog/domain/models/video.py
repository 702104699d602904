from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import CatalogBase


class CatalogVideo(CatalogBase):
    """One row of the ministry-video catalog. Every column is free-form text."""

    __tablename__ = "YT_tbl"

    id: Mapped[int] = mapped_column("rowid", Integer, primary_key=True)
    title: Mapped[str | None] = mapped_column("Video_Title", String, nullable=True)
    language: Mapped[str | None] = mapped_column("Segment_Language", String, nullable=True)
    category: Mapped[str | None] = mapped_column("Ministry_Category", String, nullable=True)
    theme: Mapped[str | None] = mapped_column("Theme", String, nullable=True)
    entity_name: Mapped[str | None] = mapped_column("Church_Name", String, nullable=True)
    entity_region: Mapped[str | None] = mapped_column("Church_State", String, nullable=True)
    media_url: Mapped[str | None] = mapped_column("Youtube_Links", String, nullable=True)
    upload_date: Mapped[str | None] = mapped_column("Upload_Date", String, nullable=True)
