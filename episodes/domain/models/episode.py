from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import EpisodesBase


class Episode(EpisodesBase):
    __tablename__ = "ENZ_EPS"

    id: Mapped[int] = mapped_column("rowid", Integer, primary_key=True)
    title: Mapped[str | None] = mapped_column("Video_Title", String, nullable=True)
    upload_date: Mapped[str | None] = mapped_column("Upload_Date", String, nullable=True)
    telecast_date: Mapped[str | None] = mapped_column("Telecast_date", String, nullable=True)  # authoritative date
    media_url: Mapped[str | None] = mapped_column("Youtube_Links", String, nullable=True)
    series_code: Mapped[str | None] = mapped_column("ESS_CODE", String, nullable=True)
