from catalog.domain.entities.video import CatalogVideoOut
from catalog.domain.models.video import CatalogVideo


def to_video_out(row: CatalogVideo) -> CatalogVideoOut:
    return CatalogVideoOut(
        id=row.id,
        title=row.title,
        language=row.language,
        category=row.category,
        theme=row.theme,
        entity_name=row.entity_name,
        entity_region=row.entity_region,
        media_url=row.media_url,
        upload_date=row.upload_date,
    )
