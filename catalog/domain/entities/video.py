from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CatalogVideoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: Optional[str] = None
    language: Optional[str] = None
    category: Optional[str] = None
    theme: Optional[str] = None
    entity_name: Optional[str] = Field(default=None, alias="churchName")
    entity_region: Optional[str] = Field(default=None, alias="churchState")
    media_url: Optional[str] = Field(default=None, alias="youtubeUrl")
    upload_date: Optional[str] = Field(default=None, alias="uploadDate")


class FacetsOut(BaseModel):
    languages: List[str] = []
    regions: List[str] = []
    entities: List[str] = []

    model_config = {
        "json_schema_extra": {
            "example": {
                "languages": ["HINDI", "TAMIL"],
                "regions": ["Punjab"],
                "entities": ["Grace Church"],
            }
        }
    }
