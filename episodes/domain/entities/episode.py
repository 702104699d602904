from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EpisodeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: Optional[str] = None
    upload_date: Optional[str] = Field(default=None, alias="uploadDate")
    telecast_date: Optional[str] = Field(default=None, alias="telecastDate")
    media_url: Optional[str] = Field(default=None, alias="youtubeUrl")
    series_code: Optional[str] = Field(default=None, alias="ESS_CODE")


class MonthOut(BaseModel):
    value: str
    name: str


class YearsOut(BaseModel):
    years: List[str] = []


class MonthsOut(BaseModel):
    months: Union[List[MonthOut], List[str]] = []
