import datetime as dt

from pydantic import BaseModel, ConfigDict


class DiaryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: dt.date
    weather: str
    icon: str
    temperature: float
    text: str
