from pydantic import BaseModel, ConfigDict
from datetime import datetime


class BookRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    title: str
    description: str
    price: int
    image_path: str
    created_at: datetime
