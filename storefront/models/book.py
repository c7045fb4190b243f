from sqlmodel import SQLModel, Field
from datetime import datetime


class Book(SQLModel, table=True):
    id: str = Field(primary_key=True)
    title: str
    description: str

    # paise
    price: int

    image_path: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
