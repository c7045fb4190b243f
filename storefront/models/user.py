from sqlmodel import SQLModel, Field
from datetime import datetime


class User(SQLModel, table=True):
    __tablename__ = "storefront_user"
    # id issued by the OTP provider
    id: str = Field(primary_key=True)
    phone: str = Field(index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
