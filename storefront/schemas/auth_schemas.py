from pydantic import BaseModel


class OtpRequest(BaseModel):
    phone: str


class OtpVerifyRequest(BaseModel):
    phone: str
    code: str


class UserRead(BaseModel):
    id: str
    phone: str


class Token(BaseModel):
    access_token: str
    token_type: str
    user: UserRead
