from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    user: str = Field(alias="User")
    password: str = Field(alias="Password")

    class Config:
        populate_by_name = True


class Token(BaseModel):
    token: str


class Claims(BaseModel):
    """Claim set carried by every issued token."""
    access: str
    name: str
    kind: str
    exp: int
