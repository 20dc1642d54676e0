from pydantic import BaseModel, field_validator

from ednc.schemas._validators import require_nonblank, require_text


class InstructorCreate(BaseModel):
    name: str
    email: str
    password: str

    @field_validator("name", "email", mode="before")
    @classmethod
    def not_blank(cls, value):
        return require_text(value)

    @field_validator("password", mode="before")
    @classmethod
    def password_not_blank(cls, value):
        return require_nonblank(value)


class InstructorLogin(BaseModel):
    email: str
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def not_blank(cls, value):
        return require_text(value)

    @field_validator("password", mode="before")
    @classmethod
    def password_not_blank(cls, value):
        return require_nonblank(value)


class InstructorOut(BaseModel):
    id: int
    name: str
    email: str
    is_admin: bool

    class Config:
        from_attributes = True


class AuthOut(BaseModel):
    token: str
    token_type: str = "bearer"
    instructor: InstructorOut
