from pydantic import BaseModel


class SignUpRequest(BaseModel):
    username: str | None = None
    full_name: str | None = None
    password: str | None = None


class SignInRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    id: int
    username: str
    full_name: str

    model_config = {"from_attributes": True}


class SignInResponse(BaseModel):
    user: UserResponse
