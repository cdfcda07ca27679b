from pydantic import BaseModel


class LoginRequest(BaseModel):
    # Missing fields decode as empty strings and are rejected by the endpoint
    username: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    token: str
