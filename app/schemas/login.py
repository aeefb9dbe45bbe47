from pydantic import BaseModel
from app.schemas.user import UserOut


class LoginResponse(BaseModel):
    user: UserOut
    message: str
