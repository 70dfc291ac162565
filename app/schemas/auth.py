from pydantic import BaseModel, model_validator
from typing import Optional

from .usuario import UsuarioResponse


class UserLogin(BaseModel):
    legajo: Optional[str] = None
    email: Optional[str] = None
    password: str

    @model_validator(mode="after")
    def check_identifier(self):
        if not self.legajo and not self.email:
            raise ValueError("Se requiere email o legajo")
        return self

    @property
    def identifier(self) -> str:
        return self.email or self.legajo


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UsuarioResponse
