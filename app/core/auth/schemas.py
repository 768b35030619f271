from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class SessionUser(BaseModel):
    """
    Usuario de la cookie de sesión emitida por el login.

    Acepta ID_EMPRESA o id_empresa para la empresa, como lo escriben
    las distintas versiones del login.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    company_id: Optional[int] = Field(None, alias="ID_EMPRESA")
    salesperson_code: Optional[int] = Field(None, alias="codVendedor")

    @property
    def is_admin(self) -> bool:
        return (self.role or "").lower() in ("administrador", "admin")
