from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum

# ==================== ENUMS ====================

class SalespersonRole(str, Enum):
    manager = "manager"
    salesperson = "salesperson"

# ==================== REQUEST SCHEMAS ====================

class SalespersonCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field("", description="Apelido del vendedor")
    manager_code: Optional[int] = Field(None, alias="managerCode", description="Gerente responsable")

# ==================== RESPONSE SCHEMAS ====================

class SalespersonCreateResponse(BaseModel):
    code: int
    name: str
