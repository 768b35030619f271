from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

class ReceivablesBaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

# ==================== RESPONSE SCHEMAS ====================

class TitleResponse(ReceivablesBaseModel):
    title_number: int = Field(..., alias="titleNumber")
    partner_code: int = Field(..., alias="partnerCode")
    partner: str
    amount: float
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    negotiation_date: Optional[datetime] = Field(None, alias="negotiationDate")
    financial_type: Optional[str] = Field(None, alias="financialType")
    installment: int = 1

class ReceivablesResponse(ReceivablesBaseModel):
    titles: List[TitleResponse] = Field(default_factory=list)
    total_amount: float = Field(0, alias="totalAmount")
