from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Any

class ProductsBaseModel(BaseModel):
    """
    Clase base para las respuestas del módulo, con alias camelCase.
    """
    model_config = ConfigDict(populate_by_name=True)

# ==================== RESPONSE SCHEMAS ====================

class StockResponse(ProductsBaseModel):
    code: int
    stocks: List[Dict[str, Any]] = Field(default_factory=list)
    total_stock: float = Field(0, alias="totalStock")

class PriceResponse(ProductsBaseModel):
    code: int
    price_table: int = Field(0, alias="priceTable")
    price: float = 0

class PriceTablesResponse(ProductsBaseModel):
    tables: List[Dict[str, Any]] = Field(default_factory=list)
