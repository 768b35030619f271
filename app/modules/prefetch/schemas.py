from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Any, Optional

class PrefetchResponse(BaseModel):
    """
    Resultado del prefetch: conteos y listas completas para la caché del cliente
    """
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    partners_count: int = Field(0, alias="partnersCount")
    products_count: int = Field(0, alias="productsCount")
    partners_data: List[Dict[str, Any]] = Field(default_factory=list, alias="partnersData")
    products_data: List[Dict[str, Any]] = Field(default_factory=list, alias="productsData")
    error: Optional[str] = None
