# bank_account_service/schemas/health_schemas.py
from typing import Dict, Optional

from pydantic import BaseModel


class ComponentStatus(BaseModel):
    status: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    service: str
    version: str
    time: str
    indicator: str
    components: Dict[str, ComponentStatus]
