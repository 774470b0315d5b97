"""Maintenance HTTP Schemas."""

from pydantic import BaseModel


class MaintenanceResponse(BaseModel):
    """유지보수 작업 결과 스키마."""

    success: bool
    message: str
