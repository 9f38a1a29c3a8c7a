"""
Description: 
This module defines the schema for health check responses using Pydantic.

Dependencies:
- pydantic: For data validation and settings management.

Author: @kcaparas1630
"""
from pydantic import BaseModel

class HealthResponse(BaseModel):
    """
    Schema for health check endpoint responses, including which feedback sources are active.
    """
    status: str
    remote_enabled: bool = False
    direct_llm_enabled: bool = False
    offline_mode: bool = False
