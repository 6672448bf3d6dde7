# app/shared/schemas/common.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, serializes as camelCase"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseResponse(CamelModel):
    success: bool
    message: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)

