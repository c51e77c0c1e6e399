from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, Any, Dict


class CamelModel(BaseModel):
    """Base schema whose JSON keys are camelCase; snake_case is accepted on input too."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Generic message response."""
    
    message: str


class ErrorResponse(BaseModel):
    """Error response model."""
    
    message: str
    errors: Optional[Dict[str, Any]] = None
