from pydantic import BaseModel
from typing import Optional, List, Union


class ErrorDetails(BaseModel):
    method: Optional[str] = None
    body_keys: Optional[List[str]] = None
    header_keys: Optional[List[str]] = None


class ApiErrorResponse(BaseModel):
    timestamp: str
    path: str
    status_code: int
    error: str
    message: Union[str, List[str]]
    request_id: Optional[str] = None
    details: Optional[ErrorDetails] = None
