from typing import Dict

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: str
    message: str
    data: Dict[str, int]
