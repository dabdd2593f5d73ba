"""
Uniform JSON response envelope shared by every endpoint
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel


class ApiResponse(BaseModel):
    """{success, message, record | records, errors}"""
    success: bool
    message: Optional[str] = None
    record: Optional[Dict[str, Any]] = None
    records: Optional[List[Dict[str, Any]]] = None
    errors: Optional[Dict[str, List[str]]] = None

    def to_content(self) -> Dict[str, Any]:
        """Serialize, omitting keys that were never set"""
        return self.model_dump(mode="json", exclude_none=True)
