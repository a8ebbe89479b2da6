"""Request/response schemas for the generation routes.

Holds Pydantic models for the staged upload, the inline attachment sent to
the model, and the per-request result that routes turn into JSON.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel


class Upload(BaseModel):
    path: str
    mime_type: str
    field_name: str
    filename: str = ""


class InlineContent(BaseModel):
    data: str  # base64
    mime_type: str


class GenerationResult(BaseModel):
    output: Optional[str] = None
    error: Optional[str] = None
    details: Optional[str] = None
    status: int = 200

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, output: str) -> "GenerationResult":
        return cls(output=output)

    @classmethod
    def failure(cls, error: str, details: Optional[str] = None, status: int = 500) -> "GenerationResult":
        return cls(error=error, details=details, status=status)

    def to_json(self) -> Dict[str, Any]:
        if self.ok:
            return {"output": self.output}
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body
