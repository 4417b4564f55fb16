from pydantic import BaseModel
from typing import Optional, Generic, TypeVar

T = TypeVar('T')


class Envelope(BaseModel, Generic[T]):
    """``{status, data, error}`` wrapper used by every JSON endpoint"""
    status: str
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "Envelope[T]":
        return cls(status="ok", data=data)
