"""Shared error types for shape input handling."""

from __future__ import annotations


class ShapeContractError(TypeError):
    """Raised when a consumed shape lacks a required numeric field."""

    def __init__(self, field: str, shape: object) -> None:
        self.field = field
        self.shape_type = type(shape).__name__
        super().__init__(f"{self.shape_type} has no field {field!r}")


__all__ = ["ShapeContractError"]
