# app/errors.py
from __future__ import annotations


class RentalError(Exception):
    """
    Error con código estable y status tipo HTTP (400 por defecto).
    Los adaptadores (FastAPI / MCP) lo traducen a su formato de error.
    """

    def __init__(self, message: str, code: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}

    def __repr__(self) -> str:
        return f"RentalError(code={self.code!r}, message={self.message!r})"


class UnknownToolError(RentalError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", "METHOD_NOT_FOUND", status_code=404)
        self.name = name
