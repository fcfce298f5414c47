"""
Erreurs applicatives.

Chaque erreur porte le statut HTTP qui lui correspond, les handlers globaux
(app/core/error_handlers.py) les transforment en JSON {"error": ...}.
"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    http_status = 500

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class Unauthenticated(AppError):
    http_status = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ValidationError(AppError):
    http_status = 400


class NotFound(AppError):
    http_status = 404


class UpstreamError(AppError):
    """Le fournisseur IA est injoignable ou a répondu n'importe quoi"""
    http_status = 502


class InternalError(AppError):
    http_status = 500
