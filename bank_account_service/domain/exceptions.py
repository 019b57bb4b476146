# bank_account_service/domain/exceptions.py
from typing import Any, Dict


class BankAccountServiceError(Exception):
    """Base class for errors reported back to API callers."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> Dict[str, Any]:
        # Picked up by graphql-core when building the response error
        return {"code": self.code}


class NotFoundError(BankAccountServiceError):
    """Raised when a customer or account id does not resolve."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, identifier: Any):
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class ValidationError(BankAccountServiceError):
    """Raised when a write would break the customer/account relationship."""

    code = "VALIDATION_ERROR"
