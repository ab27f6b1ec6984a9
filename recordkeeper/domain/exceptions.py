from typing import Optional


class RecordKeeperException(Exception):
    """Base exception for all record-keeping domain errors."""
    pass

class DuplicateEntityError(RecordKeeperException):
    """Raised when an entity with the same id is already stored."""
    def __init__(self, entity_id: int, message: str = "Entity already exists."):
        self.entity_id = entity_id
        super().__init__(f"{message} ID: {entity_id}")

class NotFoundError(RecordKeeperException):
    """Raised when no entity is stored under the requested id."""
    def __init__(self, entity_id: int, message: str = "Entity not found."):
        self.entity_id = entity_id
        super().__init__(f"{message} ID: {entity_id}")

class InvalidValueError(RecordKeeperException):
    """Raised when a new field value violates a domain constraint."""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)

class InsufficientFundsError(InvalidValueError):
    """Raised when a savings account cannot cover a transaction."""
    def __init__(self, balance, amount):
        self.balance = balance
        self.amount = amount
        super().__init__(f"Insufficient funds: balance {balance}, requested {amount}.", field="balance")

class MissingFieldError(RecordKeeperException):
    """Raised when a student record line has missing, extra, or empty fields."""
    pass

class InvalidScoreFormatError(RecordKeeperException):
    """Raised when a student record line carries an unparseable id or score."""
    pass
