from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict

from recordkeeper.domain.exceptions import InsufficientFundsError


class Entity(BaseModel):
    """
    Base domain model for anything stored in a TypedRepository.
    The id is assigned by the caller and never changes; every other field
    is validated on assignment so a rejected update leaves the model untouched.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., frozen=True, description="Caller-assigned unique identity")


class InventoryItem(Entity):
    """Item tracked by the JSON-backed inventory logger."""
    # Log entries are immutable once recorded.
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name of the item")
    quantity: int = Field(..., ge=0, description="Units in stock")
    date_added: datetime = Field(..., description="When the item was logged")


class ElectronicItem(Entity):
    name: str = Field(..., description="Display name of the item")
    quantity: int = Field(..., ge=0, description="Units in stock")
    brand: str = Field(..., description="Manufacturer brand")
    warranty_months: int = Field(..., ge=0, description="Warranty length in months")


class GroceryItem(Entity):
    name: str = Field(..., description="Display name of the item")
    quantity: int = Field(..., ge=0, description="Units in stock")
    expiry_date: date = Field(..., description="Best-before date")


class Patient(Entity):
    name: str
    age: int = Field(..., ge=0)
    gender: str


class Prescription(Entity):
    patient_id: int = Field(..., description="Id of the patient the prescription was issued to")
    medication_name: str
    date_issued: datetime


class Student(Entity):
    full_name: str = Field(..., min_length=1)
    score: int = Field(..., ge=0, le=100)

    @property
    def grade(self) -> str:
        if self.score >= 80:
            return "A"
        if self.score >= 70:
            return "B"
        if self.score >= 60:
            return "C"
        if self.score >= 50:
            return "D"
        return "F"


class Transaction(Entity):
    """A single debit recorded in the finance ledger."""
    model_config = ConfigDict(frozen=True)

    date: datetime = Field(..., description="When the transaction took place")
    amount: Decimal = Field(..., gt=0, description="Amount debited from the account")
    category: str = Field(..., description="Spending category, e.g. Groceries")


class AccountKind(str, Enum):
    STANDARD = "standard"
    SAVINGS = "savings"


class Account(BaseModel):
    """
    Bank account debited by transactions.

    Standard accounts always apply the debit. Savings accounts refuse any
    transaction larger than the current balance.
    """
    model_config = ConfigDict(validate_assignment=True)

    account_number: str = Field(..., frozen=True)
    balance: Decimal
    kind: AccountKind = AccountKind.STANDARD

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        """
        Debits the transaction amount and returns the new balance.

        Raises:
            InsufficientFundsError: if this is a savings account and the amount exceeds the balance.
        """
        if self.kind is AccountKind.SAVINGS and transaction.amount > self.balance:
            raise InsufficientFundsError(balance=self.balance, amount=transaction.amount)
        self.balance = self.balance - transaction.amount
        return self.balance
