import logging
from enum import Enum
from typing import Optional

from recordkeeper.domain.exceptions import InsufficientFundsError, DuplicateEntityError
from recordkeeper.domain.models import Account, Transaction
from recordkeeper.domain.repository import TypedRepository

logger = logging.getLogger(__name__)


class PaymentChannel(str, Enum):
    BANK_TRANSFER = "bank_transfer"
    MOBILE_MONEY = "mobile_money"
    CRYPTO_WALLET = "crypto_wallet"


class TransactionProcessor:
    """Hands a transaction to the payment channel it was made through."""

    def process(self, transaction: Transaction, channel: PaymentChannel) -> str:
        if channel is PaymentChannel.BANK_TRANSFER:
            label = "Bank transfer"
        elif channel is PaymentChannel.MOBILE_MONEY:
            label = "Mobile money"
        elif channel is PaymentChannel.CRYPTO_WALLET:
            label = "Crypto wallet"
        else:
            raise ValueError(f"Unsupported payment channel: {channel!r}")

        message = f"{label}: Amount {transaction.amount} for {transaction.category}"
        logger.info(message)
        return message


class FinanceService:
    """
    Applies transactions to a single account and keeps a ledger of the ones
    that went through.
    """

    def __init__(
            self,
            account: Account,
            processor: Optional[TransactionProcessor] = None,
            ledger: Optional[TypedRepository[Transaction]] = None
    ):
        self.account = account
        self.processor = processor if processor is not None else TransactionProcessor()
        self.ledger = ledger if ledger is not None else TypedRepository()

    def record(self, transaction: Transaction, channel: PaymentChannel) -> bool:
        """
        Processes, applies and records a transaction.

        Returns:
            bool: True if the account was debited, False if a savings account refused it.

        Raises:
            DuplicateEntityError: if the ledger already holds a transaction with this id.
        """
        if transaction.id in self.ledger:
            raise DuplicateEntityError(transaction.id, message="Transaction already recorded.")

        self.processor.process(transaction, channel)
        try:
            balance = self.account.apply_transaction(transaction)
        except InsufficientFundsError as e:
            logger.warning(f"Account {self.account.account_number}: {e}")
            return False

        self.ledger.add(transaction)
        logger.info(f"Account {self.account.account_number}: updated balance {balance}")
        return True
