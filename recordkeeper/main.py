import sys
import logging
from datetime import date, datetime
from decimal import Decimal
from pydantic import ValidationError

from recordkeeper.config import Settings
from recordkeeper.domain.exceptions import RecordKeeperException
from recordkeeper.domain.models import (
    Account,
    AccountKind,
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Transaction,
)
from recordkeeper.domain.repository import TypedRepository
from recordkeeper.infrastructure.json_store import JsonFileStore
from recordkeeper.application.finance_service import FinanceService, PaymentChannel
from recordkeeper.application.grade_report_service import GradeReportService
from recordkeeper.application.health_service import HealthSystemService
from recordkeeper.application.inventory_service import InventoryLogService
from recordkeeper.application.warehouse_service import WarehouseManager

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def run_finance(service: FinanceService) -> None:
    now = datetime.now()
    batch = [
        (Transaction(id=1, date=now, amount=Decimal("200"), category="Groceries"), PaymentChannel.MOBILE_MONEY),
        (Transaction(id=2, date=now, amount=Decimal("100"), category="Utilities"), PaymentChannel.BANK_TRANSFER),
        (Transaction(id=3, date=now, amount=Decimal("50"), category="Entertainment"), PaymentChannel.CRYPTO_WALLET),
    ]
    for transaction, channel in batch:
        service.record(transaction, channel)
    logger.info(f"Ledger holds {len(service.ledger)} transactions. Final balance: {service.account.balance}")


def run_health(service: HealthSystemService, patient_id: int) -> None:
    for patient in service.patients.get_all():
        logger.info(f"Id: {patient.id}, Name: {patient.name}, Age: {patient.age}, Gender: {patient.gender}")

    logger.info(f"Prescriptions for Patient ID {patient_id}:")
    for prescription in service.get_prescriptions_for_patient(patient_id):
        logger.info(
            f"Id: {prescription.id}, Medication: {prescription.medication_name}, "
            f"Date Issued: {prescription.date_issued:%Y-%m-%d %H:%M}"
        )


def print_stock(title: str, repo: TypedRepository) -> None:
    logger.info(f"Printing {title}:")
    for item in repo.get_all():
        logger.info(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}")
        if isinstance(item, ElectronicItem):
            logger.info(f"  Brand: {item.brand}, Warranty: {item.warranty_months} months")
        elif isinstance(item, GroceryItem):
            logger.info(f"  Expiry: {item.expiry_date.isoformat()}")


def run_warehouse(manager: WarehouseManager) -> None:
    print_stock("GroceryItems", manager.groceries)
    print_stock("ElectronicItems", manager.electronics)

    try:
        manager.groceries.add(GroceryItem(id=1, name="Duplicate Milk", quantity=10, expiry_date=date(2025, 9, 1)))
    except RecordKeeperException as e:
        logger.warning(f"Error adding duplicate item: {e}")

    manager.remove_item(manager.electronics, 999)

    try:
        manager.groceries.update_quantity(1, -5)
    except RecordKeeperException as e:
        logger.warning(f"Error updating with invalid quantity: {e}")

    manager.increase_stock(manager.electronics, 2, 5)


def run_inventory(settings: Settings) -> None:
    store = JsonFileStore(settings.resolve(settings.inventory_file), InventoryItem)

    app = InventoryLogService(store)
    now = datetime.now()
    for item_id, name, quantity in [(1, "Laptop", 5), (2, "Mouse", 20), (3, "Keyboard", 15), (4, "Monitor", 8), (5, "Printer", 3)]:
        app.add(InventoryItem(id=item_id, name=name, quantity=quantity, date_added=now))
    app.save()

    # Fresh service: simulate a new session reading the file back
    app = InventoryLogService(store)
    app.load()
    for item in app.items():
        logger.info(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, Date Added: {item.date_added:%Y-%m-%d %H:%M}")


def seed_health() -> HealthSystemService:
    now = datetime.now()
    service = HealthSystemService()
    for patient in [
        Patient(id=1, name="John Doe", age=30, gender="Male"),
        Patient(id=2, name="Jane Smith", age=25, gender="Female"),
        Patient(id=3, name="Bob Johnson", age=40, gender="Male"),
    ]:
        service.patients.add(patient)
    for prescription_id, patient_id, medication in [
        (1, 1, "Aspirin"), (2, 1, "Ibuprofen"), (3, 2, "Paracetamol"), (4, 3, "Antibiotic"), (5, 2, "Vitamin C"),
    ]:
        service.prescriptions.add(
            Prescription(id=prescription_id, patient_id=patient_id, medication_name=medication, date_issued=now)
        )
    service.build_prescription_index()
    return service


def seed_warehouse() -> WarehouseManager:
    manager = WarehouseManager()
    manager.electronics.add(ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=12))
    manager.electronics.add(ElectronicItem(id=2, name="Phone", quantity=20, brand="Apple", warranty_months=24))
    manager.electronics.add(ElectronicItem(id=3, name="Tablet", quantity=15, brand="Samsung", warranty_months=6))
    manager.groceries.add(GroceryItem(id=1, name="Milk", quantity=50, expiry_date=date(2025, 8, 30)))
    manager.groceries.add(GroceryItem(id=2, name="Bread", quantity=30, expiry_date=date(2025, 8, 20)))
    manager.groceries.add(GroceryItem(id=3, name="Eggs", quantity=100, expiry_date=date(2025, 8, 25)))
    return manager


def main() -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)

    exercises = [
        ("grade report", lambda: GradeReportService().generate(
            settings.resolve(settings.students_file), settings.resolve(settings.report_file))),
        ("inventory logger", lambda: run_inventory(settings)),
        ("finance ledger", lambda: run_finance(FinanceService(Account(account_number="123456", balance=Decimal("1000"), kind=AccountKind.SAVINGS)))),
        ("health system", lambda: run_health(seed_health(), patient_id=1)),
        ("warehouse", lambda: run_warehouse(seed_warehouse())),
    ]

    for name, exercise in exercises:
        logger.info(f"--- Running {name} ---")
        try:
            exercise()
        except FileNotFoundError as e:
            logger.error(f"Input file not found for {name}: {e}")
        except RecordKeeperException as e:
            logger.error(f"{name} failed: {e}")
        except Exception as e:
            logger.exception(f"An unexpected error occurred: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
