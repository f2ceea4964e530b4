"""SQL-backed record store for animal, expense and load records."""

from collections import defaultdict

from sqlalchemy import text

from livestock_ledger.application.ports.database import DatabaseEnginePort
from livestock_ledger.application.ports.record_store import RecordStorePort
from livestock_ledger.domain.models import (
    AnimalRecord,
    DirectExpense,
    IndividualAnimal,
    LoadRecord,
    MonthlyExpense,
)
from livestock_ledger.utils.decimal_utils import coerce_decimal

SELECT_ANIMALS_SQL = """
SELECT id, animal_number, purchase_price, purchase_date, status,
       sold_date, selling_price, is_bulk, quantity
FROM animal_records
"""

SELECT_ANIMAL_COLLECTIONS_SQL = """
SELECT animal_id, collection_name
FROM animal_collections
"""

SELECT_ANIMAL_EXPENSES_SQL = """
SELECT animal_id, expense_id, amount, description
FROM animal_expenses
"""

SELECT_BULK_INDIVIDUALS_SQL = """
SELECT record_id, unit_id, status, sold_date, selling_price
FROM bulk_individuals
"""

SELECT_MONTHLY_EXPENSES_SQL = text(
    """
    SELECT id, year, month, amount, expense_type, description
    FROM monthly_expenses
    ORDER BY year, month, id
    """
)

SELECT_EXPENSE_TAGS_SQL = text(
    """
    SELECT expense_id, tag
    FROM monthly_expense_tags
    """
)

SELECT_LOAD_RECORDS_SQL = text(
    """
    SELECT id, animal_number, load_in_price, load_in_date, status,
           load_out_date, load_out_price
    FROM load_records
    ORDER BY load_in_date, id
    """
)

SELECT_LOAD_COLLECTIONS_SQL = text(
    """
    SELECT load_id, collection_name
    FROM load_record_collections
    """
)


class SqlAlchemyRecordStore(RecordStorePort):
    """Record store backed by the farm database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the record store.

        Args:
            db_port: Port providing access to the farm engine.
        """
        self._db_port = db_port

    def fetch_animal_records(self) -> list[AnimalRecord]:
        return self._fetch_animals(record_id=None)

    def fetch_animal_record(self, record_id: str) -> AnimalRecord:
        records = self._fetch_animals(record_id=record_id)
        if not records:
            raise LookupError(f"Unknown animal record: {record_id}")
        return records[0]

    def fetch_monthly_expenses(self) -> list[MonthlyExpense]:
        engine = self._db_port.get_farm_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_MONTHLY_EXPENSES_SQL).all()
            tag_rows = conn.execute(SELECT_EXPENSE_TAGS_SQL).all()
        tags = self._group(tag_rows, "expense_id", "tag")
        return [
            MonthlyExpense(
                id=str(row.id),
                year=int(row.year),
                month=int(row.month),
                amount=self._optional_decimal(row.amount),
                tags=tuple(tags.get(str(row.id), ())),
                expense_type=row.expense_type,
                description=row.description,
            )
            for row in rows
        ]

    def fetch_load_records(self) -> list[LoadRecord]:
        engine = self._db_port.get_farm_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_LOAD_RECORDS_SQL).all()
            collection_rows = conn.execute(SELECT_LOAD_COLLECTIONS_SQL).all()
        collections = self._group(collection_rows, "load_id", "collection_name")
        return [
            LoadRecord(
                id=str(row.id),
                animal_number=row.animal_number,
                load_in_price=self._optional_decimal(row.load_in_price),
                load_in_date=row.load_in_date,
                collection_names=tuple(collections.get(str(row.id), ())),
                status=row.status,
                load_out_date=row.load_out_date,
                load_out_price=self._optional_decimal(row.load_out_price),
            )
            for row in rows
        ]

    def _fetch_animals(self, record_id: str | None) -> list[AnimalRecord]:
        params = {"record_id": record_id} if record_id is not None else {}
        engine = self._db_port.get_farm_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                self._build_query(SELECT_ANIMALS_SQL, "id", record_id),
                params,
            ).all()
            if not rows:
                return []
            collection_rows = conn.execute(
                self._build_query(
                    SELECT_ANIMAL_COLLECTIONS_SQL, "animal_id", record_id
                ),
                params,
            ).all()
            expense_rows = conn.execute(
                self._build_query(
                    SELECT_ANIMAL_EXPENSES_SQL, "animal_id", record_id
                ),
                params,
            ).all()
            unit_rows = conn.execute(
                self._build_query(
                    SELECT_BULK_INDIVIDUALS_SQL, "record_id", record_id
                ),
                params,
            ).all()

        collections = self._group(collection_rows, "animal_id", "collection_name")
        expenses: dict[str, dict[str, DirectExpense]] = defaultdict(dict)
        for row in expense_rows:
            expenses[str(row.animal_id)][str(row.expense_id)] = DirectExpense(
                amount=self._optional_decimal(row.amount),
                description=row.description,
            )
        units: dict[str, list[IndividualAnimal]] = defaultdict(list)
        for row in unit_rows:
            units[str(row.record_id)].append(
                IndividualAnimal(
                    id=str(row.unit_id),
                    status=row.status,
                    sold_date=row.sold_date,
                    selling_price=self._optional_decimal(row.selling_price),
                )
            )

        return [
            AnimalRecord(
                id=str(row.id),
                animal_number=row.animal_number,
                purchase_price=self._optional_decimal(row.purchase_price),
                purchase_date=row.purchase_date,
                collection_names=tuple(collections.get(str(row.id), ())),
                status=row.status,
                sold_date=row.sold_date,
                selling_price=self._optional_decimal(row.selling_price),
                expenses=dict(expenses.get(str(row.id), {})),
                is_bulk=bool(row.is_bulk),
                quantity=int(row.quantity) if row.quantity is not None else None,
                individual_animals=tuple(units.get(str(row.id), ())),
            )
            for row in rows
        ]

    @staticmethod
    def _build_query(base_sql: str, key_column: str, record_id: str | None):
        if record_id is None:
            return text(base_sql + f" ORDER BY {key_column}")
        return text(base_sql + f" WHERE {key_column} = :record_id")

    @staticmethod
    def _group(rows, key_attr: str, value_attr: str) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = defaultdict(list)
        for row in rows:
            grouped[str(getattr(row, key_attr))].append(getattr(row, value_attr))
        return grouped

    @staticmethod
    def _optional_decimal(value):
        """Return the amount as Decimal, or the raw value when unusable.

        Raw values are rejected per record when reports screen the snapshot,
        so one bad row does not fail the whole fetch.
        """
        if value is None:
            return None
        try:
            return coerce_decimal(value)
        except ValueError:
            return value


__all__ = ["SqlAlchemyRecordStore"]
