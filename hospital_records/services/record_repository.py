from typing import Any, Dict, List, Type
import logging

from bson import ObjectId
from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..core.database import DOCTORS_COLLECTION, PATIENTS_COLLECTION
from ..core.exceptions import InvalidIdentifier, NotFound, StoreUnavailable
from ..schemas.doctor import Doctor
from ..schemas.patient import Patient

logger = logging.getLogger(__name__)


def parse_identifier(record_id: str) -> ObjectId:
    """Turn a path identifier into an ObjectId, rejecting malformed ones."""
    if not isinstance(record_id, str) or not ObjectId.is_valid(record_id):
        raise InvalidIdentifier(record_id)
    return ObjectId(record_id)


class RecordRepository:
    """CRUD operations against a single collection of records.

    Subclasses name the collection and the pydantic model its documents
    decode into. The identifier lives in the document's `_id`; every other
    field is stored under its JSON (alias) name.
    """

    collection_name: str = ""
    record_model: Type[BaseModel] = BaseModel

    def __init__(self, db: Database):
        self.collection: Collection = db[self.collection_name]

    def list_all(self) -> List[BaseModel]:
        """Return every record in the collection, in store order."""
        try:
            documents = list(self.collection.find({}))
        except PyMongoError as exc:
            self._log_failure("list", exc)
            raise StoreUnavailable() from exc

        return [self._to_record(document) for document in documents]

    def get(self, record_id: str) -> BaseModel:
        """Fetch one record by identifier."""
        object_id = parse_identifier(record_id)

        try:
            document = self.collection.find_one({"_id": object_id})
        except PyMongoError as exc:
            self._log_failure("get", exc)
            raise StoreUnavailable() from exc

        if document is None:
            raise NotFound()
        return self._to_record(document)

    def insert(self, entity: BaseModel) -> BaseModel:
        """Insert a new record and return it as stored, with its new identifier."""
        document = self._to_document(entity)

        try:
            result = self.collection.insert_one(document)
            stored = self.collection.find_one({"_id": result.inserted_id})
        except PyMongoError as exc:
            self._log_failure("insert", exc)
            raise StoreUnavailable() from exc

        if stored is None:
            logger.error(f"{self.collection_name}: inserted record {result.inserted_id} could not be read back")
            raise StoreUnavailable()

        logger.info(f"{self.collection_name}: created record {result.inserted_id}")
        return self._to_record(stored)

    def replace_fields(self, record_id: str, entity: BaseModel) -> BaseModel:
        """Overwrite the mutable fields of an existing record.

        Optional fields left out of `entity` are removed from the document.
        The identifier never changes and a missing record is not created.
        """
        object_id = parse_identifier(record_id)
        document = self._to_document(entity)

        update: Dict[str, Any] = {"$set": document}
        cleared = {name: "" for name in self._field_names() if name not in document}
        if cleared:
            update["$unset"] = cleared

        try:
            result = self.collection.update_one({"_id": object_id}, update)
        except PyMongoError as exc:
            self._log_failure("replace", exc)
            raise StoreUnavailable() from exc

        if result.matched_count == 0:
            raise NotFound()

        logger.info(f"{self.collection_name}: updated record {record_id}")
        return self.record_model.model_validate({"id": record_id, **document})

    def delete(self, record_id: str) -> None:
        """Remove a record by identifier."""
        object_id = parse_identifier(record_id)

        try:
            result = self.collection.delete_one({"_id": object_id})
        except PyMongoError as exc:
            self._log_failure("delete", exc)
            raise StoreUnavailable() from exc

        if result.deleted_count < 1:
            raise NotFound()

        logger.info(f"{self.collection_name}: deleted record {record_id}")

    def _field_names(self) -> List[str]:
        """JSON names of every stored field except the identifier."""
        return [
            field.alias or name
            for name, field in self.record_model.model_fields.items()
            if name != "id"
        ]

    def _to_document(self, entity: BaseModel) -> Dict[str, Any]:
        document = entity.model_dump(by_alias=True, exclude_none=True)
        document.pop("id", None)
        document.pop("_id", None)
        return document

    def _to_record(self, document: Dict[str, Any]) -> BaseModel:
        fields = {key: value for key, value in document.items() if key not in ("_id", "id")}
        return self.record_model.model_validate({"id": str(document["_id"]), **fields})

    def _log_failure(self, operation: str, exc: PyMongoError):
        logger.error(f"{self.collection_name}: {operation} failed: {exc}")


class DoctorRepository(RecordRepository):
    collection_name = DOCTORS_COLLECTION
    record_model = Doctor


class PatientRepository(RecordRepository):
    collection_name = PATIENTS_COLLECTION
    record_model = Patient
