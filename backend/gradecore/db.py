"""MongoDB helpers for the application."""

from pymongo import ASCENDING, IndexModel, MongoClient
from pymongo.collection import Collection

from .config import get_db_name, get_mongo_uri
from .grading.models import ScoreRecord

_MONGO_CLIENT = None
_MONGO_DB = None


def _get_client():
    """Create (or reuse) a MongoDB client using the configured URI."""

    global _MONGO_CLIENT

    if _MONGO_CLIENT is None:
        _MONGO_CLIENT = MongoClient(get_mongo_uri(), serverSelectionTimeoutMS=5000)
    return _MONGO_CLIENT


def get_db():
    """Return the application's MongoDB database instance."""

    global _MONGO_DB

    if _MONGO_DB is None:
        _MONGO_DB = _get_client()[get_db_name()]
    return _MONGO_DB


_schedules_indexes_created = False
_scores_indexes_created = False


def _ensure_schedules_indexes(collection: Collection) -> None:
    global _schedules_indexes_created
    if _schedules_indexes_created:
        return

    collection.create_index(
        [("subject_code", ASCENDING)],
        name="subject_code_idx",
        background=True,
    )
    _schedules_indexes_created = True


def get_schedules_collection() -> Collection:
    """Return the collection that stores course offerings (schedules)."""

    collection = get_db()["schedules"]
    _ensure_schedules_indexes(collection)
    return collection


def serialize_schedule(document):
    """Convert a schedule document into a JSON-serialisable dict."""

    class_type = document.get("class_type")
    return {
        "_id": str(document.get("_id", "")),
        "subject_code": document.get("subject_code"),
        "subject_name": document.get("subject_name"),
        "class_type": str(class_type).strip() if class_type else None,
    }


def _ensure_scores_indexes(collection: Collection) -> None:
    global _scores_indexes_created
    if _scores_indexes_created:
        return

    indexes = [
        IndexModel(
            [("student_id", ASCENDING), ("schedule_id", ASCENDING), ("term", ASCENDING)],
            name="student_schedule_term",
            background=True,
        ),
        IndexModel(
            [
                ("student_id", ASCENDING),
                ("schedule_id", ASCENDING),
                ("term", ASCENDING),
                ("component", ASCENDING),
                ("item_number", ASCENDING),
            ],
            name="unique_score_item",
            unique=True,
            background=True,
        ),
    ]
    collection.create_indexes(indexes)
    _scores_indexes_created = True


def get_scores_collection() -> Collection:
    """Return the per-item score collection ensuring indexes exist."""

    collection = get_db()["scores"]
    _ensure_scores_indexes(collection)
    return collection


def _number(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _item_number(value):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 1
    return number if number > 0 else 1


def serialize_score(document):
    """Serialize a score document for JSON responses."""

    return {
        "_id": str(document.get("_id", "")),
        "student_id": document.get("student_id"),
        "schedule_id": document.get("schedule_id"),
        "term": str(document.get("term") or "").strip().lower(),
        "component": document.get("component"),
        "item_number": _item_number(document.get("item_number")),
        "score": _number(document.get("score")),
        "max_score": _number(document.get("max_score")),
    }


def score_record_from_document(document, subject_code=None) -> ScoreRecord:
    """Build the engine's ScoreRecord from a raw score document."""

    data = serialize_score(document)
    return ScoreRecord(
        student_id=str(data["student_id"] or ""),
        schedule_id=str(data["schedule_id"] or ""),
        term=data["term"],
        component=str(data["component"] or ""),
        item_number=data["item_number"],
        score=data["score"],
        max_score=data["max_score"],
        subject_code=subject_code,
    )


__all__ = [
    "get_db",
    "get_schedules_collection",
    "serialize_schedule",
    "get_scores_collection",
    "serialize_score",
    "score_record_from_document",
]
