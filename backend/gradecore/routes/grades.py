"""Grade computation endpoints."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Tuple

from flask import Blueprint, jsonify, request
from pymongo.errors import PyMongoError

from ..config import ConfigError
from ..db import (
    get_schedules_collection,
    get_scores_collection,
    score_record_from_document,
    serialize_schedule,
    serialize_score,
)
from ..grading import (
    ScoreRecord,
    academic_standing,
    compute_term,
    resolve_class_type,
    summarize,
    summarize_records,
    summarize_student,
)
from ..grading.models import TERMS
from ..utils.paging import PagingParamError, parse_paging_params

grades_bp = Blueprint("grades", __name__, url_prefix="/api/grades")

logger = logging.getLogger(__name__)

RECORD_SORT_FIELDS = {
    "term": ("term", "component", "item_number"),
    "component": ("component", "term", "item_number"),
    "item_number": ("item_number", "term", "component"),
}


def _json_error(message: str, status: int, details: Dict[str, Any] | None = None):
    payload: Dict[str, Any] = {"error": message}
    if details:
        payload["details"] = details
    return jsonify(payload), status


def _validation_error(errors: Dict[str, str]):
    details = {k: v for k, v in errors.items() if k != "_global"}
    message = errors.get("_global", "Validation failed.")
    return _json_error(message, 400, details if details else None)


def _clean_string(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _parse_optional_number(value: Any) -> Tuple[float | None, bool]:
    if value is None or value == "":
        return None, True
    if isinstance(value, bool):
        return None, False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None, False
    if not math.isfinite(number) or number < 0:
        return None, False
    return number, True


def _validate_score_rows(
    rows: Any, *, field: str, term: str
) -> Tuple[List[ScoreRecord], Dict[str, str]]:
    errors: Dict[str, str] = {}
    records: List[ScoreRecord] = []

    if rows is None:
        return records, errors
    if not isinstance(rows, list):
        errors[field] = f"{field} must be an array of score rows."
        return records, errors

    for index, row in enumerate(rows):
        prefix = f"{field}[{index}]"
        if not isinstance(row, dict):
            errors[prefix] = "Each score row must be an object."
            continue

        component = _clean_string(row.get("component"))
        if not component:
            errors[f"{prefix}.component"] = "Component is required."

        item_raw = row.get("item_number", 1)
        try:
            item_number = int(item_raw if item_raw not in (None, "") else 1)
            if item_number <= 0:
                raise ValueError
        except (TypeError, ValueError):
            errors[f"{prefix}.item_number"] = "Item number must be a positive integer."
            item_number = 1

        score, score_ok = _parse_optional_number(row.get("score"))
        if not score_ok:
            errors[f"{prefix}.score"] = "Score must be a non-negative number or null."

        max_score, max_ok = _parse_optional_number(row.get("max_score"))
        if not max_ok:
            errors[f"{prefix}.max_score"] = "Max score must be a non-negative number or null."

        records.append(
            ScoreRecord(
                student_id=_clean_string(row.get("student_id")),
                schedule_id=_clean_string(row.get("schedule_id")),
                term=term,
                component=component,
                item_number=item_number,
                score=score,
                max_score=max_score,
            )
        )

    return records, errors


def _read_class_type(payload: Dict[str, Any]) -> str:
    return resolve_class_type(_clean_string(payload.get("class_type")) or None)


@grades_bp.post("/compute")
def compute_summary():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _json_error("Request body must be JSON.", 400)

    class_type = _read_class_type(payload)
    errors: Dict[str, str] = {}
    term_records: Dict[str, List[ScoreRecord]] = {}
    for term in TERMS:
        records, term_errors = _validate_score_rows(
            payload.get(term), field=term, term=term
        )
        term_records[term] = records
        errors.update(term_errors)

    if errors:
        return _validation_error(errors)

    result = summarize(term_records["midterm"], term_records["final"], class_type)
    return jsonify(result.to_dict())


@grades_bp.post("/term")
def compute_single_term():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _json_error("Request body must be JSON.", 400)

    class_type = _read_class_type(payload)
    term = _clean_string(payload.get("term")).lower() or "midterm"
    if term not in TERMS:
        return _validation_error({"term": "Term must be midterm or final."})

    records, errors = _validate_score_rows(
        payload.get("records"), field="records", term=term
    )
    if errors:
        return _validation_error(errors)

    result = compute_term(records, class_type)
    response = {"class_type": class_type, "term": term}
    response.update(result.to_dict())
    return jsonify(response)


@grades_bp.get("/students/<student_id>/schedules/<schedule_id>")
def offering_summary(student_id: str, schedule_id: str):
    student_id_clean = _clean_string(student_id)
    schedule_id_clean = _clean_string(schedule_id)
    if not student_id_clean or not schedule_id_clean:
        return _json_error("Student ID and schedule ID are required.", 400)

    try:
        schedule_doc = get_schedules_collection().find_one({"_id": schedule_id_clean})
        if not schedule_doc:
            return _json_error("Schedule not found.", 404)
        schedule = serialize_schedule(schedule_doc)

        cursor = get_scores_collection().find(
            {"student_id": student_id_clean, "schedule_id": schedule_id_clean}
        ).sort([("term", 1), ("component", 1), ("item_number", 1)])
        records = [
            score_record_from_document(doc, subject_code=schedule["subject_code"])
            for doc in cursor
        ]

        result = summarize_records(records, schedule["class_type"])
        payload: Dict[str, Any] = {
            "student_id": student_id_clean,
            "schedule_id": schedule_id_clean,
            "subject_code": schedule["subject_code"],
        }
        payload.update(result.to_dict())
        return jsonify(payload)
    except ConfigError as exc:
        logger.exception("Missing configuration for MongoDB")
        return _json_error(str(exc), 500)
    except PyMongoError:
        logger.exception("Failed to compute offering summary due to MongoDB error")
        return _json_error("Database unavailable. Please try again later.", 503)


@grades_bp.get("/students/<student_id>")
def student_report(student_id: str):
    student_id_clean = _clean_string(student_id)
    if not student_id_clean:
        return _json_error("Student ID is required.", 400)

    try:
        score_docs = list(
            get_scores_collection()
            .find({"student_id": student_id_clean})
            .sort([("schedule_id", 1), ("term", 1), ("component", 1), ("item_number", 1)])
        )

        schedule_ids = sorted({str(doc.get("schedule_id") or "") for doc in score_docs} - {""})
        schedules: Dict[str, Dict[str, Any]] = {}
        if schedule_ids:
            for doc in get_schedules_collection().find({"_id": {"$in": schedule_ids}}):
                schedule = serialize_schedule(doc)
                schedules[schedule["_id"]] = schedule

        records = [score_record_from_document(doc) for doc in score_docs]
        class_types = {key: value["class_type"] for key, value in schedules.items()}
        subject_codes = {key: value["subject_code"] for key, value in schedules.items()}

        offerings = summarize_student(records, class_types, subject_codes)
        standing = academic_standing(offerings)

        return jsonify(
            {
                "student_id": student_id_clean,
                "offerings": [offering.to_dict() for offering in offerings],
                "standing": standing.to_dict(),
            }
        )
    except ConfigError as exc:
        logger.exception("Missing configuration for MongoDB")
        return _json_error(str(exc), 500)
    except PyMongoError:
        logger.exception("Failed to build student grade report due to MongoDB error")
        return _json_error("Database unavailable. Please try again later.", 503)


@grades_bp.get("/students/<student_id>/records")
def list_student_records(student_id: str):
    student_id_clean = _clean_string(student_id)
    if not student_id_clean:
        return _json_error("Student ID is required.", 400)

    try:
        paging = parse_paging_params(
            request.args,
            allowed_sort_fields=RECORD_SORT_FIELDS,
            default_sort="term",
        )
    except PagingParamError as exc:
        return _json_error(str(exc), 400)

    filters: Dict[str, Any] = {"student_id": student_id_clean}
    term = _clean_string(request.args.get("term")).lower()
    if term:
        if term not in TERMS:
            return _json_error("term must be midterm or final.", 400)
        filters["term"] = term
    schedule_id = _clean_string(request.args.get("schedule_id"))
    if schedule_id:
        filters["schedule_id"] = schedule_id

    try:
        collection = get_scores_collection()
        total = collection.count_documents(filters)
        cursor = (
            collection.find(filters)
            .sort(paging.sort)
            .skip(paging.skip)
            .limit(paging.page_size)
        )
        items = [serialize_score(doc) for doc in cursor]

        return jsonify(
            {
                "items": items,
                "page": paging.page,
                "page_size": paging.page_size,
                "sort": paging.normalized_sort,
                "total": total,
                "has_next": paging.page * paging.page_size < total,
                "has_prev": paging.page > 1,
            }
        )
    except ConfigError as exc:
        logger.exception("Missing configuration for MongoDB")
        return _json_error(str(exc), 500)
    except PyMongoError:
        logger.exception("Failed to list score records due to MongoDB error")
        return _json_error("Database unavailable. Please try again later.", 503)


__all__ = ["grades_bp"]
