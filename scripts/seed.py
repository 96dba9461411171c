"""Seed helper that loads sample schedules and score rows into MongoDB."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import PyMongoError

ROOT_DIR = Path(__file__).resolve().parent.parent
BACKEND_DIR = ROOT_DIR / "backend"
ENV_PATH = BACKEND_DIR / ".env"
SEED_PATH = Path(__file__).resolve().parent / "seed.json"

if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from gradecore.config import ConfigError, get_db_name, get_mongo_uri  # noqa: E402
from gradecore.grading.models import TERMS  # noqa: E402

SEED_COLLECTIONS = ("schedules", "scores")
SCORE_KEYS = ("student_id", "schedule_id", "term", "component")


def load_env() -> None:
    if ENV_PATH.exists():
        load_dotenv(ENV_PATH)


def validate_seed_data(data: Any) -> Dict[str, List[Dict[str, Any]]]:
    """Check the seed document shape before anything is written."""

    if not isinstance(data, dict):
        raise ValueError("Seed file must contain an object of collections")

    for collection_name, documents in data.items():
        if collection_name not in SEED_COLLECTIONS:
            raise ValueError(f"Unknown seed collection '{collection_name}'")
        if not isinstance(documents, list):
            raise ValueError(
                f"Seed data for collection '{collection_name}' must be a list"
            )

    for index, score in enumerate(data.get("scores", [])):
        missing = [key for key in SCORE_KEYS if not score.get(key)]
        if missing:
            raise ValueError(f"Score #{index} is missing: {', '.join(missing)}")
        if str(score["term"]).lower() not in TERMS:
            raise ValueError(f"Score #{index} has an invalid term '{score['term']}'")

    return data


def read_seed_file(path: Path = SEED_PATH) -> Dict[str, List[Dict[str, Any]]]:
    with path.open("r", encoding="utf-8") as seed_file:
        data = json.load(seed_file)
    return validate_seed_data(data)


def main() -> None:
    load_env()
    try:
        uri = get_mongo_uri()
        db_name = get_db_name()
    except ConfigError as exc:  # pragma: no cover - simple CLI utility
        print(f"Configuration error: {exc}")
        raise SystemExit(1)

    client = MongoClient(uri, serverSelectionTimeoutMS=5000)
    database = client[db_name]

    try:
        seed_data = read_seed_file()

        for collection_name, documents in seed_data.items():
            collection = database[collection_name]
            collection.delete_many({})
            if documents:
                collection.insert_many(documents)

            print(
                f"Loaded {len(documents)} document(s) into '{collection_name}' collection"
            )

        print(f"Seeding complete for database '{db_name}'.")
    except PyMongoError as exc:  # pragma: no cover - requires Mongo connection
        print(f"MongoDB error: {exc}")
        raise SystemExit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
