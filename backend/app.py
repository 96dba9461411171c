from __future__ import annotations

import logging

from flask import Flask, jsonify

from gradecore import config
from gradecore.config import ConfigError
from gradecore.grading.models import CLASS_TYPES
from gradecore.grading.scale import SCALE_BANDS, VALID_GRADES
from gradecore.grading.weights import WEIGHT_TABLES
from gradecore.routes import grades_bp

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    try:
        level = config.get_log_level()
    except ConfigError:
        logger.exception("Invalid LOG_LEVEL, falling back to INFO")
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


_configure_logging()

app = Flask(__name__)
app.register_blueprint(grades_bp)


@app.get("/api/health")
def health():
    return jsonify({"ok": True})


@app.get("/api/grades/config")
def grading_config():
    """Expose the weight tables and grading scale the engine applies."""

    return jsonify(
        {
            "class_types": {
                class_type: [
                    {"component": entry.name, "weight": entry.weight, "policy": entry.policy}
                    for entry in WEIGHT_TABLES[class_type]
                ]
                for class_type in CLASS_TYPES
            },
            "scale": [
                {"min_percentage": threshold, "grade": grade}
                for threshold, grade in SCALE_BANDS
            ],
            "valid_grades": list(VALID_GRADES),
        }
    )


if __name__ == "__main__":
    app.run(debug=True)
