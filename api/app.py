from __future__ import annotations

import logging
import os
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

from fair_model import (
    AssessmentInputs,
    AssessmentValidationError,
    compare_scenarios,
    default_rng,
    seeded_rng,
    simulate,
)


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_ITERATIONS = int(os.getenv("FAIR_ITERATIONS", "100000"))
MAX_ITERATIONS = int(os.getenv("FAIR_MAX_ITERATIONS", "200000"))

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("fair_model.api")

app = Flask(__name__)


class RequestError(ValueError):
    pass


def _to_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            return default
    return default


def _to_seed(value: Any) -> int:
    if isinstance(value, bool):
        raise RequestError("seed must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise RequestError(f"seed must be an integer, got {value!r}")


def _json_payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        raise RequestError("Request JSON body is required")
    if not isinstance(payload, dict):
        raise RequestError("Request JSON body must be an object")
    return payload


def _simulation_options(payload: Dict[str, Any]) -> Tuple[int, Any]:
    options = payload.get("simulation_config", {})
    if not isinstance(options, dict):
        options = {}

    iterations = _to_int(options.get("iterations"), DEFAULT_ITERATIONS)
    if not 1 <= iterations <= MAX_ITERATIONS:
        raise RequestError(f"iterations must be between 1 and {MAX_ITERATIONS}")

    seed = options.get("seed")
    rng = seeded_rng(_to_seed(seed)) if seed is not None else default_rng()
    return iterations, rng


def _error(message: str, status: int, field: str | None = None) -> Tuple[Any, int]:
    body: Dict[str, Any] = {"success": False, "error": message}
    if field is not None:
        body["field"] = field
    return jsonify(body), status


@app.errorhandler(AssessmentValidationError)
def handle_validation_error(exc: AssessmentValidationError) -> Tuple[Any, int]:
    return _error(str(exc), 400, exc.field)


@app.errorhandler(RequestError)
def handle_request_error(exc: RequestError) -> Tuple[Any, int]:
    return _error(str(exc), 400)


@app.errorhandler(ValueError)
def handle_value_error(exc: ValueError) -> Tuple[Any, int]:
    logger.warning("Rejected simulation request: %s", exc)
    return _error(str(exc), 400)


@app.get("/health")
def health() -> Tuple[Any, int]:
    return jsonify({"ok": True, "service": "fair-risk-api"}), 200


@app.post("/api/v1/calculate")
def calculate() -> Tuple[Any, int]:
    payload = _json_payload()
    inputs = AssessmentInputs.from_dict(payload)
    iterations, rng = _simulation_options(payload)

    results = simulate(inputs, iterations, rng)
    logger.info("Calculated %s risk for %s (%d iterations)",
                results.risk_rating, inputs.company.industry, iterations)

    include_raw = bool(payload.get("includeRawLosses", False))
    return jsonify({
        "success": True,
        "results": results.to_dict(include_raw_losses=include_raw),
        "inputs": inputs.to_dict(),
    }), 200


@app.post("/api/v1/compare")
def compare() -> Tuple[Any, int]:
    payload = _json_payload()
    if not isinstance(payload.get("base"), dict) or not isinstance(payload.get("modified"), dict):
        raise RequestError("Both 'base' and 'modified' assessments are required")

    base = AssessmentInputs.from_dict(payload["base"])
    modified = AssessmentInputs.from_dict(payload["modified"])
    iterations, rng = _simulation_options(payload)

    comparison = compare_scenarios(base, modified, iterations, rng)
    return jsonify({
        "success": True,
        "base": comparison.base.to_dict(include_raw_losses=False),
        "modified": comparison.modified.to_dict(include_raw_losses=False),
        "delta": {
            "aleMean": comparison.delta.ale_mean,
            "alePml95": comparison.delta.ale_p95,
            "gordonLoeb": comparison.delta.gordon_loeb,
            "riskRatingChanged": comparison.risk_rating_changed,
        },
        "savings": {
            "aleMean": comparison.savings.ale_mean,
            "alePml95": comparison.savings.ale_p95,
            "gordonLoeb": comparison.savings.gordon_loeb,
        },
    }), 200


if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8002"))
    app.run(host=host, port=port, debug=False)
