"""
HTTP Microservice
=================
Flask-based HTTP API for the question mapper.

Endpoints:
    GET    /                   → Service info
    GET    /api/health         → Health check
    GET    /api/pdf/health     → Health check (analysis routes)
    POST   /api/pdf/analyze    → Analyze up to 5 uploaded PDFs
"""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime, timezone

from flask import Blueprint, Flask, current_app, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from . import __version__
from .engine import AnalyzerConfig, AnalyzerEngine
from .models import BatchResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "PDF Question Mapper API"
PDF_MIMETYPE = "application/pdf"

DEFAULT_MAX_FILES = 5
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
DEFAULT_CORS_ORIGINS = "http://localhost:3000"

AVAILABLE_ROUTES = ["GET /", "GET /api/health", "POST /api/pdf/analyze"]

pdf_api = Blueprint("pdf_api", __name__, url_prefix="/api/pdf")
root_api = Blueprint("root_api", __name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={value!r}, using {default}")
        return default


def create_app(config: dict = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)

    if config:
        app.config.update(config)

    # Defaults, overridable through the environment
    app.config.setdefault(
        "MAX_FILES", _env_int("MAPPER_MAX_FILES", DEFAULT_MAX_FILES)
    )
    app.config.setdefault(
        "MAX_FILE_SIZE", _env_int("MAPPER_MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE)
    )
    app.config.setdefault(
        "CORS_ORIGINS",
        [
            origin.strip()
            for origin in os.environ.get(
                "MAPPER_CORS_ORIGINS", DEFAULT_CORS_ORIGINS
            ).split(",")
            if origin.strip()
        ],
    )
    app.config.setdefault("ENV_NAME", os.environ.get("MAPPER_ENV", "development"))
    app.config.setdefault("LOG_LEVEL", "INFO")

    # Whole multipart body: every file at full size plus form overhead
    if app.config.get("MAX_CONTENT_LENGTH") is None:
        app.config["MAX_CONTENT_LENGTH"] = (
            app.config["MAX_FILES"] * app.config["MAX_FILE_SIZE"] + 1024 * 1024
        )

    CORS(
        app,
        origins=app.config["CORS_ORIGINS"],
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    app.extensions["analyzer_engine"] = AnalyzerEngine(
        AnalyzerConfig(log_level=app.config["LOG_LEVEL"])
    )

    app.register_blueprint(root_api)
    app.register_blueprint(pdf_api)

    if app.config["ENV_NAME"] != "production":
        app.before_request(_start_timer)
        app.after_request(_log_request)

    app.register_error_handler(404, _not_found)
    app.register_error_handler(RequestEntityTooLarge, _too_large)
    app.register_error_handler(Exception, _unhandled_error)

    return app


# ─── Request Logging ──────────────────────────────────────────────────────────


def _start_timer():
    g.request_started = time.time()


def _log_request(response):
    elapsed_ms = (time.time() - g.get("request_started", time.time())) * 1000
    logger.info(
        f"{request.method} {request.path} {response.status_code} "
        f"{elapsed_ms:.1f} ms"
    )
    return response


# ─── Error Handlers ───────────────────────────────────────────────────────────


def _file_too_large_body() -> dict:
    max_mb = current_app.config["MAX_FILE_SIZE"] // (1024 * 1024)
    return {
        "error": "File too large",
        "message": f"Maximum file size is {max_mb}MB",
    }


def _not_found(error):
    return jsonify({
        "error": "Route not found",
        "path": request.path,
        "availableRoutes": AVAILABLE_ROUTES,
    }), 404


def _too_large(error):
    return jsonify(_file_too_large_body()), 400


def _unhandled_error(error):
    if isinstance(error, HTTPException):
        return jsonify({"error": error.name, "message": error.description}), error.code

    logger.error(f"Error: {error}", exc_info=True)
    development = current_app.config["ENV_NAME"] == "development"
    return jsonify({
        "error": "Something went wrong",
        "message": str(error) if development else "Internal server error",
    }), 500


# ─── Info & Health ────────────────────────────────────────────────────────────


@root_api.route("/", methods=["GET"])
def index():
    """Service info."""
    max_files = current_app.config["MAX_FILES"]
    max_mb = current_app.config["MAX_FILE_SIZE"] // (1024 * 1024)
    return jsonify({
        "message": SERVICE_NAME,
        "version": __version__,
        "endpoints": {
            "health": "/api/health",
            "analyzePDF": "POST /api/pdf/analyze",
            "uploads": f"MAX {max_files} PDFs, {max_mb}MB each",
        },
    })


@root_api.route("/api/health", methods=["GET"])
def health():
    """Health check endpoint."""
    return jsonify({
        "status": "OK",
        "service": SERVICE_NAME,
        "timestamp": _timestamp(),
    })


@pdf_api.route("/health", methods=["GET"])
def pdf_health():
    """Health check for the analysis routes."""
    return jsonify({"status": "OK", "timestamp": _timestamp()})


# ─── Analyze Endpoint ─────────────────────────────────────────────────────────


@pdf_api.route("/analyze", methods=["POST"])
def analyze_pdfs():
    """
    Analyze uploaded PDFs.

    Accepts multipart/form-data with one or more files under ``files``.
    Every file is checked before any analysis starts; a single rejected
    file rejects the whole request.

    Returns ``{"results": [...]}`` in upload order. Documents that fail to
    analyze are reported in place with an ``error`` message.
    """
    files = [f for f in request.files.getlist("files") if f.filename]
    if not files:
        return jsonify({"error": "No files uploaded"}), 400

    max_files = current_app.config["MAX_FILES"]
    if len(files) > max_files:
        return jsonify({
            "error": f"Too many files, maximum is {max_files}",
        }), 400

    documents: list[tuple[str, bytes]] = []
    for file in files:
        if file.mimetype != PDF_MIMETYPE:
            return jsonify({"error": "Only PDF files are allowed"}), 400

        data = file.read()
        if len(data) > current_app.config["MAX_FILE_SIZE"]:
            return jsonify(_file_too_large_body()), 400

        documents.append((file.filename, data))

    engine: AnalyzerEngine = current_app.extensions["analyzer_engine"]
    results = engine.analyze_batch(documents)

    return jsonify(BatchResponse(results=results).model_dump()), 200


def run_server(host: str = "0.0.0.0", port: int = 5000, debug: bool = False):
    """Run the Flask development server."""
    app = create_app()
    logger.info(f"Starting server on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
