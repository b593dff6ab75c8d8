# validate.py
import json
import logging
from pathlib import Path

import jsonschema

logger = logging.getLogger(__name__)

STATUS_OVERLAY = {"type": "object", "additionalProperties": {"type": "string"}}

STRUCTURE_FRAME = {
    "type": "object",
    "required": ["structure", "statuses", "description", "meta"],
    "properties": {
        "structure": {"type": ["array", "object", "null"]},
        "statuses": STATUS_OVERLAY,
        "description": {"type": "string"},
        "meta": {"type": "object"},
    },
}

TRAVERSAL_STEP = {
    "type": "object",
    "required": ["visited", "frontier", "current", "highlighted_edges", "description", "code_highlight"],
    "properties": {
        "visited": {"type": "array"},
        "frontier": {"type": "array", "items": {"type": "string"}},
        "current": {},
        "highlighted_edges": {
            "type": "array",
            "items": {"type": "object", "required": ["source", "target"]},
        },
        "description": {"type": "string"},
        "code_highlight": {"type": "integer", "minimum": 1},
        # Unreachable nodes are float('inf') in memory and "Infinity" once serialised
        "distances": {"type": "object", "additionalProperties": {"type": ["number", "string"]}},
        "final_order": {"type": "array"},
    },
}

TRACE_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "algoviz trace",
    "type": "object",
    "required": ["trace_version", "algorithm", "initial_frame", "steps", "structure", "committed", "error", "output"],
    "properties": {
        "trace_version": {"const": "1.0"},
        "algorithm": {
            "type": "object",
            "required": ["name", "family", "operation"],
            "properties": {
                "name": {"type": "string"},
                "family": {"type": "string"},
                "operation": {"type": "string"},
            },
        },
        "initial_frame": {
            "type": "object",
            "required": ["structure", "styles"],
            "properties": {
                "styles": {"type": "object"},
                "pseudocode": {"type": "array", "items": {"type": "string"}},
            },
        },
        "steps": {"type": "array", "minItems": 1, "items": {"anyOf": [STRUCTURE_FRAME, TRAVERSAL_STEP]}},
        "committed": {"type": "boolean"},
        "error": {
            "enum": [None, "InvalidIndex", "EmptyStructure", "ValueNotFound", "DuplicateValue",
                     "UnknownOperation", "DanglingReference"],
        },
        "output": {"type": "object"},
    },
}


def validate_trace(trace, schema=None):
    """Validate a result object in memory. Returns True or False; failures are logged with their path."""
    try:
        jsonschema.validate(instance=trace, schema=schema or TRACE_SCHEMA)
        return True
    except jsonschema.exceptions.ValidationError as e:
        logger.error(f"Trace failed validation: {e.message}")
        logger.error(f"Error path: {list(e.path)}")
        return False


def validate_trace_file(json_path, schema_path=None):
    """Validate a trace written to disk, optionally against a schema file instead of TRACE_SCHEMA."""
    json_path = Path(json_path)
    logger.info(f"--- Validating: {json_path.name} ---")
    try:
        schema = json.loads(Path(schema_path).read_text(encoding="utf-8")) if schema_path else TRACE_SCHEMA
        data = json.loads(json_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.error(f"File not found: {json_path} or {schema_path}")
        return False
    except json.JSONDecodeError:
        logger.error(f"File content is not valid JSON format: {json_path}")
        return False

    ok = validate_trace(data, schema)
    if ok:
        logger.info(f"File {json_path.name} is a valid trace.")
    return ok
