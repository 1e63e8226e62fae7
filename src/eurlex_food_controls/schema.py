"""JSON Schema for the exported food table, derived from dataclass metadata."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, get_args, get_origin, get_type_hints

from eurlex_food_controls.models import FoodRecord, ScrapeReport

SCHEMA_DRAFT = "https://json-schema.org/draft/2020-12/schema"


def _schema_for_type(annotation: Any, defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    if annotation in (Any, object):
        return {}

    origin = get_origin(annotation)

    if origin is list:
        args = get_args(annotation)
        item_schema = _schema_for_type(args[0], defs) if args else {}
        return {"type": "array", "items": item_schema}

    primitive_map = {
        str: {"type": "string"},
        int: {"type": "integer"},
        float: {"type": "number"},
        bool: {"type": "boolean"},
    }
    if annotation in primitive_map:
        return dict(primitive_map[annotation])

    if is_dataclass(annotation):
        _ensure_dataclass_schema(annotation, defs)
        return {"$ref": f"#/$defs/{annotation.__name__}"}

    return {}


def _ensure_dataclass_schema(dataclass_type: type[Any], defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    class_name = dataclass_type.__name__
    if class_name in defs:
        return defs[class_name]

    schema: dict[str, Any] = {
        "title": class_name,
        "description": (dataclass_type.__doc__ or "").strip(),
        "type": "object",
        "additionalProperties": False,
        "properties": {},
        "required": [],
    }
    defs[class_name] = schema

    hints = get_type_hints(dataclass_type)
    for model_field in fields(dataclass_type):
        field_schema = _schema_for_type(hints[model_field.name], defs)

        field_description = model_field.metadata.get("description")
        if field_description:
            field_schema["description"] = field_description

        field_json_schema = model_field.metadata.get("json_schema")
        if field_json_schema:
            field_schema = {**field_schema, **field_json_schema}

        schema["properties"][model_field.name] = field_schema
        schema["required"].append(model_field.name)

    return schema


def build_output_schema() -> dict[str, Any]:
    """Schema of the JSON document written by `export.write_json`."""
    defs: dict[str, dict[str, Any]] = {}
    _ensure_dataclass_schema(FoodRecord, defs)
    _ensure_dataclass_schema(ScrapeReport, defs)

    return {
        "$schema": SCHEMA_DRAFT,
        "title": "EUR-Lex Food Controls Table",
        "description": "Unified food table scraped from the 669/2009 and 884/2014 annexes.",
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "records": {
                "description": "Unified records, hazard-bearing regulation first.",
                "type": "array",
                "items": {"$ref": "#/$defs/FoodRecord"},
            },
            "reports": {
                "description": "Per-regulation scrape counters.",
                "type": "array",
                "items": {"$ref": "#/$defs/ScrapeReport"},
            },
        },
        "required": ["records", "reports"],
        "$defs": defs,
    }
