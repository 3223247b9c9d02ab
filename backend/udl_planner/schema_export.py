"""Convert pydantic document models into Gemini response schemas.

Gemini's ``responseSchema`` accepts an OpenAPI subset without ``$ref``, so
definitions are inlined and only the keys Gemini understands are kept.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Type

from pydantic import BaseModel

_KEPT_KEYS = ("description", "enum")


def model_to_gemini_schema(model: Type[BaseModel], *, exclude: Optional[Iterable[str]] = None) -> Dict[str, Any]:
	raw = model.model_json_schema(by_alias=True)
	defs = raw.get("$defs", {})
	schema = _convert(raw, defs)
	for key in exclude or ():
		schema.get("properties", {}).pop(key, None)
		if key in schema.get("required", []):
			schema["required"].remove(key)
	return schema


def _resolve(node: Dict[str, Any], defs: Dict[str, Any]) -> Dict[str, Any]:
	ref = node.get("$ref")
	if ref:
		return defs[ref.split("/")[-1]]
	return node


def _convert(node: Dict[str, Any], defs: Dict[str, Any]) -> Dict[str, Any]:
	node = _resolve(node, defs)
	nullable = False
	if "anyOf" in node:
		branches = [b for b in node["anyOf"] if b.get("type") != "null"]
		nullable = len(branches) != len(node["anyOf"])
		node = _resolve(branches[0], defs) if branches else {"type": "string"}

	kind = node.get("type", "object" if "properties" in node else "string")
	out: Dict[str, Any] = {"type": kind.upper()}
	for key in _KEPT_KEYS:
		if key in node:
			out[key] = node[key]
	if nullable:
		out["nullable"] = True

	if kind == "object":
		props = node.get("properties", {})
		out["properties"] = {name: _convert(sub, defs) for name, sub in props.items()}
		out["required"] = [name for name, sub in out["properties"].items() if not sub.get("nullable")]
	elif kind == "array":
		out["items"] = _convert(node.get("items", {"type": "string"}), defs)
	return out
