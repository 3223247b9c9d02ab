from __future__ import annotations
import copy
from typing import Any, Dict, List, Union

# List fields edited as one comma separated text box
COMMA_LIST_PATHS = ("tablePlan.metadata.materials",)


def split_path(path: Union[str, List[Union[str, int]]]) -> List[Union[str, int]]:
	if isinstance(path, list):
		return path
	parts: List[Union[str, int]] = []
	for part in path.split("."):
		if part == "":
			raise KeyError(path)
		parts.append(int(part) if part.isdigit() else part)
	return parts


def apply_patch(document: Dict[str, Any], path: Union[str, List[Union[str, int]]], value: Any) -> Dict[str, Any]:
	"""Return a copy of ``document`` with ``value`` stored at the dotted ``path``.

	Intermediate containers must exist; list segments are integer indexes.
	Raises KeyError / IndexError for paths that do not resolve.
	"""
	parts = split_path(path)
	if not parts:
		raise KeyError(path)
	if path in COMMA_LIST_PATHS and isinstance(value, str):
		value = [s.strip() for s in value.split(",") if s.strip()]
	patched = copy.deepcopy(document)
	node: Any = patched
	for part in parts[:-1]:
		node = _step(node, part)
	last = parts[-1]
	if isinstance(node, list):
		if not isinstance(last, int) or last >= len(node):
			raise IndexError(f"{path}: index out of range")
		node[last] = value
	elif isinstance(node, dict):
		node[str(last)] = value
	else:
		raise KeyError(path)
	return patched


def _step(node: Any, part: Union[str, int]) -> Any:
	if isinstance(node, list):
		if not isinstance(part, int) or part >= len(node):
			raise IndexError(f"index {part} out of range")
		return node[part]
	if isinstance(node, dict):
		key = str(part)
		if key not in node or node[key] is None:
			raise KeyError(key)
		return node[key]
	raise KeyError(str(part))


def move_item(items: List[Any], index: int, direction: str) -> List[Any]:
	moved = list(items)
	if direction == "up" and 0 < index < len(moved):
		moved[index - 1], moved[index] = moved[index], moved[index - 1]
	elif direction == "down" and 0 <= index < len(moved) - 1:
		moved[index], moved[index + 1] = moved[index + 1], moved[index]
	return moved
