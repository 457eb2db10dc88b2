"""
Flatten nested records into a single-level mapping of dotted paths to scalar leaves.
Example: {'Director': ['Frank Miller']} -> {'Director.0': 'Frank Miller'}
"""

from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Union

Scalar = Union[str, int, float, bool, None]


def flatten(obj: Any, delimiter: str = '.') -> Dict[str, Scalar]:
	"""Flatten a dataclass, dict or list; list items are keyed by their index."""
	if is_dataclass(obj) and not isinstance(obj, type):
		obj = asdict(obj)  # nested dataclasses become dicts too
	flat: Dict[str, Scalar] = {}
	_flatten_into(flat, obj, '', delimiter)
	return flat


def _flatten_into(flat: Dict[str, Scalar], value: Any, path: str, delimiter: str) -> None:
	if isinstance(value, dict):
		items = value.items()
	elif isinstance(value, (list, tuple)):
		items = enumerate(value)
	else:
		flat[path] = value  # scalar leaf
		return
	for key, child in items:
		child_path = f'{path}{delimiter}{key}' if path else str(key)
		_flatten_into(flat, child, child_path, delimiter)
