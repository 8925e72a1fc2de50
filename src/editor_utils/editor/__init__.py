"""Editor package containing the document model and batch dispatch helpers."""

from importlib import import_module
from typing import Any

from . import document_model, patches, selection_gateway, transaction

__all__ = ["document_model", "patches", "selection_gateway", "transaction"]


def __getattr__(name: str) -> Any:
	if name in {"qt_document", "line_moves"}:
		module = import_module(f"{__name__}.{name}")
		globals()[name] = module
		return module
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
