"""Data models for htmlmd."""

from .ast import AstNode, NodeKind
from .config import ConverterConfig
from .result import ConversionResult

__all__ = [
    "AstNode",
    "NodeKind",
    "ConverterConfig",
    "ConversionResult",
]
