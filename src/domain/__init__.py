"""Domain layer: errors, schemas and messages."""

from .errors import (
    ErrorCodes,
    FileReadError,
    GanttError,
    MissingBaseDirectory,
    ParseError,
    RenderError,
    TargetDirectoryNotFound,
    TemplateCompileError,
)
from .messages import MessageCatalog
from .schemas import Chart, PageContext, Section

__all__ = [
    "ErrorCodes",
    "GanttError",
    "MissingBaseDirectory",
    "TargetDirectoryNotFound",
    "ParseError",
    "FileReadError",
    "RenderError",
    "TemplateCompileError",
    "MessageCatalog",
    "Chart",
    "PageContext",
    "Section",
]
