# Path: `src/filenaming/features/naming/__init__.py`
# Summary: Export naming feature domain and use case symbols.
# Why: Provide a stable import surface for the renaming feature and tests.

from .domain.sanitizer import PathSanitizer
from .domain.template import (
    ConditionalTemplate,
    PatternRenderer,
    PatternTemplate,
    PlainTemplate,
    TemplateValue,
)
from .domain.variables import NamingDefaults, VariableBuilder
from .usecases.file_naming import FileNaming, join_root

__all__ = [
    "ConditionalTemplate",
    "FileNaming",
    "NamingDefaults",
    "PathSanitizer",
    "PatternRenderer",
    "PatternTemplate",
    "PlainTemplate",
    "TemplateValue",
    "VariableBuilder",
    "join_root",
]
