"""
.. include:: ../README.md
"""

from .core.composition import Compose
from .core.exceptions import (
    ErrorKind,
    MaxDepthExceededError,
    SubstitutionError,
    UnknownTokenError,
    UnknownVariableError,
)
from .core.filter_interface import Filter
from .core.models import Document
from .filters import document_filters, templating
from .text import (
    ConfigBlock,
    SubstitutionResult,
    TokenMap,
    VariableMap,
    clean_spaces,
    detokenize,
    fix_unicode_escaped_text,
    flt_trim_dot0s,
    handle_config_blocks,
    handle_config_data,
    iter_config_blocks,
    iter_config_data,
    latin1_runeize,
    list_to_sep_string,
    list_to_string_list,
    load_config_blocks,
    load_config_data,
    replace_vars,
    sep_list_to_string_list,
    trim_dot0s,
)

__version__ = "0.1.0"

__all__ = [
    "core",
    "filters",
    "text",
    "utils",
    "Compose",
    "Filter",
    "Document",
    "document_filters",
    "templating",
    "ErrorKind",
    "SubstitutionError",
    "UnknownTokenError",
    "UnknownVariableError",
    "MaxDepthExceededError",
    "SubstitutionResult",
    "TokenMap",
    "VariableMap",
    "detokenize",
    "replace_vars",
    "latin1_runeize",
    "clean_spaces",
    "trim_dot0s",
    "flt_trim_dot0s",
    "fix_unicode_escaped_text",
    "list_to_string_list",
    "sep_list_to_string_list",
    "list_to_sep_string",
    "ConfigBlock",
    "iter_config_data",
    "iter_config_blocks",
    "handle_config_data",
    "handle_config_blocks",
    "load_config_data",
    "load_config_blocks",
]
