# flake8: noqa
"""
Plain text functions. None of them keeps state or touches files, except the
`load_config_*` helpers which read the file before scanning it.

- `txtkit.text.charmap` -- Latin-1 (Windows-1252) to Unicode character remapping.
- `txtkit.text.normalization` -- Space cleaning and trailing zero trimming of numerals.
- `txtkit.text.unicode_escape` -- Decoding of `\\uHHHH` escapes.
- `txtkit.text.substitution` -- `<token>` and recursive `{variable}` template substitution.
- `txtkit.text.lists` -- Newline separated lists with comments.
- `txtkit.text.config_blocks` -- Labeled `{ ... }` and `< ... >` config blocks.
"""
from .charmap import latin1_runeize
from .config_blocks import (
    ConfigBlock,
    handle_config_blocks,
    handle_config_data,
    iter_config_blocks,
    iter_config_data,
    load_config_blocks,
    load_config_data,
)
from .lists import list_to_sep_string, list_to_string_list, sep_list_to_string_list
from .normalization import clean_spaces, flt_trim_dot0s, trim_dot0s
from .substitution import (
    MAX_DEPTH,
    SubstitutionResult,
    TokenMap,
    VariableMap,
    detokenize,
    replace_vars,
)
from .unicode_escape import fix_unicode_escaped_text

__all__ = [
    "latin1_runeize",
    "clean_spaces",
    "trim_dot0s",
    "flt_trim_dot0s",
    "fix_unicode_escaped_text",
    "MAX_DEPTH",
    "SubstitutionResult",
    "TokenMap",
    "VariableMap",
    "detokenize",
    "replace_vars",
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
