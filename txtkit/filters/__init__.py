# flake8: noqa
"""
Filters wrapping the text functions, to be chained with `txtkit.Compose`.

Each filter module can directly import from `txtkit`. i.e., you can import as `from txtkit import document_filters`.

- `txtkit.filters.document_filters` -- Character remapping, space cleaning, escape decoding and numeral trimming.
- `txtkit.filters.templating` -- `<token>` and `{variable}` template substitution.
"""
