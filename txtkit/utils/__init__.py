# flake8: noqa
"""
Utilities around the text functions.

- `txtkit.utils.file_io` -- Reads whole text files for the config block loaders.
"""
