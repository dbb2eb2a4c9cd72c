import logging
from os import PathLike
from typing import Union

logger = logging.getLogger(__name__)


def read_text(path: Union[str, PathLike], encoding: str = "utf-8") -> str:
    """
    Read the entire file as text.

    Args:
        path (Union[str, PathLike]): Path of the file.
        encoding (str): Text encoding of the file. Defaults to utf-8.

    Raises:
        OSError: The file cannot be read.
        UnicodeDecodeError: The contents are not valid in `encoding`.
        Both failures are logged before they are re-raised.

    Returns:
        str: The file contents.
    """
    try:
        with open(path, encoding=encoding) as fp:
            return fp.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read file: {path} ({e})")
        raise e
