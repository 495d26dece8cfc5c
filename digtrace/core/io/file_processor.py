# core/io/file_processor.py

import os

from digtrace.core.logging.logger import setup_logger
from digtrace.core.network.ip_tools import is_valid_ip
from digtrace.core.validators.sanitizer import validate_hostname

logger = setup_logger(__name__)


def process_file(file_path: str) -> list[str]:
    """
    Read domains from a text file, one per line.

    Blank lines and lines starting with "#" are ignored; invalid hostnames
    are logged and skipped.

    Args:
        file_path: Path to the .txt file

    Returns:
        List of domains in file order

    Raises:
        Exception: If the file is missing or has an unsupported extension
    """
    domains = []

    file_path = os.path.abspath(os.path.normpath(file_path))
    if not os.path.isfile(file_path):
        raise Exception(f"File does not exist: {file_path}")
    if not file_path.endswith(".txt"):
        raise Exception("Invalid file format. Only .txt files are supported.")

    with open(file_path, encoding="utf-8") as file:
        for line in file:
            stripped_line = line.strip()
            if not stripped_line or stripped_line.startswith("#"):
                continue
            if validate_hostname(stripped_line) or is_valid_ip(stripped_line):
                domains.append(stripped_line)
            else:
                logger.warning(f"Skipping invalid domain: {stripped_line}")

    logger.info(f"Found {len(domains)} valid domains in {file_path}")

    return domains


def sanitize_file_path(file_path: str) -> str:
    """
    Sanitize and validate a file path.

    Args:
        file_path: File path to sanitize

    Returns:
        Sanitized absolute file path

    Raises:
        ValueError: If the path is malformed, missing, or not a .txt file
    """
    if "\x00" in file_path:
        raise ValueError("File path contains a NUL byte")
    abs_path = os.path.abspath(os.path.normpath(file_path))
    if not os.path.isfile(abs_path):
        raise ValueError(f"File does not exist: {file_path}")
    if not abs_path.endswith(".txt"):
        raise ValueError("Only .txt files are supported")
    return abs_path
