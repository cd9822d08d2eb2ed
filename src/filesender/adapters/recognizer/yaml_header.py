"""Recognizer adapter for documents with a YAML front-matter header."""

import logging
import re
from datetime import date, datetime, time

import yaml

from ...domain.models import Document, RawFile
from ...ports.recognizer import RecognizerPort

logger = logging.getLogger(__name__)

# ---\n<yaml>\n---\n<body>
_HEADER_PATTERN = re.compile(rb"\A---\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def parse_created(value: object) -> datetime | None:
    """Coerce a YAML `created` value to a naive local datetime."""
    if isinstance(value, datetime):
        created = value
    elif isinstance(value, date):
        created = datetime.combine(value, time())
    elif isinstance(value, str):
        try:
            created = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if created.tzinfo is not None:
        created = created.astimezone().replace(tzinfo=None)
    return created


class YamlHeaderRecognizer(RecognizerPort):
    """Recognizes files that start with a `format`/`created` YAML header.

    The bytes after the closing `---` line become the document content.
    """

    def recognize(self, file: RawFile) -> Document | None:
        match = _HEADER_PATTERN.match(file.content)
        if not match:
            logger.debug(f"No YAML header: {file.name}")
            return None

        try:
            # BaseLoader keeps scalars as written: `format: 3.10` stays "3.10"
            header = yaml.load(match.group(1).decode("utf-8"), Loader=yaml.BaseLoader)
        except (UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Unreadable header in {file.name}: {e}")
            return None

        if not isinstance(header, dict):
            logger.warning(f"Header is not a mapping: {file.name}")
            return None

        doc_format = header.get("format")
        if not isinstance(doc_format, str):
            logger.warning(f"Missing or non-scalar format: {file.name}")
            return None

        created = parse_created(header.get("created"))
        if created is None:
            logger.warning(f"Invalid created date in {file.name}: {header.get('created')!r}")
            return None

        return Document(
            name=str(header.get("name") or file.name),
            content=file.content[match.end():],
            created=created,
            format=doc_format,
        )
