"""
Text encoding of task records.

A record is a fenced YAML metadata block followed by free-form body text:

    ---
    id: <uuid>
    name: <string>
    created_at: <RFC 3339 UTC timestamp>
    updated_at: <RFC 3339 UTC timestamp>
    ---
    <body>

Status is never written; the directory a record lives in decides it.
"""
import yaml
from typing import Tuple
from pydantic import ValidationError
from remcli.models import Task, TaskMetadata, TaskStatus
from remcli.recovery import MalformedRecordError

FENCE = "---"

def encode(task: Task, body: str = "") -> str:
    """Serialize a task's metadata block followed by ``body``."""
    metadata = yaml.safe_dump(
        task.metadata().to_record(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return f"{FENCE}\n{metadata}{FENCE}\n{body}"

def split_document(text: str) -> Tuple[str, str]:
    """
    Split a record into its metadata text and body.

    Raises:
        MalformedRecordError: if the opening or closing fence is missing.
    """
    lines = text.lstrip('\ufeff').splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FENCE:
        raise MalformedRecordError("Missing opening metadata fence")

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FENCE:
            return ''.join(lines[1:index]), ''.join(lines[index + 1:])

    raise MalformedRecordError("Missing closing metadata fence")

def decode(text: str, status: TaskStatus) -> Task:
    """
    Parse a record, attaching the caller-supplied status.

    Raises:
        MalformedRecordError: if the metadata block is absent or invalid.
    """
    metadata_text, _ = split_document(text)

    try:
        data = yaml.safe_load(metadata_text)
    except yaml.YAMLError as e:
        raise MalformedRecordError(f"Metadata block is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise MalformedRecordError("Metadata block is not a mapping")

    try:
        metadata = TaskMetadata.model_validate(data)
    except ValidationError as e:
        raise MalformedRecordError(f"Invalid metadata: {e}") from e

    return Task.from_metadata(metadata, status)

def body_of(text: str) -> str:
    """Body region of a record; a document without a metadata block is all body."""
    try:
        return split_document(text)[1]
    except MalformedRecordError:
        return text
