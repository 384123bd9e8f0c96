from bson import ObjectId
from datetime import datetime, timezone


def serialize_object_id(value):
    """Convert ObjectId to string safely."""
    if isinstance(value, ObjectId):
        return str(value)
    return value


def serialize_datetime(value):
    """Format datetime as an ISO-8601 UTC string with millisecond precision."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    return value


def serialize_doc(doc):
    """
    Recursively convert MongoDB document into clean JSON-serializable dict.
    - Keeps _id as the key and converts ObjectId to string
    - Converts datetime to ISO_STRING
    """
    if isinstance(doc, list):
        return [serialize_doc(d) for d in doc]

    if isinstance(doc, dict):
        return {k: serialize_doc(v) for k, v in doc.items()}

    # Handle special types
    if isinstance(doc, ObjectId):
        return serialize_object_id(doc)
    if isinstance(doc, datetime):
        return serialize_datetime(doc)

    return doc
