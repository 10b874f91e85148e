"""
Response envelopes shared by every endpoint.

Success: {"status": "success", "data": ...}  (data omitted when empty)
Error:   {"status": "error", "message": "..."}
"""
from typing import Any

from ninja import Schema

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def _to_primitive(data: Any) -> Any:
    if isinstance(data, Schema):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [_to_primitive(item) for item in data]
    if isinstance(data, dict):
        return {key: _to_primitive(value) for key, value in data.items()}
    return data


def success(data: Any = None) -> dict:
    body = {"status": STATUS_SUCCESS}
    if data is not None:
        body["data"] = _to_primitive(data)
    return body


def error(message: str) -> dict:
    return {"status": STATUS_ERROR, "message": message}
