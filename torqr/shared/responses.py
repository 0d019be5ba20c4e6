"""Uniform JSON envelope shared by every endpoint"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def _serialize(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, mode="json")
    if isinstance(data, list):
        return [_serialize(item) for item in data]
    return jsonable_encoder(data)


def success_response(
    data: Any = None,
    status_code: int = 200,
    message: Optional[str] = None,
    count: Optional[int] = None,
) -> JSONResponse:
    content: dict[str, Any] = {"success": True}
    if data is not None:
        content["data"] = _serialize(data)
    if message is not None:
        content["message"] = message
    if count is not None:
        content["count"] = count
    return JSONResponse(status_code=status_code, content=content)


def error_response(
    error: str,
    status_code: int,
    details: Optional[list[dict[str, Any]]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "error": error}
    if details:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Convert pydantic error dicts to {path, message} pairs.

    The leading location segment (body, query, path) is dropped so the path
    matches the client's form field names.
    """
    details = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in ("body", "query", "path", "form"):
            loc = loc[1:]
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages raised from validators with "Value error, "
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"path": loc, "message": message})
    return details
