"""Response validation.

Responses from the Fightcade API are envelopes of the form
``{"res": "OK", <payload key>: ...}``. List operations nest a page
``{"results": [...], "count": n}`` under ``results``. The FightcadeVids
service returns a flat ``{quarkid: url}`` mapping without a status.
"""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

import structlog
from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..models import ResultsCountCheck
from ..models.user import FightcadeModel, Number
from .errors import RemoteError, SchemaValidationError

log = structlog.stdlib.get_logger()

STATUS_OK = "OK"
STATUS_KEYS = ("res", "status")

T = TypeVar("T", bound=BaseModel)
M = TypeVar("M", bound=BaseModel)


class ResultPage(FightcadeModel, Generic[T]):
    """One page of a list operation."""
    results: list[T]
    count: Number


_video_urls_adapter = TypeAdapter(dict[str, str], config=ConfigDict(strict=True))


def format_path(prefix: str, loc: Sequence[Any]) -> str:
    """Join a pydantic error location onto a dotted path."""
    parts = [prefix] if prefix else []
    parts.extend(str(part) for part in loc)
    return ".".join(parts)


def _schema_error(error: PydanticValidationError, prefix: str, what: str) -> SchemaValidationError:
    errors = error.errors(include_url=False)
    first = errors[0]
    path = format_path(prefix, first["loc"])
    log.warning(
        "Response failed schema validation",
        what=what,
        path=path,
        error_count=len(errors),
        reason=first["msg"],
    )
    return SchemaValidationError(f"Invalid {what}: {first['msg']}", path=path, errors=errors)


def check_status(data: Any, operation: str | None = None) -> dict[str, Any]:
    """Ensure the envelope reports success and return it.

    Raises:
        SchemaValidationError: If the envelope is not an object or has no status
        RemoteError: If the service reported a status other than OK
    """
    if not isinstance(data, dict):
        raise SchemaValidationError("Response must be a JSON object", path="")

    key = next((k for k in STATUS_KEYS if k in data), None)
    if key is None:
        raise SchemaValidationError("Response has no status marker", path=STATUS_KEYS[0])

    status = data[key]
    if not isinstance(status, str):
        raise SchemaValidationError("Response status must be a string", path=key)
    if status != STATUS_OK:
        log.info("Service reported an error status", operation=operation, status=status)
        raise RemoteError(status, operation)
    return data


def extract_object(data: Any, key: str, model: type[M], operation: str | None = None) -> M:
    """Validate a successful envelope and return the object stored under ``key``."""
    envelope = check_status(data, operation)
    try:
        return model.model_validate(envelope.get(key))
    except PydanticValidationError as e:
        raise _schema_error(e, key, model.__name__) from e


def extract_results(
    data: Any,
    model: type[M],
    operation: str | None = None,
    count_check: ResultsCountCheck = ResultsCountCheck.EXACT,
) -> list[M]:
    """Validate a successful list envelope and return its results."""
    envelope = check_status(data, operation)
    try:
        page = ResultPage[model].model_validate(envelope.get("results"))  # type: ignore[valid-type]
    except PydanticValidationError as e:
        raise _schema_error(e, "results", f"{model.__name__} results") from e

    check_count(page.count, len(page.results), count_check)
    return list(page.results)


def check_count(count: Number, length: int, count_check: ResultsCountCheck) -> None:
    """Compare a page's reported count with the number of results it holds."""
    if count_check is ResultsCountCheck.IGNORE:
        return
    expected = length + 1 if count_check is ResultsCountCheck.LEGACY_OFF_BY_ONE else length
    if count != expected:
        raise SchemaValidationError(
            f"Result count {count} does not match {length} results",
            path="results.count",
        )


def extract_video_urls(data: Any) -> dict[str, str]:
    """Validate a FightcadeVids response: a flat challenge id to URL mapping."""
    try:
        return _video_urls_adapter.validate_python(data)
    except PydanticValidationError as e:
        raise _schema_error(e, "", "video URL map") from e
