from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Any

from flask import jsonify, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import NotFoundError, RosterImportError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def current_professor_id() -> str:
    return str(session["user_id"])


def login_required(view):
    """The session user is set by the external auth layer."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def api_errors(view):
    """Translate domain errors into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except RosterImportError as e:
            return json_error(str(e), 400, reason=e.reason)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except StoreError as e:
            return json_error(str(e), 502)
        except HTTPException as e:
            return json_error(e.description or e.name, e.code or 500)
        except Exception:
            logger.exception("unhandled error in %s", view.__name__)
            return json_error("Internal server error", 500)

    return wrapper


def to_jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(to_jsonable(k)): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value
