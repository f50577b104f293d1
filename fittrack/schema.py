# -*- coding: utf-8 -*-
"""Shared pydantic base model and lenient field types.

Wire names are camelCase (``dayOfWeek``, ``sourceId``); Python attributes stay
snake_case. Numeric fields accept numbers, numeric strings and unit-suffixed
strings ("10g"); anything unparsable becomes ``None`` so completeness checks can
report it instead of failing at parse time.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

_NUMBER_RE = re.compile(r"^\s*([-+]?\d+(?:[.,]\d+)?)")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def error_fields(exc: PydanticValidationError) -> Dict[str, str]:
    """Flatten a pydantic error into ``{"days.0.name": "message"}``."""
    return {".".join(str(p) for p in err["loc"]) or "record": err["msg"] for err in exc.errors()}


def parse_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        m = _NUMBER_RE.match(value)
        if not m:
            return None
        return float(m.group(1).replace(",", "."))
    return None


def parse_count(value: Any) -> Optional[int]:
    number = parse_number(value)
    if number is None:
        return None
    return int(round(number))


def _identifier(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _timestamp(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


Number = Annotated[Optional[float], BeforeValidator(parse_number)]
Count = Annotated[Optional[int], BeforeValidator(parse_count)]
Identifier = Annotated[str, BeforeValidator(_identifier)]
Text = Annotated[str, BeforeValidator(_text)]
Timestamp = Annotated[Optional[str], BeforeValidator(_timestamp)]
