#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Сериализация значений кэша в текст поля документа и обратно

decode() никогда не бросает исключений: текст, который не разбирается
как JSON, возвращается как Raw и хранится в кэше дословно.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

@dataclass(frozen=True)
class Decoded:
    """Поле успешно разобрано как JSON"""
    value: Any

@dataclass(frozen=True)
class Raw:
    """Поле не разобралось (DecodeFailure) - значение остается исходным текстом"""
    text: str
    error: Optional[str] = None

    @property
    def value(self) -> str:
        return self.text

DecodeResult = Union[Decoded, Raw]

def serialize(value: Any) -> str:
    """JSON-текст значения; TypeError/ValueError для несериализуемых значений"""
    return json.dumps(value, ensure_ascii=False, allow_nan=False)

def decode(text: str) -> DecodeResult:
    try:
        return Decoded(json.loads(text))
    except (TypeError, ValueError) as e:
        return Raw(text=text, error=str(e))
