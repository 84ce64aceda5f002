from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel

FieldType = Literal["number", "currency", "percentage"]
ResultFormat = Literal["currency", "percentage", "number"]


class InputField(BaseModel):
    name: str
    label: str
    type: FieldType
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    required: bool = True
    placeholder: str = ""
    default_value: Optional[float] = None
    help_text: str = ""
    # numeric code -> label, for inputs that stand in for an enum
    options: Optional[Dict[int, str]] = None
    # whole numbers only (terms in years, unit counts)
    integer: bool = False


class CalculatorResult(BaseModel):
    label: str
    value: float
    format: ResultFormat
    highlight: bool = False
    description: str = ""


@dataclass(frozen=True)
class CalculatorConfig:
    id: str
    title: str
    description: str
    inputs: List[InputField]
    calculate: Callable[[Dict[str, float]], List[CalculatorResult]]
    keywords: Tuple[str, ...] = ()

    def field(self, name: str) -> InputField:
        for f in self.inputs:
            if f.name == name:
                return f
        raise KeyError(name)
