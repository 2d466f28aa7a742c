"""LabeledExample domain value object — one reference phrase and its yes/no label."""

from pydantic import BaseModel


class LabeledExample(BaseModel, frozen=True):
    example: str
    label: bool
