"""Flet の電卓アプリ。計算ロジックは calc.engine にまとまっている"""
from calc.engine import (
    AngleMode,
    BinaryOp,
    CalcState,
    Calculator,
    DomainError,
    UnaryOp,
    apply,
    format_number,
    parse_display,
    replay,
)

__all__ = [
    "AngleMode",
    "BinaryOp",
    "CalcState",
    "Calculator",
    "DomainError",
    "UnaryOp",
    "apply",
    "format_number",
    "parse_display",
    "replay",
]
