"""
電卓の計算エンジン

表示文字列・保留中の二項演算・左オペランド・「次の数字で置き換える」フラグを
イミュータブルな CalcState にまとめ、ボタン1回分のイベントを
apply(event, state) -> state で処理する。

エラー（0除算、負数の平方根、非正数の対数など）は例外として呼び出し側へは
出さず、表示を ERROR_TEXT にした状態として返す。
"""
import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from typing import Iterable, Optional, Union

from calc import settings

logger = logging.getLogger(f"{settings.LOGGER_NAME}.engine")

DIGITS = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")


class DomainError(ValueError):
    """表示できない計算結果（定義域外・0除算・非有限値）"""


class BinaryOp(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "xʸ"


class UnaryOp(Enum):
    SQUARE_ROOT = "√"
    PERCENTAGE = "%"
    SINE = "sin"
    COSINE = "cos"
    TANGENT = "tan"
    LOG10 = "log"
    NATURAL_LOG = "ln"
    SQUARE = "x²"
    RECIPROCAL = "1/x"
    PI = "π"
    E = "e"


class AngleMode(Enum):
    RAD = "RAD"
    DEG = "DEG"


CONSTANTS: dict[UnaryOp, float] = {
    UnaryOp.PI: math.pi,
    UnaryOp.E: math.e,
}


@dataclass(frozen=True)
class CalcState:
    display: str = settings.INITIAL_DISPLAY
    operation: Optional[BinaryOp] = None
    operand: Optional[float] = None
    replace_next: bool = True
    angle_mode: AngleMode = AngleMode.RAD

    @property
    def is_error(self) -> bool:
        return self.display == settings.ERROR_TEXT


# ---------------------------------------------
# イベント（ボタン1回分の入力）
# ---------------------------------------------
@dataclass(frozen=True)
class Digit:
    digit: str

    def __post_init__(self):
        if self.digit not in DIGITS:
            raise ValueError(f"not a digit: {self.digit!r}")


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Negate:
    pass


@dataclass(frozen=True)
class SetOperation:
    op: BinaryOp


@dataclass(frozen=True)
class Unary:
    op: UnaryOp


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class ToggleAngleMode:
    pass


Event = Union[Digit, DecimalPoint, Clear, Negate, SetOperation, Unary, Equals, ToggleAngleMode]


# ---------------------------------------------
# 表示文字列 <-> 数値
# ---------------------------------------------
def format_number(value: float) -> str:
    """小数点以下最大8桁で表示し、末尾の0と小数点を取り除く"""
    if not math.isfinite(value):
        raise DomainError(f"non-finite result: {value}")
    text = f"{value:.{settings.MAX_FRACTION_DIGITS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # -0.000000001 なども "-0" になるので符号を落とす
    if text == "-0":
        text = "0"
    return text


def parse_display(text: str) -> Optional[float]:
    """表示を数値に変換する。エラー表示など数値でなければ None"""
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


# ---------------------------------------------
# 演算
# ---------------------------------------------
def binary_result(op: BinaryOp, left: float, right: float) -> float:
    if op is BinaryOp.ADD:
        return left + right
    if op is BinaryOp.SUBTRACT:
        return left - right
    if op is BinaryOp.MULTIPLY:
        return left * right
    if op is BinaryOp.DIVIDE:
        if right == 0:
            raise DomainError("division by zero")
        return left / right
    # 負数の非整数乗は complex にせず ValueError にする
    return math.pow(left, right)


def unary_result(op: UnaryOp, value: float, angle_mode: AngleMode = AngleMode.RAD) -> float:
    if op in CONSTANTS:
        return CONSTANTS[op]
    if op is UnaryOp.PERCENTAGE:
        return value / 100.0
    if op is UnaryOp.SQUARE:
        return value * value
    if op is UnaryOp.SQUARE_ROOT:
        if value < 0:
            raise DomainError("square root of a negative number")
        return math.sqrt(value)
    if op is UnaryOp.RECIPROCAL:
        if value == 0:
            raise DomainError("reciprocal of zero")
        return 1.0 / value
    if op in (UnaryOp.LOG10, UnaryOp.NATURAL_LOG):
        if value <= 0:
            raise DomainError("logarithm of a non-positive number")
        return math.log10(value) if op is UnaryOp.LOG10 else math.log(value)

    # 三角関数は角度モードに応じてラジアンへ
    rad = value if angle_mode is AngleMode.RAD else math.radians(value)
    if op is UnaryOp.SINE:
        return math.sin(rad)
    if op is UnaryOp.COSINE:
        return math.cos(rad)
    return math.tan(rad)


# ---------------------------------------------
# 状態遷移
# ---------------------------------------------
def error_state(state: CalcState) -> CalcState:
    return replace(
        state,
        display=settings.ERROR_TEXT,
        operation=None,
        operand=None,
        replace_next=True,
    )


def _append_digit(state: CalcState, digit: str) -> CalcState:
    if state.replace_next or state.display == "0":
        return replace(state, display=digit, replace_next=False)
    # 有限の float に収まらなくなる桁は受け付けない
    if parse_display(state.display + digit) is None:
        return state
    return replace(state, display=state.display + digit)


def _append_decimal(state: CalcState) -> CalcState:
    if state.replace_next:
        return replace(state, display="0.", replace_next=False)
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def _negate(state: CalcState) -> CalcState:
    value = parse_display(state.display)
    if value is None:
        return state
    return replace(state, display=format_number(-value))


def _set_operation(state: CalcState, op: BinaryOp) -> CalcState:
    value = parse_display(state.display)
    if value is None:
        return state
    return replace(state, operation=op, operand=value, replace_next=True)


def _unary(state: CalcState, op: UnaryOp) -> CalcState:
    value = 0.0
    if op not in CONSTANTS:
        value = parse_display(state.display)
        if value is None:
            return state
    result = unary_result(op, value, state.angle_mode)
    return replace(state, display=format_number(result), replace_next=True)


def _equals(state: CalcState) -> CalcState:
    if state.operation is None or state.operand is None:
        return state
    value = parse_display(state.display)
    if value is None:
        return state
    result = binary_result(state.operation, state.operand, value)
    return replace(state, display=format_number(result), operation=None, replace_next=True)


def _toggle_angle_mode(state: CalcState) -> CalcState:
    mode = AngleMode.DEG if state.angle_mode is AngleMode.RAD else AngleMode.RAD
    return replace(state, angle_mode=mode)


def _dispatch(event: Event, state: CalcState) -> CalcState:
    if isinstance(event, Digit):
        return _append_digit(state, event.digit)
    if isinstance(event, DecimalPoint):
        return _append_decimal(state)
    if isinstance(event, Clear):
        return CalcState(angle_mode=state.angle_mode)
    if isinstance(event, Negate):
        return _negate(state)
    if isinstance(event, SetOperation):
        return _set_operation(state, event.op)
    if isinstance(event, Unary):
        return _unary(state, event.op)
    if isinstance(event, Equals):
        return _equals(state)
    if isinstance(event, ToggleAngleMode):
        return _toggle_angle_mode(state)
    raise TypeError(f"unknown calculator event: {event!r}")


def apply(event: Event, state: CalcState) -> CalcState:
    """イベントを1つ処理して新しい状態を返す。計算エラーは ERROR_TEXT の表示になる"""
    logger.debug("event %r on display %r", event, state.display)
    try:
        return _dispatch(event, state)
    except (DomainError, ArithmeticError) as e:
        logger.info("calculation error: %s", e)
        return error_state(state)
    except ValueError as e:
        # math モジュールの定義域エラー（math.pow(-8, 0.5) など）
        logger.info("math domain error: %s", e)
        return error_state(state)


def replay(events: Iterable[Event], state: Optional[CalcState] = None) -> CalcState:
    """イベント列を順に適用した最終状態"""
    return reduce(lambda s, e: apply(e, s), events, state or CalcState())


class Calculator:
    """CalcState を1つ保持し、画面側から押されたイベントを順に適用する"""

    def __init__(self, state: Optional[CalcState] = None):
        self.state = state or CalcState()

    @property
    def display(self) -> str:
        return self.state.display

    @property
    def angle_mode(self) -> AngleMode:
        return self.state.angle_mode

    def press(self, event: Event) -> str:
        self.state = apply(event, self.state)
        return self.state.display

    def reset(self):
        self.state = apply(Clear(), self.state)
