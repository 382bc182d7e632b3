"""キーパッドのボタン表記と、それぞれが発生させるエンジンイベントの対応表"""
from calc.engine import (
    DIGITS,
    BinaryOp,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Event,
    Negate,
    SetOperation,
    ToggleAngleMode,
    Unary,
    UnaryOp,
)

ANGLE_KEY = "RAD/DEG"

KEY_EVENTS: dict[str, Event] = {d: Digit(d) for d in DIGITS}
KEY_EVENTS.update({
    ".": DecimalPoint(),
    "AC": Clear(),
    "+/-": Negate(),
    "=": Equals(),
    ANGLE_KEY: ToggleAngleMode(),
})
KEY_EVENTS.update({op.value: SetOperation(op) for op in BinaryOp})
KEY_EVENTS.update({op.value: Unary(op) for op in UnaryOp})

# 基本キーパッド（上から順に）
BASIC_ROWS = [
    ["AC", "+/-", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    ["0", ".", "="],
]

# 科学計算パネル（Scientific Mode のときだけ表示）
SCIENTIFIC_ROWS = [
    [ANGLE_KEY, "sin", "cos", "tan"],
    ["π", "x²", "√", "xʸ"],
    ["log", "ln", "e", "1/x"],
]


def event_for_key(label: str) -> Event:
    """ボタン表記からイベントを返す。未知の表記は KeyError"""
    return KEY_EVENTS[label]
