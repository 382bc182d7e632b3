import logging

import flet as ft

from calc import settings
from calc.engine import DIGITS, Calculator
from calc.keys import ANGLE_KEY, BASIC_ROWS, SCIENTIFIC_ROWS, event_for_key

logger = logging.getLogger(f"{settings.LOGGER_NAME}.app")

ACTION_KEYS = ("÷", "×", "-", "+", "=")
EXTRA_KEYS = ("AC", "+/-", "%")


class CalcButton(ft.ElevatedButton):
    def __init__(self, text, button_clicked, expand=1):
        super().__init__()
        self.text = text
        self.expand = expand
        self.on_click = button_clicked
        self.data = text
        self.height = 60


class DigitButton(CalcButton):
    def __init__(self, text, button_clicked, expand=1):
        CalcButton.__init__(self, text, button_clicked, expand)
        self.bgcolor = settings.DIGIT_COLOR
        self.color = ft.Colors.WHITE


class ActionButton(CalcButton):
    def __init__(self, text, button_clicked):
        CalcButton.__init__(self, text, button_clicked)
        self.bgcolor = settings.ACTION_COLOR
        self.color = ft.Colors.WHITE


class ExtraActionButton(CalcButton):
    def __init__(self, text, button_clicked):
        CalcButton.__init__(self, text, button_clicked)
        self.bgcolor = settings.EXTRA_COLOR
        self.color = ft.Colors.WHITE


class ScientificButton(CalcButton):
    def __init__(self, text, button_clicked):
        CalcButton.__init__(self, text, button_clicked)
        self.bgcolor = settings.SCIENTIFIC_COLOR
        self.color = ft.Colors.WHITE


def make_button(label, button_clicked) -> CalcButton:
    """ボタン表記から役割に応じたボタンを作る"""
    if label == "0":
        return DigitButton(label, button_clicked, expand=2)
    if label in DIGITS or label == ".":
        return DigitButton(label, button_clicked)
    if label in ACTION_KEYS:
        return ActionButton(label, button_clicked)
    if label in EXTRA_KEYS:
        return ExtraActionButton(label, button_clicked)
    return ScientificButton(label, button_clicked)


class CalculatorApp(ft.Container):
    def __init__(self, calculator: Calculator = None):
        super().__init__()
        self.calculator = calculator or Calculator()
        self.sci_mode = False     # 科学計算パネル表示/非表示

        self.result = ft.Text(
            value=self.calculator.display,
            color=ft.Colors.WHITE,
            size=settings.DISPLAY_TEXT_SIZE,
            weight=ft.FontWeight.W_300,
            max_lines=1,
        )
        self.width = settings.APP_WIDTH
        self.border_radius = ft.border_radius.all(settings.APP_BORDER_RADIUS)
        self.padding = settings.APP_PADDING
        self.gradient = ft.LinearGradient(
            begin=ft.alignment.top_center,
            end=ft.alignment.bottom_center,
            colors=[settings.BACKGROUND_TOP, settings.BACKGROUND_BOTTOM],
        )

        # --- 表示エリア ---
        self.display_area = ft.Container(
            content=self.result,
            bgcolor=settings.DISPLAY_BACKGROUND,
            border_radius=ft.border_radius.all(16),
            alignment=ft.alignment.center_right,
            padding=ft.padding.symmetric(horizontal=20),
            height=100,
        )

        # --- Scientific Mode 切替 ---
        self.sci_switch = ft.Switch(
            value=False,
            active_color=settings.ACTION_COLOR,
            on_change=self.sci_switch_changed,
        )
        self.row_sci_toggle = ft.Row(
            controls=[
                ft.Text("Scientific Mode", color=ft.Colors.WHITE, weight=ft.FontWeight.BOLD),
                self.sci_switch,
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

        self.basic_rows = [self._make_row(labels) for labels in BASIC_ROWS]
        self.sci_rows = [self._make_row(labels) for labels in SCIENTIFIC_ROWS]

        # 角度モードボタンは現在のモード（RAD/DEG）を表示する
        self.angle_button = self.sci_rows[0].controls[0]
        self.angle_button.text = self.calculator.angle_mode.value

        # 最初は基本行のみ
        self.content = ft.Column(
            controls=[self.display_area, self.row_sci_toggle, *self.basic_rows],
            spacing=12,
        )

    def _make_row(self, labels):
        return ft.Row(controls=[make_button(label, self.button_clicked) for label in labels])

    def handle_key(self, label):
        """ボタン1回分の入力をエンジンに渡し、表示を更新する（画面への反映は呼び出し側）"""
        self.calculator.press(event_for_key(label))
        self.result.value = self.calculator.display
        if label == ANGLE_KEY:
            self.angle_button.text = self.calculator.angle_mode.value
            logger.debug("angle mode: %s", self.calculator.angle_mode.value)

    def set_sci_mode(self, enabled):
        self.sci_mode = enabled
        controls = self.content.controls
        if enabled:
            # [display, switch, sci1, sci2, sci3, basic...] の順を守る
            for i, row in enumerate(self.sci_rows):
                if row not in controls:
                    controls.insert(2 + i, row)
        else:
            for row in self.sci_rows:
                if row in controls:
                    controls.remove(row)

    def button_clicked(self, e):
        self.handle_key(e.control.data)
        self.update()

    def sci_switch_changed(self, e):
        self.set_sci_mode(bool(e.control.value))
        self.update()


def main(page: ft.Page):
    settings.setup_logging()
    page.title = settings.APP_TITLE
    page.bgcolor = settings.BACKGROUND_TOP
    page.add(CalculatorApp())


def run():
    ft.app(main)
