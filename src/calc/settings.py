import logging
import os

# ---------------------------------------------
# 表示・計算の定数
# ---------------------------------------------
ERROR_TEXT = "Error"
INITIAL_DISPLAY = "0"
MAX_FRACTION_DIGITS = 8

# ---------------------------------------------
# ウィンドウとボタンの見た目
# ---------------------------------------------
APP_TITLE = "Calculator (Scientific Mode)"
APP_WIDTH = 380
APP_PADDING = 20
APP_BORDER_RADIUS = 20
DISPLAY_TEXT_SIZE = 40
BACKGROUND_TOP = "#1c1c1e"
BACKGROUND_BOTTOM = "#2c2c2e"
DISPLAY_BACKGROUND = "#121214"
DIGIT_COLOR = "#333333"
ACTION_COLOR = "#FF9500"
EXTRA_COLOR = "#505050"
SCIENTIFIC_COLOR = "#1C1C1E"

# ---------------------------------------------
# ログ設定
# ---------------------------------------------
LOGGER_NAME = "calc"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level_name: str = None) -> logging.Logger:
    """"calc" ロガーを一度だけ設定する（レベルは CALC_LOG_LEVEL で変更可）"""
    if level_name is None:
        level_name = os.getenv("CALC_LOG_LEVEL", "INFO")
    level = getattr(logging, level_name.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    # ハンドラは NOTSET のまま、絞り込みはロガーのレベルだけで行う
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
