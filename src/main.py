# 使用fletバージョン：0.28.3
# `flet run` 用のエントリポイント（python -m calc と同じ）

import flet as ft

from calc.app import main

if __name__ == "__main__":
    ft.app(main)
