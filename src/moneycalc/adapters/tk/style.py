# src/moneycalc/adapters/tk/style.py
"""
UI Style - Colours and Fonts of the Tk Shell

Presentation constants only; nothing outside moneycalc.adapters.tk reads them.
"""

HEADER_COLOR = "#f79c0e"
BODY_COLOR = "#1b1919"
ACCENT_COLOR = "#0d68a3"
BODY_FONT_COLOR = "#aca5a5"

WINDOW_TITLE = "Money Calculator App"
WINDOW_SIZE = "1000x650"

FONT_FAMILY = "Verdana"
SOURCE_FONT = (FONT_FAMILY, 20, "bold")
RESULT_FONT = (FONT_FAMILY, 30, "bold")
TIMESTAMP_FONT = (FONT_FAMILY, 12, "bold")
FOOTER_FONT = (FONT_FAMILY, 11, "bold")
INFO_FONT = (FONT_FAMILY, 12)
