"""Window and font settings for the pygame demo."""

CAPTION = "Unit Circle — sin & cos"
FONT_NAME = "dejavusans"
MIN_W = 320
MIN_H = 320

PANEL_BORDER = (220, 220, 220)
PAUSED_COLOR = (200, 60, 60)
