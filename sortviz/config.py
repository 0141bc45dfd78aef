# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH  = 1100
WINDOW_HEIGHT = 680
FPS           = 120

DEFAULT_ALGORITHM  = "bubble"
DEFAULT_ARRAY_SIZE = 50
MIN_ARRAY_SIZE     = 5
MAX_ARRAY_SIZE     = 100
DEFAULT_SPEED      = 5
MIN_SPEED          = 1
MAX_SPEED          = 10

# Bar heights are drawn straight from this range.
VALUE_MIN = 10
VALUE_MAX = 359

# Values are printed on bars at or below this array size.
LABEL_MAX_SIZE = 30

# ============================================================
# ========================== TIMING ==========================
# ============================================================
#
# STEP DELAY - milliseconds between visible steps:
#   delay = max(MIN_STEP_DELAY_MS, (SPEED_CEILING - speed) * STEP_DELAY_UNIT_MS)
#   speed 1 -> 150 ms, speed 5 -> 90 ms, speed 10 -> 15 ms.
MIN_STEP_DELAY_MS  = 10
SPEED_CEILING      = 11
STEP_DELAY_UNIT_MS = 15
#
# POLL_INTERVAL_MS - while paused the scheduler re-checks at this rate.
POLL_INTERVAL_MS = 50
#
# SWEEP_DELAY_MS - per-bar delay of the final "sorted" sweep.
SWEEP_DELAY_MS = 30

# ============================================================
# ========================= UI THEME =========================
# ============================================================

BACKGROUND_COLOR = (5, 5, 10)
BAR_SPACING      = 2

COMPARING_COLOR = (255, 210, 60)
SWAPPING_COLOR  = (255, 60, 60)
PIVOT_COLOR     = (180, 90, 255)
SORTED_COLOR    = (60, 200, 100)

UI_BG         = (8,   8,  14)
UI_PANEL      = (14, 14,  22)
UI_PANEL2     = (22, 22,  36)
UI_ACCENT     = (255, 55,  55)
UI_TEXT       = (215, 215, 228)
UI_SUBTEXT    = (105, 105, 130)
UI_HOVER      = (30,  22,  38)
UI_SEL_BG     = (50,  12,  12)
UI_BORDER     = (38,  38,  58)
UI_SEL_BORDER = (255, 55,  55)
UI_DIM        = (60,  60,  80)
UI_GREEN      = (60, 200, 100)
