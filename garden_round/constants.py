"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.

Round-scoped tunables (durations, stock, starting money) live in
config.Settings; these are fixed rules of the game.
"""
from fractions import Fraction

# =============================================================================
# GROWTH STAGES
# =============================================================================
STAGE_SEEDLING = 0
STAGE_GROWING = 1
STAGE_MATURE = 2

# Progress thresholds in percent of the growth duration: (stage 1, stage 2)
WATERED_THRESHOLDS = (33, 66)
UNWATERED_THRESHOLDS = (50, 100)

# =============================================================================
# HARVEST
# =============================================================================
WATER_BONUS = Fraction(13, 10)  # +30%

# =============================================================================
# DISPLAY
# =============================================================================
EMPTY_GLYPH = "🟫"
