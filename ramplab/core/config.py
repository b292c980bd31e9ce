#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 4096

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_LINEAR_TH = 0.03928           # Linearization threshold used by the WCAG 2.1 luminance formula
CONTRAST_DECIMALS = 100.0          # Ratios are truncated to two decimals for display stability

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle, used for shortest-arc hue interpolation
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
HSL_BLUE_SECTOR = 4.0              # Sector offset when blue is the dominant channel
PERCENT = 100.0                    # Divisor to convert percentage values to fractions
OKLCH_PERCENT_CHROMA = 0.4         # OKLCH chroma that CSS maps to 100%

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0     # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS matrix coefficients (Source: Björn Ottosson, 2020)
OKLAB_RGB_TO_LMS_LR = 0.4122214708  # Contribution of linear R to Long-wavelength (L) response
OKLAB_RGB_TO_LMS_LG = 0.5363325363  # Contribution of linear G to Long-wavelength (L) response
OKLAB_RGB_TO_LMS_LB = 0.0514459929  # Contribution of linear B to Long-wavelength (L) response
OKLAB_RGB_TO_LMS_MR = 0.2119034982  # Contribution of linear R to Medium-wavelength (M) response
OKLAB_RGB_TO_LMS_MG = 0.6806995451  # Contribution of linear G to Medium-wavelength (M) response
OKLAB_RGB_TO_LMS_MB = 0.1073969566  # Contribution of linear B to Medium-wavelength (M) response
OKLAB_RGB_TO_LMS_SR = 0.0883024619  # Contribution of linear R to Short-wavelength (S) response
OKLAB_RGB_TO_LMS_SG = 0.2817188376  # Contribution of linear G to Short-wavelength (S) response
OKLAB_RGB_TO_LMS_SB = 0.6299787005  # Contribution of linear B to Short-wavelength (S) response

# LMS' to Lab matrix coefficients (Perceptual lightness and opponency)
OKLAB_LMS_TO_LAB_LL = 0.2104542553         # Weight of L' in Lightness
OKLAB_LMS_TO_LAB_LM = 0.7936177850         # Weight of M' in Lightness
OKLAB_LMS_TO_LAB_LS = -0.0040720468        # Weight of S' in Lightness
OKLAB_LMS_TO_LAB_AL = 1.9779984951         # Weight of L' in 'a' (green-red)
OKLAB_LMS_TO_LAB_AM = -2.4285922050        # Weight of M' in 'a' (green-red)
OKLAB_LMS_TO_LAB_AS = 0.4505937099         # Weight of S' in 'a' (green-red)
OKLAB_LMS_TO_LAB_BL = 0.0259040371         # Weight of L' in 'b' (blue-yellow)
OKLAB_LMS_TO_LAB_BM = 0.7827717662         # Weight of M' in 'b' (blue-yellow)
OKLAB_LMS_TO_LAB_BS = -0.8086757660        # Weight of S' in 'b' (blue-yellow)

# OKLab to LMS' matrix coefficients (Inverse stage part 1)
OKLAB_TO_LMS_PRIME_LA = 0.3963377774       # Contribution of 'a' to L' channel
OKLAB_TO_LMS_PRIME_LB = 0.2158037573       # Contribution of 'b' to L' channel
OKLAB_TO_LMS_PRIME_MA = -0.1055613458      # Contribution of 'a' to M' channel
OKLAB_TO_LMS_PRIME_MB = -0.0638541728      # Contribution of 'b' to M' channel
OKLAB_TO_LMS_PRIME_SA = -0.0894841775      # Contribution of 'a' to S' channel
OKLAB_TO_LMS_PRIME_SB = -1.2914855480      # Contribution of 'b' to S' channel

# LMS to linear sRGB matrix coefficients (Inverse stage part 2)
OKLAB_LMS_TO_RGB_RL = 4.0767416621         # Weight of L for linear Red
OKLAB_LMS_TO_RGB_RM = -3.3077115913        # Weight of M for linear Red
OKLAB_LMS_TO_RGB_RS = 0.2309699292         # Weight of S for linear Red
OKLAB_LMS_TO_RGB_GL = -1.2684380046        # Weight of L for linear Green
OKLAB_LMS_TO_RGB_GM = 2.6097574011         # Weight of M for linear Green
OKLAB_LMS_TO_RGB_GS = -0.3413193965        # Weight of S for linear Green
OKLAB_LMS_TO_RGB_BL = -0.0041960863        # Weight of L for linear Blue
OKLAB_LMS_TO_RGB_BM = -0.7034186147        # Weight of M for linear Blue
OKLAB_LMS_TO_RGB_BS = 1.7076147010         # Weight of S for linear Blue

# Gamut mapping
RGB_CLAMP_TOLERANCE_LOWER = -0.5           # Lower bound tolerance for gamut mapping and rounding
RGB_CLAMP_TOLERANCE_UPPER = 255.5          # Upper bound tolerance for gamut mapping and rounding
GAMUT_MAP_BINARY_SEARCH_ITERATIONS = 20    # Binary search steps for chroma-based gamut mapping


# ==========================================
# Ramp Structure
# ==========================================

SCALES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
MID_SCALE = 500                            # Pivot used by perturbation direction rules
LIGHT = "light"
DARK = "dark"
MODES = (LIGHT, DARK)

# Classification
GRAYSCALE_HSL_SATURATION = 0.05            # HSL saturation below which a color is grayscale
GRAYSCALE_OKLCH_CHROMA = 0.01              # OKLCH chroma below which a color is grayscale
PURE_WHITE_HEX = "#FFFFFF"
PURE_BLACK_HEX = "#000000"

# Text candidates
TEXT_BLACK_HEX = "#000000"
TEXT_WHITE_HEX = "#FFFFFF"
LIGHT_MODE_BG_HEX = "#FFFFFF"              # Page background the light-mode 950 shade is read against


# ==========================================
# Generator Constants
# ==========================================

OKLCH_LIGHT_POLE = 0.99                    # Near-white OKLCH lightness of a ramp's light extreme
OKLCH_DARK_POLE = 0.15                     # Near-black OKLCH lightness of a ramp's dark extreme

# Vibrancy (chroma boost) compression by OKLCH hue
VIBRANCY_MAX = 100
VIBRANCY_PURPLE_RANGE = (260.0, 330.0)     # Hues that clip quickly in sRGB
VIBRANCY_PURPLE_COMPRESSION = 0.85
VIBRANCY_RED_RANGES = ((0.0, 30.0), (330.0, 360.0))
VIBRANCY_RED_COMPRESSION = 0.95
VIBRANCY_DEFAULT_COMPRESSION = 1.0
VIBRANCY_BIAS = 0.05                       # Asymmetric start/end chroma bias at full vibrancy

# Neutral ramp lifts
NEUTRAL_DARK_LIFT = 0.015                  # Lift applied to white/black dark ramps away from the anchor
NEUTRAL_DARK_CAP = 0.985                   # Lightness ceiling for lifted neutral shades
GRAY_DARK_BOOST = 0.02                     # Lift applied to dark scales 50-400 of gray inputs
GRAY_DARK_BOOST_MAX_SCALE = 400


# ==========================================
# Accessibility Constants
# ==========================================

ACCESSIBILITY_MAX_ITERATIONS = 20          # Lightness nudges before giving up
ACCESSIBILITY_NUDGE_FRACTION = 0.1         # Fraction of the remaining distance to the pole per nudge
FORCE_LIGHTNESS_WHITE_TEXT = 0.25          # Last-resort lightness for white-text backgrounds
FORCE_LIGHTNESS_BLACK_TEXT = 0.90          # Last-resort lightness for black-text backgrounds


# ==========================================
# Uniqueness Constants
# ==========================================

UNIQUENESS_MAX_ATTEMPTS = 10               # Deterministic perturbation attempts per collision
UNIQUE_LIGHTNESS_STEP = 0.1                # Base lightness step per attempt (colored)
UNIQUE_SATURATION_STEP = 0.1               # Base saturation step per attempt (colored)
UNIQUE_GRAY_STEP_SCALE = 0.01              # Multiplier that turns the lightness step into a gray step
UNIQUE_SATURATION_FROM = 4                 # First attempt that touches saturation
UNIQUE_SATURATION_OFFSET = 2               # Saturation step multiplier is (attempt - offset)
UNIQUE_HUE_FROM = 7                        # First attempt that rotates hue
UNIQUE_HUE_OFFSET = 5                      # Hue step multiplier is (attempt - offset)
UNIQUE_HUE_STEP = 5.0                      # Degrees per hue step
UNIQUE_COLOR_L_RANGE = (0.05, 0.95)
UNIQUE_COLOR_S_RANGE = (0.05, 0.95)
UNIQUE_GRAY_L_RANGE = (0.10, 0.985)

# Last-resort randomized bands, as (offset, span)
RANDOM_LIGHT_BAND = (0.8, 0.15)
RANDOM_DARK_BAND = (0.1, 0.2)
RANDOM_GRAY_DARK_RAMP_LIGHT_BAND = (0.7, 0.28)
RANDOM_HUE_SHIFT = (30.0, 60.0)
RANDOM_SATURATION = (0.5, 0.4)
RANDOM_GRAY_CAP = 0.985
UNIQUENESS_RANDOM_DRAWS = 64               # Seeded draws before the band is scanned level by level


# ==========================================
# Continuity Constants
# ==========================================

# Minimum HSL lightness gap between adjacent scales, keyed by the lower scale
MIN_LIGHTNESS_DELTAS = {
    50: 0.07,
    100: 0.07,
    200: 0.08,
    300: 0.08,
    400: 0.09,
    500: 0.09,
    600: 0.09,
    700: 0.08,
    800: 0.07,
    900: 0.05,
}
GREEN_MIN_LIGHTNESS_DELTA = 0.05           # Flatter spacing for green hues
GREEN_HUE_RANGE = (90.0, 150.0)
SPACING_MARGIN = 2.0 / 255.0               # Headroom left for collision settling
SETTLE_MAX_LEVELS = 48                     # Widest lightness move, in 8-bit levels, tried while settling
SETTLE_HUE_STEPS = (2.0, -2.0, 4.0, -4.0, 6.0, -6.0, 8.0, -8.0)

LIGHT_CEILING = 1.0
DARK_CEILING_GRAY = 0.985
DARK_CEILING_COLOR = 0.99
LIGHTNESS_FLOOR = 0.0

DARK_900_MIN_LIGHTNESS = 0.90
DARK_950_MIN_LIGHTNESS = 0.95

DARK_100_POSITION = 0.33                   # Relative position of dark 100 between 50 and 200
DARK_100_MIN_SEPARATION = 0.015
DARK_100_MIN_CHANGE = 0.001

LIGHT_950_MAX_ATTEMPTS = 15
LIGHT_950_L_STEP = (0.005, 0.001)          # Darken by base + per-attempt increment
LIGHT_950_S_STEP = (0.002, 0.0005)         # Saturate by base + per-attempt increment
LIGHT_950_MIN_LIGHTNESS = 0.01


# ==========================================
# Export Formats
# ==========================================

FORMAT_PAIRED = "paired"
FORMAT_THEMED = "themed"
FORMAT_LIGHT_RAMP = "light ramp"
FORMAT_DARK_RAMP = "dark ramp"
EXPORT_FORMATS = (FORMAT_PAIRED, FORMAT_THEMED, FORMAT_LIGHT_RAMP, FORMAT_DARK_RAMP)
EXPORT_PREFIX = "figma-"
THEME_LIGHT = "Light"
THEME_DARK = "Dark"
ANCHOR_SUFFIX = "*"
JSON_INDENT = 2


# ==========================================
# CLI UI
# ==========================================

MAX_ENTRIES = 100                          # Maximum number of colors in one exported collection

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
