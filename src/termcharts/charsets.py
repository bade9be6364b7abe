BAR_ASCII = "#"
BAR_UNICODE = "█"

# Fill glyphs per series when colour is off, cycled by series index
SERIES_FILL_ASCII = "#=*+%@o"
SERIES_FILL_UNICODE = "█▓▒░■●◆"

# Sparkline ramps, lowest to highest (8 levels)
SPARK_UNICODE = "▁▂▃▄▅▆▇█"
SPARK_ASCII = "_.-=+*#@"

# Line glyphs: horizontal, vertical, down-right, up-right, point marker
LINE_UNICODE = "─│╲╱•"
LINE_ASCII = "-|\\/*"

AXIS_UNICODE = "─"
AXIS_ASCII = "-"

LEGEND_MARKER_UNICODE = "●"
LEGEND_MARKER_ASCII = "*"

# Braille patterns start at U+2800: 256 characters, one per 2x4 dot combination
BRAILLE_BASE = 0x2800

# Bit for each dot, indexed [dot_row][dot_col]; the bottom row holds dots 7 and 8
BRAILLE_DOTS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

# Pie sector symbols when colour is off, cycled by sector index
PIE_SYMBOLS_ASCII = "#@*+%=&o"
PIE_SYMBOLS_UNICODE = "█▓▒░●◆■▲"
