"""Color palette for the dark theme and the chart series."""

# Base theme colors
BACKGROUND = "#0F172A"
PANEL_BG = "#1E293B"
BORDER = "#475569"

ACCENT = "#3B82F6"

# Text colors
TEXT_PRIMARY = "#F8FAFC"
TEXT_SECONDARY = "#B0BEC5"
TEXT_MUTED = "#94A3B8"
TEXT_DISABLED = "#64748B"

# One color per plotted quantity; He-3 decay and build-up share a hue
SERIES_COLORS = {
    "he3_polarization": "#8884D8",
    "neutron_polarization": "#82CA9D",
    "neutron_transmission": "#FFC658",
    "figure_of_merit": "#FF7300",
    "buildup": "#8884D8",
    "measured": "#EF5350",
}
