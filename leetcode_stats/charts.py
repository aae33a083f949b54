import math

from matplotlib.patches import Wedge

COLORS = {
    "easy": ["#34d399", "#1f2937"],
    "medium": ["#fbbf24", "#1f2937"],
    "hard": ["#ef4444", "#1f2937"],
}

PANEL_BG = "#1f2937"
TITLE_FG = "#e5e7eb"
CAPTION_FG = "#9ca3af"
TOOLTIP_BG = "#1f2937"
TOOLTIP_FG = "#f9fafb"

OUTER_RADIUS = 1.0
INNER_RADIUS = 0.5
LABEL_RADIUS = 1.15
START_ANGLE = 90.0
MAX_SWEEP = 359.999


def chart_data(solved, total):
    return [("Solved", solved), ("Remaining", total - solved)]


def difficulty_charts(stats):
    return [
        ("Easy", stats.easy_solved, stats.total_easy, COLORS["easy"]),
        ("Medium", stats.medium_solved, stats.total_medium, COLORS["medium"]),
        ("Hard", stats.hard_solved, stats.total_hard, COLORS["hard"]),
    ]


def caption(solved, total):
    return f"{solved}/{total} solved"


def draw_donut(ax, label, solved, total, colors):
    """Draw one solved/remaining ring on ``ax`` and return its wedges."""
    data = chart_data(solved, total)
    ax.clear()
    ax.set_aspect("equal")
    ax.set_xlim(-1.4, 1.4)
    ax.set_ylim(-1.5, 1.4)
    ax.axis("off")
    ax.set_title(label, color=TITLE_FG, fontsize=12, fontweight="bold")

    wedges = []
    s = sum(v for _, v in data)
    if s:
        theta = START_ANGLE
        for i, (name, value) in enumerate(data):
            sweep = 360.0 * value / s
            # matplotlib wraps arcs past a full turn
            drawn = math.copysign(min(abs(sweep), MAX_SWEEP), sweep)
            w = Wedge((0, 0), OUTER_RADIUS, min(theta, theta - drawn), max(theta, theta - drawn),
                      width=OUTER_RADIUS - INNER_RADIUS,
                      facecolor=colors[i % len(colors)], edgecolor=PANEL_BG)
            w.set_label(name)
            ax.add_patch(w)
            wedges.append(w)
            if name == "Solved":
                mid = math.radians(theta - drawn / 2)
                ax.text(LABEL_RADIUS * math.cos(mid), LABEL_RADIUS * math.sin(mid), str(value),
                        ha="center", va="center", color=colors[i % len(colors)], fontsize=10)
            theta -= sweep

    ax.text(0, -1.35, caption(solved, total), ha="center", va="center", color=CAPTION_FG, fontsize=10)
    return wedges


def attach_tooltip(fig, ax, wedges, data):
    annot = ax.annotate("", xy=(0, 0), xytext=(10, 10), textcoords="offset points",
                        color=TOOLTIP_FG,
                        bbox=dict(boxstyle="round", fc=TOOLTIP_BG, ec="none"))
    annot.set_visible(False)

    def on_move(event):
        if event.inaxes is ax:
            for w, (name, value) in zip(wedges, data):
                hit, _ = w.contains(event)
                if hit:
                    annot.xy = (event.xdata, event.ydata)
                    annot.set_text(f"{name}: {value}")
                    annot.set_visible(True)
                    fig.canvas.draw_idle()
                    return
        if annot.get_visible():
            annot.set_visible(False)
            fig.canvas.draw_idle()

    return fig.canvas.mpl_connect("motion_notify_event", on_move)
