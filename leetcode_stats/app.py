import logging
import threading
import tkinter as tk
from tkinter import ttk, messagebox

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from .charts import PANEL_BG, attach_tooltip, chart_data, difficulty_charts, draw_donut
from .controller import StatsController
from .state import panels, summary

PLACEHOLDER = "Enter LeetCode username"

BG = "#111827"
FG = "#e5e7eb"
MUTED = "#9ca3af"
ACCENT = "#c084fc"
RANK_FG = "#60a5fa"
ERROR_FG = "#f87171"

logger = logging.getLogger(__name__)


# ---------------- GUI ----------------
class StatsApp:
    def __init__(self, root):
        self.root = root
        root.title("LeetCode Stats")
        root.geometry("900x560")
        root.minsize(700, 480)
        root.configure(bg=BG)

        style = ttk.Style()
        if "clam" in style.theme_names():
            style.theme_use("clam")
        style.configure("TFrame", background=BG)
        style.configure("TLabel", font=("Arial", 12), background=BG, foreground=FG)
        style.configure("Title.TLabel", font=("Arial", 22, "bold"), foreground=ACCENT)
        style.configure("Muted.TLabel", foreground=MUTED)
        style.configure("Error.TLabel", foreground=ERROR_FG)
        style.configure("Total.TLabel", font=("Arial", 14, "bold"))
        style.configure("Rank.TLabel", foreground=RANK_FG)
        style.configure("TButton", font=("Arial", 12))
        style.configure("TEntry", font=("Arial", 12))

        self.controller = StatsController(spawn=self._spawn, schedule=self._schedule)
        self.controller.subscribe(self.render)

        main = ttk.Frame(root, padding=16)
        main.pack(fill=tk.BOTH, expand=True)

        ttk.Label(main, text="⚡ LeetCode Stats", style="Title.TLabel").pack(pady=(0, 12))

        top = ttk.Frame(main)
        top.pack()

        self.username_var = tk.StringVar()
        self.username_entry = ttk.Entry(top, textvariable=self.username_var, width=36)
        self.username_entry.pack(side=tk.LEFT, padx=(0, 10))
        self.username_entry.bind("<Return>", lambda e: self.controller.on_key(e.keysym))
        self.username_entry.bind("<KP_Enter>", lambda e: self.controller.on_key(e.keysym))
        self.username_entry.bind("<FocusIn>", self._clear_placeholder)
        self.username_entry.bind("<FocusOut>", self._show_placeholder)
        self._placeholder_on = False
        self._show_placeholder()
        self.username_var.trace_add("write", self._on_text)

        self.fetch_btn = ttk.Button(top, text="Fetch", command=self.controller.submit)
        self.fetch_btn.pack(side=tk.LEFT)

        self.status = tk.StringVar(value="")
        ttk.Label(main, textvariable=self.status, style="Muted.TLabel").pack(pady=(10, 0))
        self.error_var = tk.StringVar(value="")
        ttk.Label(main, textvariable=self.error_var, style="Error.TLabel").pack()

        self.results = ttk.Frame(main)
        self.total_var = tk.StringVar()
        self.rank_var = tk.StringVar()
        ttk.Label(self.results, textvariable=self.total_var, style="Total.TLabel").pack()
        ttk.Label(self.results, textvariable=self.rank_var, style="Rank.TLabel").pack(pady=(2, 8))

        self.fig = Figure(figsize=(8.4, 3.2), dpi=100, facecolor=PANEL_BG)
        self.axes = [self.fig.add_subplot(1, 3, i + 1) for i in range(3)]
        self.canvas = FigureCanvasTkAgg(self.fig, self.results)
        self._tooltip_cids = []
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

    def _spawn(self, fn):
        threading.Thread(target=fn, daemon=True).start()

    def _schedule(self, fn):
        self.root.after(0, fn)

    def _on_text(self, *args):
        self.controller.set_query("" if self._placeholder_on else self.username_var.get())

    def _clear_placeholder(self, event=None):
        if self._placeholder_on:
            self._placeholder_on = False
            self.username_entry.configure(foreground=FG)
            self.username_var.set("")

    def _show_placeholder(self, event=None):
        if not self.username_var.get():
            self._placeholder_on = True
            self.username_entry.configure(foreground=MUTED)
            self.username_var.set(PLACEHOLDER)

    def render(self, state):
        loading_text, error_text, show_results = panels(state)
        self.status.set(loading_text)
        self.error_var.set(error_text)
        if not show_results:
            self.results.pack_forget()
            return
        try:
            self.show_stats(state.stats)
        except Exception as ui_err:
            logger.exception("Failed to render stats")
            messagebox.showerror("UI update error", f"Exception updating UI:\n{ui_err}")

    def show_stats(self, stats):
        total_line, rank_line = summary(stats)
        self.total_var.set(total_line)
        self.rank_var.set(rank_line)
        for cid in self._tooltip_cids:
            self.fig.canvas.mpl_disconnect(cid)
        self._tooltip_cids = []
        for ax, (label, solved, total, colors) in zip(self.axes, difficulty_charts(stats)):
            wedges = draw_donut(ax, label, solved, total, colors)
            self._tooltip_cids.append(attach_tooltip(self.fig, ax, wedges, chart_data(solved, total)))
        self.canvas.draw_idle()
        self.results.pack(fill=tk.BOTH, expand=True, pady=(8, 0))


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s:%(name)s:%(message)s')
    root = tk.Tk()
    StatsApp(root)
    root.mainloop()

if __name__ == "__main__":
    main()
