"""Toolkit-agnostic input controller for the stats widget.

``spawn(fn)`` starts background work, ``schedule(fn)`` runs ``fn`` on the UI
thread. Every trigger starts its own fetch and nothing is cancelled, so
completions are applied in arrival order: a slow earlier request can
overwrite the result of a later one.
"""
import logging

from .state import Idle, Loading, load_stats

ENTER_KEYS = ("Return", "Enter", "KP_Enter")

logger = logging.getLogger(__name__)


class StatsController:
    def __init__(self, spawn, schedule, load=load_stats):
        self.spawn = spawn
        self.schedule = schedule
        self.load = load
        self.query = ""
        self.state = Idle()
        self._listeners = []

    def subscribe(self, fn):
        self._listeners.append(fn)

    def set_query(self, text):
        self.query = text

    def on_key(self, key):
        if key in ENTER_KEYS:
            self.submit()

    def submit(self):
        username = self.query
        self._set_state(Loading(username))
        self.spawn(lambda: self._fetch(username))

    def _fetch(self, username):
        state = self.load(username)
        self.schedule(lambda: self._set_state(state))

    def _set_state(self, state):
        self.state = state
        logger.debug("state -> %r", state)
        for fn in list(self._listeners):
            fn(state)
