import logging

import requests

API_BASE = "https://leetcode-stats-api.herokuapp.com"

logger = logging.getLogger(__name__)


def stats_url(username):
    return f"{API_BASE}/{username}"


def api_user_stats(username, timeout=None, session=None):
    url = stats_url(username)
    http = session or requests
    logger.info("GET %s", url)
    r = http.get(url, timeout=timeout)
    j = r.json()
    if isinstance(j, dict) and j.get("status") == "error":
        return j
    if r.status_code >= 500:
        r.raise_for_status()
    return j
