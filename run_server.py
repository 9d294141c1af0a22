#!/usr/bin/env python3
"""Entry point to run the job search proxy."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobdash.config import get_env
from jobdash.log import get_logger

log = get_logger(__name__)


if __name__ == "__main__":
    from jobdash.server import create_app

    if not get_env("JSEARCH_API_KEY"):
        log.warning("JSEARCH_API_KEY is not set; searches will fail unless JOBDASH_DEMO=1")

    port = int(get_env("PORT", "8080") or 8080)
    log.info("Search proxy listening on http://localhost:%d", port)
    create_app().run(host="0.0.0.0", port=port)
