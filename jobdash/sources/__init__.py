from typing import Callable

from .base import JobSearchBase
from .jsearch import JSearchSource, map_job
from .mock import MockSource

from jobdash.errors import ConfigurationError
from jobdash.log import get_logger

log = get_logger(__name__)

__all__ = [
    "JobSearchBase", "JSearchSource", "MockSource", "map_job", "get_source",
]


def get_source(env_getter: Callable[[str], str], timeout: float = 15) -> JobSearchBase:
    """JSearch when a key is configured, the demo source when JOBDASH_DEMO is on."""
    api_key = env_getter("JSEARCH_API_KEY")
    if api_key:
        return JSearchSource(api_key, timeout=timeout)

    if env_getter("JOBDASH_DEMO").lower() in ("1", "true", "yes"):
        log.info("No JSearch key, JOBDASH_DEMO set: using MockSource")
        return MockSource()

    raise ConfigurationError("API key not configured")
