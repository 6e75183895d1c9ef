"""Environment-based configuration for palette-extractor.

Resolution order (first wins):
  1. Explicit CLI value (--algorithm).
  2. PALETTE_EXTRACTOR_ALGORITHM from the OS environment.
  3. The built-in default, k-means.

Only the live OS environment is read. There is no config or .env file.
"""

import logging
import os

from palette_extractor.core.errors import InvalidAlgorithm
from palette_extractor.core.types import Algorithm

logger = logging.getLogger(__name__)

ALGORITHM_ENV_VAR = 'PALETTE_EXTRACTOR_ALGORITHM'
DEFAULT_ALGORITHM = Algorithm.KMEANS


def parse_algorithm(value: str) -> Algorithm:
    """Map a user-supplied name to an Algorithm. Case and '_' vs '-' are ignored."""
    normalized = value.strip().lower().replace('_', '-')
    try:
        return Algorithm(normalized)
    except ValueError:
        raise InvalidAlgorithm(value) from None


def resolve_algorithm(cli_value: str | None = None) -> Algorithm:
    """Pick the clustering algorithm from the CLI, then the environment, then the default."""
    if cli_value:
        return parse_algorithm(cli_value)

    env_value = os.environ.get(ALGORITHM_ENV_VAR, '').strip()
    if env_value:
        logger.debug('Using %s=%s', ALGORITHM_ENV_VAR, env_value)
        return parse_algorithm(env_value)

    return DEFAULT_ALGORITHM
