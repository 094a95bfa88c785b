"""Price Source & Aggregation Settings

Defaults for the upstream price source and the aggregation layer.
Deployment overrides come from environment variables (see apps/pricing lifespan).
"""

from datetime import timedelta

# Upstream price source
PRICE_SOURCE_BASE_URL: str = "http://20.244.56.144/evaluation-service"
PRICE_SOURCE_TIMEOUT_SECONDS: float = 10.0

# Sample cache TTL (2 minutes)
SAMPLE_CACHE_TTL_SECONDS: float = 120.0

# Max timestamp gap for two samples to count as the same moment
ALIGNMENT_TOLERANCE: timedelta = timedelta(minutes=5)

# Correlation is meaningless below this many aligned pairs
MIN_ALIGNED_POINTS: int = 2

# Presentation rounding
AVERAGE_DECIMALS: int = 6
CORRELATION_DECIMALS: int = 4

SUPPORTED_AGGREGATION: str = "average"
