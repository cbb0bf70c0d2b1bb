"""BiteBrain - fishing pattern recommendations and solunar forecasting.

Architecture::

    reference/     Static data (species profiles, sample spots, water-temp tables)
    recommend/     Conditions -> ranked fishing patterns (species rules + simple engine)
    solunar/       Sun/moon driven feeding periods and daily ratings
    analysis/      Water temperature advice, solunar impact, composite conditions rating
    offline/       Map tile math and offline region downloads
    store.py       Tiered cache with TTL (regions, tiles, derived)
    flows/         Prefect orchestration (weekly outlook, region download)
    api/           FastAPI application
    services/      Shared utilities (HTTP client with retry)

Data flow: Conditions -> recommend -> Recommendation list; (date, location) ->
solunar -> SolunarDay; both feed analysis and the outlook in derived/.

Extension points:
  - New species rule:  recommend/rules.py (``register_rule``)
  - New sun/moon backend: solunar/ephemeris.py (``SunMoonTimeProvider``)
"""

__version__ = "0.1.0"

from bitebrain.config import Settings
from bitebrain.schemas import Conditions, Recommendation

__all__ = ["Conditions", "Recommendation", "Settings", "__version__"]
