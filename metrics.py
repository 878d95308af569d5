import logging

from prometheus_client import Counter, Gauge, start_http_server

import settings

logger = logging.getLogger('pokemon.metrics')

FETCH_TOTAL = Counter('pokemon_list_fetch_total', 'Pokémon list fetches', ['outcome'])
LIST_ITEMS = Gauge('pokemon_list_items', 'Pokémon currently held by the store')

# Lives in an imported module: Streamlit re-executes main.py on every rerun
_started_port = None


def start_metrics(port=None):
    """Start the Prometheus exporter once per process. Port 0 disables it."""
    global _started_port
    port = settings.METRICS_PORT if port is None else port
    if _started_port is not None or port <= 0:
        return False
    start_http_server(port)
    _started_port = port
    logger.info('Prometheus metrics exposed on port %d', port)
    return True
