import os

# Read app config from environment variables with sensible defaults
LOG_LEVEL = os.getenv('POKEMON_LOG_LEVEL', 'INFO')

API_BASE_URL = os.getenv('POKEMON_API_BASE_URL', 'https://pokeapi.co/api/v2')
API_TIMEOUT = float(os.getenv('POKEMON_API_TIMEOUT', '10'))

# 0 disables the Prometheus exporter
METRICS_PORT = int(os.getenv('POKEMON_METRICS_PORT', '0'))
