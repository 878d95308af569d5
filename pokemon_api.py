import logging
from dataclasses import dataclass

import requests

import settings

logger = logging.getLogger('pokemon.api')


class PokeApiError(Exception):
    """Raised when PokeAPI answers with anything but a usable 200 response."""

    def __init__(self, message, status_code=None, url=None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


@dataclass(frozen=True)
class Pokemon:
    name: str
    url: str

    @classmethod
    def from_json(cls, data):
        name, url = data['name'], data['url']
        if not isinstance(name, str) or not isinstance(url, str):
            raise TypeError(f"name and url must be strings, got {name!r}, {url!r}")
        return cls(name=name, url=url)

    @property
    def id(self):
        # url like .../pokemon/25/
        parts = [p for p in self.url.split('/') if p]
        return int(parts[-1]) if parts and parts[-1].isdigit() else None


class PokeApi:
    def __init__(self, base_url=settings.API_BASE_URL, timeout=settings.API_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def fetch_pokemons(self, limit=None):
        """Fetch the first page of the Pokémon list.

        Raises PokeApiError on a non-200 status or a malformed envelope.
        Network errors from requests propagate unchanged.
        """
        url = f"{self.base_url}/pokemon"
        params = {'limit': limit} if limit is not None else None
        response = requests.get(url, params=params, timeout=self.timeout)
        if response.status_code != 200:
            raise PokeApiError(
                f"Failed to fetch Pokémon list (status {response.status_code})",
                status_code=response.status_code,
                url=url,
            )

        payload = response.json()
        if not isinstance(payload, dict):
            raise PokeApiError("Response is not a JSON object", status_code=200, url=url)
        results = payload.get('results')
        if not isinstance(results, list):
            raise PokeApiError("Response has no 'results' list", status_code=200, url=url)
        try:
            pokemons = [Pokemon.from_json(item) for item in results]
        except (KeyError, TypeError) as e:
            raise PokeApiError(f"Malformed Pokémon entry: {e}", status_code=200, url=url) from e

        logger.debug('Fetched %d Pokémon from %s', len(pokemons), url)
        return pokemons
