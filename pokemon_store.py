import logging

import pandas as pd
import requests

from metrics import FETCH_TOTAL, LIST_ITEMS
from pokemon_api import PokeApiError

logger = logging.getLogger('pokemon.store')


class ObservableList:
    """Sequence whose replace() notifies every subscriber with the new contents."""

    def __init__(self, items=()):
        self._items = list(items)
        self._subscribers = []

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self):
        return f"ObservableList({self._items!r})"

    def subscribe(self, callback):
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def replace(self, items):
        self._items = list(items)
        for callback in list(self._subscribers):
            callback(self)


class PokemonStore:
    def __init__(self, api):
        self.api = api
        self.pokemons = ObservableList()
        self.selected = None

    def subscribe(self, callback):
        return self.pokemons.subscribe(callback)

    def fetch_pokemons(self):
        """Replace the list with a fresh fetch. Errors are logged, never raised."""
        try:
            pokemons = self.api.fetch_pokemons()
        except PokeApiError as e:
            FETCH_TOTAL.labels(outcome='error').inc()
            logger.error("Failed to fetch Pokémon list. status=%s url=%s", e.status_code, e.url)
            return
        except requests.RequestException:
            FETCH_TOTAL.labels(outcome='error').inc()
            logger.exception("Failed to fetch Pokémon list")
            return

        FETCH_TOTAL.labels(outcome='success').inc()
        LIST_ITEMS.set(len(pokemons))
        logger.info('Loaded %d Pokémon', len(pokemons))
        self.pokemons.replace(pokemons)

    def select(self, pokemon):
        """Record the tapped item; None clears the selection."""
        if pokemon == self.selected:
            return
        self.selected = pokemon
        if pokemon is None:
            logger.info('Selection cleared')
        else:
            logger.info('Selected %s (%s)', pokemon.name, pokemon.url)

    def as_frame(self):
        return pd.DataFrame(
            [{'id': p.id, 'name': p.name, 'url': p.url} for p in self.pokemons],
            columns=['id', 'name', 'url'],
        )
