from types import SimpleNamespace

import pytest

from pokemon_api import Pokemon


class DummyResponse:
    def __init__(self, status_code=200, json_data=None):
        self.status_code = status_code
        self._json = json_data or {}

    def json(self):
        return self._json


class FakeApi:
    def __init__(self, pokemons=None, error=None):
        self.pokemons = pokemons or []
        self.error = error
        self.calls = 0

    def fetch_pokemons(self, limit=None):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.pokemons)


class FakeTarget:
    """Records what a view draws into a Streamlit placeholder."""

    def __init__(self, selected_rows=()):
        self.calls = []
        self.selected_rows = list(selected_rows)

    def info(self, text):
        self.calls.append(('info', text))

    def dataframe(self, frame, **kwargs):
        self.calls.append(('dataframe', frame, kwargs))
        return SimpleNamespace(selection=SimpleNamespace(rows=self.selected_rows))

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def pokemons():
    return [
        Pokemon('bulbasaur', 'https://pokeapi.co/api/v2/pokemon/1/'),
        Pokemon('ivysaur', 'https://pokeapi.co/api/v2/pokemon/2/'),
        Pokemon('venusaur', 'https://pokeapi.co/api/v2/pokemon/3/'),
    ]
