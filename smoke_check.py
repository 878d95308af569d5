"""Lightweight smoke test: fetch the first page of the Pokémon list from the live API.
This avoids starting Streamlit UI and only checks that core modules import and the HTTP call works.
"""
from pokemon_api import PokeApi

if __name__ == '__main__':
    results = PokeApi().fetch_pokemons(limit=1)
    if isinstance(results, list):
        print('fetch_pokemons OK:', results)
    else:
        raise SystemExit('fetch_pokemons returned unexpected type')
