"""Dependency registration and route declaration for the Pokémon app.

A Module lists its binds (how to build each dependency) and routes (which
view answers a path). Binds are singletons per module instance unless
declared otherwise, so one module kept per session shares one store.
"""
import settings
from pokemon_api import PokeApi
from pokemon_store import PokemonStore
from pokemon_view import PokemonListView


class BindingNotFound(LookupError):
    pass


class RouteNotFound(LookupError):
    pass


class Bind:
    def __init__(self, key, factory, singleton=True):
        self.key = key
        self.factory = factory
        self.singleton = singleton


class Route:
    def __init__(self, path, factory):
        self.path = path
        self.factory = factory


class Module:
    binds = []
    routes = []

    def __init__(self, overrides=None):
        self._binds = {b.key: b for b in self.binds}
        self._routes = {r.path: r for r in self.routes}
        self._instances = dict(overrides or {})
        self._views = {}

    def get(self, key):
        if key in self._instances:
            return self._instances[key]
        bind = self._binds.get(key)
        if bind is None:
            raise BindingNotFound(f"No bind registered for {key!r}")
        instance = bind.factory(self)
        if bind.singleton:
            self._instances[key] = instance
        return instance

    def resolve(self, path):
        if path not in self._views:
            route = self._routes.get(path)
            if route is None:
                raise RouteNotFound(f"No route registered for {path!r}")
            self._views[path] = route.factory(self)
        return self._views[path]


class AppModule(Module):
    binds = [
        Bind(PokeApi, lambda i: PokeApi(settings.API_BASE_URL, timeout=settings.API_TIMEOUT)),
        Bind(PokemonStore, lambda i: PokemonStore(i.get(PokeApi))),
    ]
    routes = [
        Route('/', lambda i: PokemonListView(i.get(PokemonStore))),
    ]
