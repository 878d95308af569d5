import logging

logger = logging.getLogger('pokemon.view')

LOADING_TEXT = "Loading Pokémon…"


class PokemonListView:
    """Scrollable Pokémon list bound to a PokemonStore.

    The target is any Streamlit container (usually ``st.empty()``); each
    render replaces what the target shows.
    """

    key = 'pokemon-list'

    def __init__(self, store):
        self.store = store
        self.target = None
        self._unsubscribe = None

    @property
    def mounted(self):
        return self._unsubscribe is not None

    def mount(self, target):
        self.target = target
        if self.mounted:
            self.render()
            return
        self._unsubscribe = self.store.subscribe(self._on_change)
        self.render()
        self.store.fetch_pokemons()

    def unmount(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_change(self, _pokemons):
        if self.target is not None:
            self.render()

    def render(self):
        if not self.store.pokemons:
            self.target.info(LOADING_TEXT)
            return

        event = self.target.dataframe(
            self.store.as_frame(),
            hide_index=True,
            width='stretch',
            on_select='rerun',
            selection_mode='single-row',
            key=self.key,
        )
        rows = event.selection.rows if event is not None else []
        if rows and rows[0] < len(self.store.pokemons):
            self.on_tap(self.store.pokemons[rows[0]])
        else:
            self.on_tap(None)

    def on_tap(self, pokemon):
        self.store.select(pokemon)
