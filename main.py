import logging

import settings
from metrics import start_metrics
from pokemon_module import AppModule, RouteNotFound

# Streamlit imported only inside run_app to keep module import-safe
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger('pokemon')


def get_module(session_state, module_cls=AppModule):
    """Return the session's module, creating it on first use."""
    if 'module' not in session_state:
        session_state['module'] = module_cls()
    return session_state['module']


# Streamlit app
def run_app():
    import streamlit as st

    start_metrics()
    st.title("Pokémon")

    module = get_module(st.session_state)
    path = st.query_params.get('route', '/')
    try:
        view = module.resolve(path)
    except RouteNotFound:
        logger.warning('Unknown route %s', path)
        st.error(f"Page not found: {path}")
        return

    view.mount(st.empty())

    selected = view.store.selected
    if selected is not None:
        st.caption(f"#{selected.id} {selected.name}: {selected.url}")


if __name__ == '__main__':
    run_app()
