import socket
import sys
from types import SimpleNamespace

import pytest

import main
import metrics
from pokemon_api import PokeApi
from pokemon_module import AppModule

from conftest import FakeApi, FakeTarget


class FakeStreamlit(SimpleNamespace):
    def __init__(self, query_params=None, target=None):
        super().__init__(session_state={}, query_params=query_params or {}, calls=[])
        self.target = target or FakeTarget()

    def title(self, text):
        self.calls.append(('title', text))

    def empty(self):
        return self.target

    def error(self, text):
        self.calls.append(('error', text))

    def caption(self, text):
        self.calls.append(('caption', text))


@pytest.fixture
def fake_st(monkeypatch, pokemons):
    def install(**kwargs):
        st = FakeStreamlit(**kwargs)
        st.session_state['module'] = AppModule(overrides={PokeApi: FakeApi(pokemons)})
        monkeypatch.setitem(sys.modules, 'streamlit', st)
        return st
    return install


def test_get_module_keeps_one_module_per_session():
    session_state = {}
    module = main.get_module(session_state)
    assert isinstance(module, AppModule)
    assert main.get_module(session_state) is module


def test_run_app_defaults_to_list_route(fake_st):
    st = fake_st()
    main.run_app()

    kind, frame, _ = st.target.last
    assert kind == 'dataframe'
    assert frame['name'].tolist() == ['bulbasaur', 'ivysaur', 'venusaur']
    assert not [c for c in st.calls if c[0] in ('error', 'caption')]


def test_run_app_unknown_route_shows_error(fake_st):
    st = fake_st(query_params={'route': '/missing'})
    main.run_app()

    assert ('error', 'Page not found: /missing') in st.calls
    assert st.target.calls == []


def test_run_app_shows_caption_for_tapped_item(fake_st):
    st = fake_st(target=FakeTarget(selected_rows=[1]))
    main.run_app()

    assert ('caption', '#2 ivysaur: https://pokeapi.co/api/v2/pokemon/2/') in st.calls


def test_start_metrics_disabled_by_port_zero():
    assert metrics.start_metrics(port=0) is False


def test_start_metrics_only_once_per_process(monkeypatch):
    monkeypatch.setattr(metrics, '_started_port', None)
    with socket.socket() as s:
        s.bind(('', 0))
        port = s.getsockname()[1]

    assert metrics.start_metrics(port) is True
    assert metrics.start_metrics(port) is False
