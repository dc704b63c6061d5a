"""Tests for the Streamlit page: unit switching, tension entry and racket selectors."""

import os

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'app.py')

PRESTIGE_TOUR = {'brand': 'HEAD', 'product': 'Prestige', 'version': '2023', 'variant': 'Tour'}
EXTREME_PRO = {'brand': 'HEAD', 'product': 'Extreme', 'version': '2024', 'variant': 'Pro'}


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def choose_racket(at, prefix, racket):
    for field in ('brand', 'product', 'version', 'variant'):
        at.selectbox(key=f'{prefix}_{field}').select(racket[field]).run()
    return at


def metric_values(at):
    return [m.value for m in at.metric]


def test_results_are_empty_without_rackets(app):
    assert metric_values(app) == ['', '', '', '']


def test_unit_toggle_rewrites_tension_text(app):
    app.text_input(key='ref_mains_text').input('50').run()
    app.toggle(key='unit_toggle').set_value(True).run()
    assert app.text_input(key='ref_mains_text').value == '22.5'
    assert app.session_state['ref_mains_lbs'] == pytest.approx(50.0)


def test_kg_input_is_stored_in_pounds(app):
    app.toggle(key='unit_toggle').set_value(True).run()
    app.text_input(key='ref_mains_text').input('20').run()
    assert app.session_state['ref_mains_lbs'] == pytest.approx(44.0924)


def test_selected_rackets_give_suggestion(app):
    choose_racket(app, 'ref', PRESTIGE_TOUR)
    choose_racket(app, 'new', EXTREME_PRO)
    assert not app.exception
    assert metric_values(app) == ['31.2', '46.5', '46.5', '31.2']


def test_changing_brand_clears_downstream_selectors(app):
    choose_racket(app, 'ref', PRESTIGE_TOUR)
    choose_racket(app, 'new', EXTREME_PRO)
    app.selectbox(key='new_brand').select('Wilson').run()
    assert app.session_state['new_product'] is None
    assert metric_values(app)[1:] == ['', '', '']
