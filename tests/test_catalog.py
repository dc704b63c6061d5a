"""Tests for loading and querying the racket database."""

import logging

import pytest

from catalog import load_racket_database, find_by_tuple, unique_values_of, row_to_spec

CSV_HEADER = 'brand,product,version,variant,head_size,mains,crosses,stiffness,weight,balance,beam,swingweight,tension_range\n'


@pytest.fixture(scope='module')
def catalog():
    return load_racket_database()


def test_bundled_database_loads(catalog):
    assert not catalog.empty
    assert set(unique_values_of(catalog, 'brand')) == {'Babolat', 'Dunlop', 'HEAD', 'Tecnifibre', 'Wilson', 'Yonex'}


def test_find_by_tuple(catalog):
    spec = find_by_tuple(catalog, {'brand': 'HEAD', 'product': 'Prestige', 'version': '2023', 'variant': 'Tour'})
    assert spec.head_size == 95
    assert spec.pattern_key == '16x19'
    assert spec.stiffness == 62
    assert spec.tension_range == '48-57'


def test_find_by_tuple_parses_beam(catalog):
    spec = find_by_tuple(catalog, {'brand': 'Babolat', 'product': 'Pure Aero', 'version': '2023', 'variant': 'Standard'})
    assert spec.beam == (23.0, 26.0, 23.0)


@pytest.mark.parametrize('selection', [
    {},
    {'brand': 'HEAD', 'product': 'Prestige', 'version': '2023'},
    {'brand': 'HEAD', 'product': 'Prestige', 'version': '2023', 'variant': 'Nope'},
])
def test_find_by_tuple_incomplete_or_unknown(catalog, selection):
    assert find_by_tuple(catalog, selection) is None


def test_unique_values_follow_filter(catalog):
    products = unique_values_of(catalog, 'product', {'brand': 'HEAD'})
    assert 'Prestige' in products
    assert 'Blade' not in products
    assert len(products) == len(set(products))

    versions = unique_values_of(catalog, 'version', {'brand': 'Wilson', 'product': 'Clash'})
    assert versions == ['2022', '2025']


def test_unique_values_ignore_empty_filter_entries(catalog):
    assert unique_values_of(catalog, 'product', {'brand': 'HEAD', 'version': None}) == \
        unique_values_of(catalog, 'product', {'brand': 'HEAD'})


def test_incomplete_rows_are_dropped(tmp_path, caplog):
    path = tmp_path / 'rackets.csv'
    path.write_text(CSV_HEADER
                    + 'Acme,Ace,2024,MP,100,16,19,65,300,320,22,315,50-60\n'
                    + 'Acme,Ace,2024,Lite,100,16,19,,285,330,22,300,50-60\n')
    with caplog.at_level(logging.WARNING, logger='catalog'):
        df = load_racket_database(str(path))
    assert list(df['variant']) == ['MP']
    assert 'Dropping 1 racket' in caplog.text


def test_missing_optional_fields(tmp_path):
    path = tmp_path / 'rackets.csv'
    path.write_text(CSV_HEADER + 'Acme,Ace,2024,MP,98,18,20,63,,,,,\n')
    spec = row_to_spec(load_racket_database(str(path)).iloc[0])
    assert spec.weight is None
    assert spec.beam == ()
    assert spec.tension_range == ''


def test_missing_database_gives_empty_catalog(tmp_path):
    df = load_racket_database(str(tmp_path / 'missing.csv'))
    assert df.empty
    assert unique_values_of(df, 'brand') == []
    assert find_by_tuple(df, {'brand': 'HEAD', 'product': 'Speed', 'version': '2024', 'variant': 'MP'}) is None


def test_non_positive_head_size_rows_are_dropped(tmp_path, caplog):
    path = tmp_path / 'rackets.csv'
    path.write_text(CSV_HEADER
                    + 'Acme,Ace,2024,MP,100,16,19,65,300,320,22,315,50-60\n'
                    + 'Acme,Ace,2024,Zero,0,16,19,65,300,320,22,315,50-60\n'
                    + 'Acme,Ace,2024,Minus,-98,16,19,65,300,320,22,315,50-60\n')
    with caplog.at_level(logging.WARNING, logger='catalog'):
        df = load_racket_database(str(path))
    assert list(df['variant']) == ['MP']
    assert 'Dropping 2 racket(s) with a non-positive head size' in caplog.text
