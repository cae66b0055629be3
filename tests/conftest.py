import pytest

from milsidc.taxonomy import registration
from milsidc.taxonomy.validation import reset_filler_policy


@pytest.fixture()
def default_filler_policy():
    reset_filler_policy()
    yield
    reset_filler_policy()


@pytest.fixture()
def clean_registry(monkeypatch):
    with monkeypatch.context() as mp:
        mp.setattr(registration, '_FUNCTION_ID_Registry', {})
        mp.setattr(registration, '_parsed_package', False)
        yield


@pytest.fixture()
def codes():
    return [
        'SFGPUCII-------',
        'SHAPMFF--------',
        'SUAPMFU---12345',
        'SFGPXXXXXX-----',
        'SFGQUCII-------',
        'XFGPXXXXXX-----',
        'GFGP------12345',
        'EUUP------12345',
        'WPAP------ABCDE',
        'IHGPSRE--------',
    ]
