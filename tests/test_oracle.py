import json
import logging

import pytest

from milsidc.base import FormatError
from milsidc.oracle import OracleError, RenderResult, RenderingOracle, \
    MilSymbolOracle, CrossCheckResult, cross_check
from milsidc.sidc import parse_sidc
from milsidc.taxonomy.validation import TaxonomyValidator


class _FakeOracle(RenderingOracle):
    """Considers every code valid, and renders all but the listed ones."""

    def __init__(self, invalid=(), unrenderable=()):
        self.invalid = set(invalid)
        self.unrenderable = set(unrenderable)
        self.seen = []

    def is_available(self):
        return True

    def render(self, sidc):
        code = str(sidc)
        self.seen.append(code)
        return RenderResult(
            code, is_valid=code not in self.invalid,
            has_visual_representation=code not in self.unrenderable,
            can_render=code not in self.unrenderable, svg_length=100)


def test_render_result_from_dict():
    result = RenderResult.from_dict({
        'sidc': 'SFGPUCII-------', 'isValid': True, 'hasVisualRepresentation': True,
        'canRender': True, 'svgLength': 1234, 'symbolSet': '10', 'entity': 'Infantry'})
    assert result.is_valid
    assert result.can_render
    assert result.svg_length == 1234
    assert result.error is None
    assert result.entity == 'Infantry'


def test_render_result_error_response():
    result = RenderResult.from_dict({
        'sidc': 'SFGPUCII-------', 'isValid': False, 'error': 'bad symbol',
        'hasVisualRepresentation': False, 'canRender': False, 'svgLength': 0})
    assert not result.is_valid
    assert result.error == 'bad symbol'
    assert result.to_dict() == {
        'sidc': 'SFGPUCII-------', 'isValid': False, 'hasVisualRepresentation': False,
        'canRender': False, 'svgLength': 0, 'error': 'bad symbol'}


def test_render_result_missing_sidc():
    with pytest.raises(KeyError):
        RenderResult.from_dict({'isValid': True})


def test_base_oracle():
    oracle = RenderingOracle()
    with pytest.raises(NotImplementedError):
        oracle.is_available()
    with pytest.raises(NotImplementedError):
        oracle.render('SFGPUCII-------')


def test_cross_check_agrees(default_filler_policy):
    oracle = _FakeOracle()
    result = cross_check('SFGPUCII-------', oracle)
    assert isinstance(result, CrossCheckResult)
    assert result.validation.ok
    assert result.render.is_valid
    assert result.agrees
    assert oracle.seen == ['SFGPUCII-------']


def test_cross_check_disagrees(default_filler_policy, caplog):
    oracle = _FakeOracle()
    with caplog.at_level(logging.WARNING, logger='milsidc.oracle'):
        result = cross_check('SFGPXXXXXX-----', oracle)
    # the oracle never changes the local verdict
    assert not result.validation.ok
    assert result.render.is_valid
    assert not result.agrees
    assert 'disagree' in caplog.text


def test_cross_check_unrenderable(default_filler_policy, caplog):
    oracle = _FakeOracle(unrenderable=['SHAPMFF--------'])
    with caplog.at_level(logging.WARNING, logger='milsidc.oracle'):
        result = cross_check(parse_sidc('SHAPMFF--------'), oracle)
    assert result.agrees
    assert 'can not render' in caplog.text


def test_cross_check_custom_validator():
    oracle = _FakeOracle()
    result = cross_check('WPAP------ABCDE', oracle, validator=TaxonomyValidator(filler_schemes=()))
    assert not result.validation.ok
    assert not result.agrees


def test_cross_check_malformed():
    oracle = _FakeOracle()
    with pytest.raises(FormatError):
        cross_check('SFGP', oracle)
    assert oracle.seen == []


def test_milsymbol_render_parses_output(monkeypatch):
    oracle = MilSymbolOracle()
    scripts = []

    def fake_run(script):
        scripts.append(script)
        return 'some noise\n{}\n\n'.format(json.dumps({
            'sidc': 'SFGPUCII-------', 'isValid': True, 'hasVisualRepresentation': True,
            'canRender': True, 'svgLength': 10}))

    monkeypatch.setattr(oracle, '_run', fake_run)
    result = oracle.render(' SFGPUCII-------')
    assert result.is_valid
    assert result.svg_length == 10
    assert 'const sidc = "SFGPUCII-------";' in scripts[0]


@pytest.mark.parametrize('output', ['', 'not json\n', '{"isValid": true}\n'])
def test_milsymbol_bad_output(monkeypatch, output):
    oracle = MilSymbolOracle()
    monkeypatch.setattr(oracle, '_run', lambda script: output)
    with pytest.raises(OracleError):
        oracle.render('SFGPUCII-------')


def test_milsymbol_malformed_not_sent(monkeypatch):
    oracle = MilSymbolOracle()
    scripts = []
    monkeypatch.setattr(oracle, '_run', lambda script: scripts.append(script))
    with pytest.raises(FormatError):
        oracle.render('SFGP')
    assert scripts == []


def test_milsymbol_missing_executable():
    oracle = MilSymbolOracle(executable='milsidc-no-such-runtime')
    assert not oracle.is_available()
    with pytest.raises(OracleError):
        oracle._run('console.log("OK")')


@pytest.mark.skipif(not MilSymbolOracle().is_available(), reason='bun and milsymbol are not available')
def test_milsymbol_integration(default_filler_policy):
    result = cross_check('SFGPUCII-------', MilSymbolOracle())
    assert result.validation.ok
    assert result.render.sidc == 'SFGPUCII-------'
