"""
Optional cross checking of symbol identification codes against an external
symbol renderer.

The renderer is treated as an oracle: it is given a well formed 15 character
code, and reports whether it considers the code valid and whether it can draw
it. The oracle verdict never changes the local validation verdict, it is only
reported alongside it. The default oracle runs the milsymbol JavaScript library
using `bun <https://bun.sh>`_, which must be installed separately (along with
`bun add milsymbol`).
"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


import json
import logging
import shutil
import subprocess
from typing import Union, Optional

from milsidc.base import SIDCError
from milsidc.sidc import SIDCType, parse_sidc
from milsidc.taxonomy.validation import TaxonomyValidator, \
    get_default_validator

logger = logging.getLogger(__name__)


class OracleError(SIDCError):
    """Raised when the external renderer is unavailable or misbehaves."""


class RenderResult(object):
    """
    The external renderer response for a single code.
    """

    __slots__ = (
        'sidc', 'is_valid', 'has_visual_representation', 'can_render',
        'svg_length', 'error', 'symbol_set', 'entity')
    _json_keys = {
        'sidc': 'sidc', 'is_valid': 'isValid',
        'has_visual_representation': 'hasVisualRepresentation',
        'can_render': 'canRender', 'svg_length': 'svgLength', 'error': 'error',
        'symbol_set': 'symbolSet', 'entity': 'entity'}

    def __init__(self, sidc, is_valid=False, has_visual_representation=False, can_render=False,
                 svg_length=0, error=None, symbol_set=None, entity=None):
        """

        Parameters
        ----------
        sidc : str
        is_valid : bool
        has_visual_representation : bool
        can_render : bool
        svg_length : int
        error : None|str
        symbol_set : None|str
        entity : None|str
        """

        self.sidc = sidc
        self.is_valid = bool(is_valid)
        self.has_visual_representation = bool(has_visual_representation)
        self.can_render = bool(can_render)
        self.svg_length = int(svg_length)
        self.error = error
        self.symbol_set = symbol_set
        self.entity = entity

    @classmethod
    def from_dict(cls, input_dict):
        """
        Construct from the renderer's json object, with camel case keys.

        Parameters
        ----------
        input_dict : dict

        Returns
        -------
        RenderResult
        """

        if 'sidc' not in input_dict:
            raise KeyError('Renderer response is missing the "sidc" key')
        kwargs = {}
        for attribute, key in cls._json_keys.items():
            if key in input_dict and input_dict[key] is not None:
                kwargs[attribute] = input_dict[key]
        return cls(**kwargs)

    def to_dict(self):
        """
        The json object form, with camel case keys. Unset optional entries are
        omitted.

        Returns
        -------
        dict
        """

        out = {}
        for attribute, key in self._json_keys.items():
            value = getattr(self, attribute)
            if value is not None:
                out[key] = value
        return out

    def __repr__(self):
        return 'RenderResult({})'.format(
            ', '.join('{}={!r}'.format(attribute, getattr(self, attribute)) for attribute in self.__slots__))


class RenderingOracle(object):
    """
    The base class for an external renderer cross check.
    """

    def is_available(self):
        """
        Can this oracle be used in the present environment?

        Returns
        -------
        bool
        """

        raise NotImplementedError

    def render(self, sidc):
        """
        Ask the renderer about the given code.

        Parameters
        ----------
        sidc : SIDCType|str

        Returns
        -------
        RenderResult

        Raises
        ------
        OracleError
        """

        raise NotImplementedError


_MILSYMBOL_SCRIPT = """
const { Symbol } = require('milsymbol');
const sidc = %s;
let result;
try {
    const symbol = new Symbol(sidc);
    const svg = symbol.asSVG();
    let canRenderSVG = false;
    let canRenderCanvas = false;
    try {
        canRenderSVG = typeof symbol.asSVG === 'function' && !!svg && svg.length > 0;
    } catch (e) {
        canRenderSVG = false;
    }
    try {
        canRenderCanvas = typeof symbol.asCanvas === 'function' && symbol.asCanvas() != null;
    } catch (e) {
        canRenderCanvas = false;
    }
    result = {
        sidc: sidc,
        isValid: symbol.isValid(),
        hasVisualRepresentation: canRenderSVG || canRenderCanvas,
        symbolSet: symbol.options ? symbol.options.symbolSet || 'unknown' : 'unknown',
        entity: symbol.options ? symbol.options.entity || 'unknown' : 'unknown',
        canRender: canRenderSVG || canRenderCanvas,
        svgLength: svg ? svg.length : 0
    };
} catch (error) {
    result = {
        sidc: sidc,
        isValid: false,
        error: error.message,
        hasVisualRepresentation: false,
        canRender: false,
        svgLength: 0
    };
}
console.log(JSON.stringify(result));
"""

_MILSYMBOL_PROBE = "const { Symbol } = require('milsymbol'); console.log('OK');"


class MilSymbolOracle(RenderingOracle):
    """
    Cross check using the milsymbol JavaScript library, run by a JavaScript
    runtime (`bun` by default) in a subprocess.
    """

    def __init__(self, executable='bun', timeout=30):
        """

        Parameters
        ----------
        executable : str
            The JavaScript runtime, which must accept `-e <script>`.
        timeout : None|float
            Seconds to wait for each subprocess.
        """

        self.executable = executable
        self.timeout = timeout

    def _run(self, script):
        try:
            completed = subprocess.run(
                [self.executable, '-e', script], stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                timeout=self.timeout, check=False)
        except (OSError, subprocess.SubprocessError) as e:
            raise OracleError('failed to execute {}: {}'.format(self.executable, e)) from e
        if completed.returncode != 0:
            raise OracleError(
                'failed to execute milsymbol validation, exit status {}: {}'.format(
                    completed.returncode, completed.stderr.decode('utf-8', errors='replace').strip()))
        return completed.stdout.decode('utf-8', errors='replace')

    def is_available(self):
        if shutil.which(self.executable) is None:
            logger.info('{} is not available'.format(self.executable))
            return False
        try:
            output = self._run(_MILSYMBOL_PROBE)
        except OracleError as e:
            logger.info('milsymbol package not available - run `bun add milsymbol`: {}'.format(e))
            return False
        return output.strip() == 'OK'

    def render(self, sidc):
        if isinstance(sidc, SIDCType):
            sidc = sidc.to_string()
        # only well formed codes are handed to the renderer
        code = parse_sidc(sidc).to_string()

        output = self._run(_MILSYMBOL_SCRIPT % json.dumps(code))
        lines = [line for line in output.splitlines() if line.strip()]
        if len(lines) == 0:
            raise OracleError('milsymbol produced no output for {}'.format(code))
        try:
            return RenderResult.from_dict(json.loads(lines[-1]))
        except (ValueError, KeyError) as e:
            raise OracleError('failed to parse milsymbol result {!r}: {}'.format(lines[-1], e)) from e


class CrossCheckResult(object):
    """
    The local validation verdict alongside the oracle response.
    """

    __slots__ = ('sidc', 'validation', 'render')

    def __init__(self, sidc, validation, render):
        """

        Parameters
        ----------
        sidc : str
        validation : ValidationResult
        render : RenderResult
        """

        self.sidc = sidc
        self.validation = validation
        self.render = render

    @property
    def agrees(self):
        """
        bool: Do the local verdict and the oracle verdict agree?
        """

        return self.validation.ok == self.render.is_valid

    def __repr__(self):
        return 'CrossCheckResult(sidc={!r}, ok={}, oracle_valid={}, agrees={})'.format(
            self.sidc, self.validation.ok, self.render.is_valid, self.agrees)


def cross_check(sidc, oracle, validator=None):
    # type: (Union[SIDCType, str], RenderingOracle, Optional[TaxonomyValidator]) -> CrossCheckResult
    """
    Validate the code locally, and ask the oracle about it.

    Parameters
    ----------
    sidc : SIDCType|str
    oracle : RenderingOracle
    validator : None|TaxonomyValidator
        The module default is used if not provided.

    Returns
    -------
    CrossCheckResult

    Raises
    ------
    milsidc.base.FormatError
        If text input is not a well formed code.
    OracleError
        If the oracle fails.
    """

    if not isinstance(sidc, SIDCType):
        sidc = parse_sidc(sidc)
    if validator is None:
        validator = get_default_validator()

    result = CrossCheckResult(sidc.to_string(), validator.validate(sidc), oracle.render(sidc))
    if not result.agrees:
        logger.warning(
            'Local validation and oracle disagree for {}: local ok={}, oracle valid={} '
            '(error: {})'.format(result.sidc, result.validation.ok, result.render.is_valid, result.render.error))
    elif result.render.is_valid and not result.render.can_render:
        logger.warning('{} is valid, but the oracle can not render it'.format(result.sidc))
    return result
