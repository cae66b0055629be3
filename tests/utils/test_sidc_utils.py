import pytest

from milsidc.taxonomy.validation import TaxonomyValidator
from milsidc.utils import sidc_utils


def test_dump_string(default_filler_policy):
    text = sidc_utils.dump_sidcs(['SFGPUCII-------'], 'string')
    lines = text.splitlines()
    assert lines[0] == '----- SFGPUCII------- -----'
    assert 'CodingScheme = S (Warfighting)' in lines
    assert 'StandardIdentity = F (Friend)' in lines
    assert 'FunctionID = UCII-- (Infantry fighting vehicle)' in lines
    assert 'Modifier = -----' in lines
    assert 'Description = Warfighting Friend Ground Present: Infantry fighting vehicle' in lines
    assert 'Valid = True' in lines


def test_dump_invalid(default_filler_policy):
    text = sidc_utils.dump_sidcs(['SFGPXXXXXX-----', 'SFGP'], 'string')
    assert 'FunctionID = XXXXXX' in text
    assert 'Valid = False' in text
    assert "FunctionID: 'XXXXXX'" in text
    assert 'Format error: SIDC must be exactly 15 characters, got 4' in text


def test_dump_custom_validator():
    text = sidc_utils.dump_sidcs(
        ['GFGP------12345'], 'string', validator=TaxonomyValidator(filler_schemes=()))
    assert 'Valid = False' in text


def test_dump_file(tmp_path, default_filler_policy):
    out_file = tmp_path / 'out.txt'
    assert sidc_utils.dump_sidcs(['SHAPMFF--------'], str(out_file))
    assert sidc_utils.dump_sidcs(['SUAPMFU---12345'], str(out_file), over_write=False)
    text = out_file.read_text()
    assert 'Fighter' in text
    assert 'Utility' in text

    assert not sidc_utils.dump_sidcs(['SFGPXXXXXX-----'], str(out_file))
    assert 'Fighter' not in out_file.read_text()


def test_read_codes_file(tmp_path):
    codes_file = tmp_path / 'codes.txt'
    codes_file.write_text('# tracks\nSFGPUCII-------\n\n  SHAPMFF--------  \n')
    assert sidc_utils.read_codes_file(str(codes_file)) == ['SFGPUCII-------', 'SHAPMFF--------']


def test_main(tmp_path, default_filler_policy):
    out_file = str(tmp_path / 'out.txt')
    assert sidc_utils.main(['SFGPUCII-------', '-o', out_file, '--strict']) == 0
    assert sidc_utils.main(['SFGPXXXXXX-----', '-o', out_file]) == 0
    assert sidc_utils.main(['SFGPXXXXXX-----', '-o', out_file, '--strict']) == 1
    assert sidc_utils.main(['SFGP', '-o', out_file, '--strict']) == 1


def test_main_file(tmp_path, default_filler_policy):
    codes_file = tmp_path / 'codes.txt'
    codes_file.write_text('SFGPUCII-------\nEUUP------12345\n')
    out_file = str(tmp_path / 'out.txt')
    assert sidc_utils.main(['-f', str(codes_file), '-o', out_file, '--strict']) == 0
    assert sidc_utils.main(
        ['-f', str(codes_file), '-o', out_file, '--strict', '--no-filler', 'E']) == 1


def test_main_stdout(capsys, default_filler_policy):
    assert sidc_utils.main(['SHAPMFF--------']) == 0
    assert 'Fighter' in capsys.readouterr().out


def test_main_no_codes():
    with pytest.raises(SystemExit):
        sidc_utils.main([])


def test_main_rejects_string_output(capsys):
    with pytest.raises(SystemExit) as info:
        sidc_utils.main(['SFGPXXXXXX-----', '-o', 'string', '--strict'])
    assert info.value.code == 2
    assert "'string'" in capsys.readouterr().err
