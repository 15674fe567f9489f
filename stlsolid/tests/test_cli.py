import pytest

from stlsolid.__main__ import main
from stlsolid._version import __version__
from stlsolid.tests.stlutil import TRIANGLE, TRIANGLE_ASCII, pack_binary


@pytest.fixture
def stlfiles(tmp_path):
    apath = tmp_path / 'tri-ascii.stl'
    apath.write_text(TRIANGLE_ASCII)

    bpath = tmp_path / 'tri-binary.stl'
    bpath.write_bytes(pack_binary([TRIANGLE]*2))

    return apath, bpath


def _rows(out, sep='\t'):
    return [l.split(sep) for l in out.splitlines()]


def test_info_ascii(stlfiles, capsys):
    main(['info', str(stlfiles[0])])
    rows = _rows(capsys.readouterr().out)

    assert rows == [
        ['format', 'ascii'],
        ['name', 't'],
        ['facets', '1'],
        ['min', '0', '0', '0'],
        ['max', '1', '1', '0'],
        ['size', f'{len(TRIANGLE_ASCII)} B']
    ]


def test_info_binary(stlfiles, capsys):
    main(['info', '-s', ',', str(stlfiles[1])])
    rows = dict((r[0], r[1:]) for r in _rows(capsys.readouterr().out, ','))

    assert rows['format'] == ['binary']
    assert rows['name'] == ['']
    assert rows['facets'] == ['2']
    assert rows['size'] == ['184 B']


def test_info_forced_format(stlfiles, tmp_path, capsys):
    cfgpath = tmp_path / 'reader.ini'
    cfgpath.write_text('[reader]\nformat = binary\n')

    main(['-c', str(cfgpath), 'info', str(stlfiles[1])])
    rows = _rows(capsys.readouterr().out)

    assert rows[0] == ['format', 'binary']


def test_dump(stlfiles, capsys):
    main(['dump', str(stlfiles[0])])
    rows = _rows(capsys.readouterr().out)

    assert rows[0][:4] == ['facet', 'nx', 'ny', 'nz']
    assert len(rows[0]) == 13
    assert rows[1] == ['0', '0', '0', '1', '0', '0', '0', '1', '0', '0',
                       '0', '1', '0']
    assert len(rows) == 2


def test_error_exit(tmp_path, capsys):
    path = tmp_path / 'bad.stl'
    path.write_bytes(pack_binary([TRIANGLE], count=3))

    with pytest.raises(SystemExit) as excinfo:
        main(['info', str(path)])

    assert excinfo.value.code == 1
    assert 'stlsolid: error: Truncated input' in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['-V'])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_progress(stlfiles, capsys):
    main(['-p', 'dump', str(stlfiles[1])])

    assert 'Reading STL' in capsys.readouterr().err


def test_invalid_format_exit(stlfiles, tmp_path, capsys):
    cfgpath = tmp_path / 'reader.ini'
    cfgpath.write_text('[reader]\nformat = obj\n')

    with pytest.raises(SystemExit) as excinfo:
        main(['-c', str(cfgpath), 'info', str(stlfiles[0])])

    assert excinfo.value.code == 1
    assert 'stlsolid: error: Invalid STL format "obj"' in \
        capsys.readouterr().err
