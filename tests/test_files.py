import pytest
from bitarray import bitarray

from huffman_coding.cli import main
from huffman_coding.files import read_bit_string, write_bit_string, write_decoded


def test_bit_string_file_roundtrip(tmp_path):
    path = tmp_path / 'bits.huf'
    assert write_bit_string(str(path), '1011001')
    assert path.read_bytes() == b'\xd9'
    assert read_bit_string(str(path)) == bitarray('1011001')


def test_write_invalid_bits_writes_nothing(tmp_path, capsys):
    path = tmp_path / 'bits.huf'
    assert not write_bit_string(str(path), '10x1')
    assert not path.exists()
    assert 'invalid characters' in capsys.readouterr().err


def test_write_error_reported(tmp_path, capsys):
    assert not write_bit_string(str(tmp_path / 'missing' / 'bits.huf'), '1')
    assert not write_decoded(str(tmp_path / 'missing' / 'out.txt'), b'x')
    assert 'Error when writing' in capsys.readouterr().err


def test_read_error_reported(tmp_path, capsys):
    assert read_bit_string(str(tmp_path / 'missing.huf')) == bitarray()
    assert 'Error while reading' in capsys.readouterr().err


def test_cli_roundtrip(tmp_path, capsys):
    source = tmp_path / 'input.txt'
    source.write_bytes(b'to be or not to be\n')
    main([str(source), '--show-codes'])
    assert (tmp_path / 'input.txt.decoded').read_bytes() == b'to be or not to be\n'
    assert len((tmp_path / 'input.txt.huf').read_bytes()) < 19
    out = capsys.readouterr().out
    assert "'o'" in out
    assert 'decoded into' in out


def test_cli_custom_outputs(tmp_path):
    source = tmp_path / 'input.txt'
    source.write_bytes(b'zzz')
    main([str(source), '-o', str(tmp_path / 'z.bin'), '-d', str(tmp_path / 'z.txt')])
    assert (tmp_path / 'z.bin').read_bytes() == b'\x0f'
    assert (tmp_path / 'z.txt').read_bytes() == b'zzz'


@pytest.mark.parametrize('content', [b'', 'café'.encode()])
def test_cli_errors_exit(tmp_path, capsys, content):
    source = tmp_path / 'input.txt'
    source.write_bytes(content)
    with pytest.raises(SystemExit) as excinfo:
        main([str(source)])
    assert excinfo.value.code == -1
    assert capsys.readouterr().err


def test_cli_wide_alphabet(tmp_path):
    source = tmp_path / 'input.txt'
    source.write_bytes('café'.encode())
    main([str(source), '--alphabet-size', '256'])
    assert (tmp_path / 'input.txt.decoded').read_bytes() == 'café'.encode()


def test_read_empty_file_reported(tmp_path, capsys):
    path = tmp_path / 'empty.huf'
    path.write_bytes(b'')
    assert read_bit_string(str(path)) == bitarray()
    assert 'file is empty' in capsys.readouterr().err
