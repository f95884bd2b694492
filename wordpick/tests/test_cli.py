import logging

import pytest

from .. import main, pool

WORDS = ['apple', 'banana', 'cherry', 'dog', 'elephant', 'fig', 'grape',
         'Apple', 'x', 'kiwi7', 'lemon', 'mango', 'nut', 'olive']


@pytest.fixture(autouse=True)
def restore_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / 'words'
    path.write_text('\n'.join(WORDS) + '\n')
    return str(path)


def _output_words(capsys):
    out = capsys.readouterr().out
    assert out.startswith('\n')
    assert out.endswith('\n\n')
    return out.split()


def test_simulated_run(dictionary, capsys):
    assert main(['25', '8', '3', dictionary, '--simulate', '1']) == 0
    words = _output_words(capsys)
    assert len(words) == 25
    expected = {w.lower() for w in WORDS if w.isalpha() and 3 <= len(w) <= 8}
    assert set(words) <= expected


def test_deterministic_with_seed(dictionary, capsys):
    for simple in ([], ['--simple']):
        assert main(['30', '8', '3', dictionary, '--simulate', '9'] + simple) == 0
        first = _output_words(capsys)
        assert main(['30', '8', '3', dictionary, '--simulate', '9'] + simple) == 0
        assert _output_words(capsys) == first


def test_simple_mode_walks_shuffled_pool(dictionary, capsys):
    assert main(['24', '8', '3', dictionary, '--simulate', '3', '--simple']) == 0
    words = _output_words(capsys)
    pool_size = 11
    assert len(set(words[:pool_size])) == pool_size
    assert words[pool_size:2 * pool_size] == words[:pool_size]


def test_swapped_bounds(dictionary, capsys, caplog):
    with caplog.at_level(logging.WARNING):
        assert main(['40', '3', '8', dictionary, '--simulate', '2']) == 0
    assert 'Swapping' in caplog.text
    assert 'Recovered 11 words of length 3-8' in caplog.text
    words = _output_words(capsys)
    assert all(3 <= len(w) <= 8 for w in words)


def test_device_source(dictionary, tmp_path, capsys):
    source = tmp_path / 'random'
    source.write_bytes(bytes(range(256)))
    assert main(['10', '8', '3', dictionary, '--source', str(source)]) == 0
    assert len(_output_words(capsys)) == 10


def test_source_from_environment(dictionary, tmp_path, capsys, monkeypatch):
    source = tmp_path / 'random'
    source.write_bytes(bytes(range(256)))
    monkeypatch.setenv('WORDPICK_SOURCE', str(source))
    assert main(['5', '8', '3', dictionary]) == 0
    assert len(_output_words(capsys)) == 5


def test_exhausted_source(dictionary, tmp_path, capsys, caplog):
    source = tmp_path / 'random'
    source.write_bytes(b'\x00' * 12)
    assert main(['10', '8', '3', dictionary, '--source', str(source)]) == 1
    assert capsys.readouterr().out == ''
    assert 'supplied 0 of 1 requested bytes' in caplog.text


def test_unavailable_source(dictionary, tmp_path, capsys):
    missing = str(tmp_path / 'missing')
    assert main(['10', '8', '3', dictionary, '--source', missing]) == 1
    assert capsys.readouterr().out == ''


def test_no_dictionary(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(pool, 'DEFAULT_DICTIONARIES', (str(tmp_path / 'none'),))
    assert main(['10', '--simulate', '1']) == 1
    assert 'Failed to locate a dictionary' in caplog.text


def test_empty_pool(dictionary, caplog):
    assert main(['10', '20', '15', dictionary, '--simulate', '1']) == 1
    assert 'Failed to find any words of length 15-20' in caplog.text


def test_invalid_count():
    with pytest.raises(SystemExit):
        main(['0'])
