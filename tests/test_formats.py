import chardet
import pytest

from pyinireader import (
    IniError,
    IniFileHandler,
    IniReader,
    IniStore,
    IniYamlHandler,
    InvalidYamlDocument
)
from pyinireader.ini import IniOptions

UNICODE_INI = '[说明]\nname = 配置文件读取器测试\n'


def test_file_handler_keeps_carriage_returns(tmp_path):
    path = tmp_path / 'crlf.ini'
    path.write_bytes(b'[s]\r\nk=v\r\n')
    text = IniFileHandler(path).read()
    assert text == '[s]\r\nk=v\r\n'


def test_file_handler_guesses_encoding(tmp_path):
    path = tmp_path / 'utf8.ini'
    path.write_bytes(UNICODE_INI.encode('utf-8'))
    # ascii fails, then chardet finds utf-8.
    assert IniFileHandler(path, 'ascii').read() == UNICODE_INI


def test_file_handler_write(tmp_path):
    path = tmp_path / 'out.ini'
    IniFileHandler(path).write('[s]\nk = v\n')
    assert path.read_bytes() == b'[s]\nk = v\n'


def test_reader_uses_configured_encoding(tmp_path):
    path = tmp_path / 'gbk.ini'
    path.write_bytes(UNICODE_INI.encode('gbk'))
    reader = IniReader(path, options=IniOptions(encoding='gbk'))
    assert reader.get('说明', 'name') == '配置文件读取器测试'


def test_yaml_round_trip(tmp_path):
    reader = IniReader()
    reader.set('servers', 'server', 'alpha')
    reader.set('servers', 'server', 'beta')
    reader.set('other', 'port', '80')

    path = tmp_path / 'store.yaml'
    IniYamlHandler(path).write(reader.store)
    store = IniYamlHandler(path).read()
    assert list(store) == ['servers', 'other']
    assert store == reader.store


def test_yaml_values_become_strings(tmp_path):
    path = tmp_path / 'typed.yaml'
    path.write_text('s:\n- [port, 80]\n- [flag, true]\n- [empty, null]\n',
                    encoding='utf-8')
    store = IniYamlHandler(path).read()
    assert list(store['s']) == [
        ('port', '80'), ('flag', 'True'), ('empty', '')]


def test_yaml_empty_document(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('', encoding='utf-8')
    assert IniYamlHandler(path).read() == IniStore()


def test_decode_gbk_bytes():
    text = UNICODE_INI * 8
    assert IniFileHandler.decode(text.encode('gbk')) == text


def test_decode_low_confidence_falls_back_to_utf8(monkeypatch):
    monkeypatch.setattr(
        chardet, 'detect',
        lambda raw: {'encoding': 'ISO-8859-1', 'confidence': 0.3})
    assert IniFileHandler.decode(UNICODE_INI.encode('utf-8')) == UNICODE_INI


def test_decode_unknown_encoding_falls_back_to_utf8(monkeypatch):
    monkeypatch.setattr(
        chardet, 'detect', lambda raw: {'encoding': None, 'confidence': 0.0})
    assert IniFileHandler.decode(UNICODE_INI.encode('utf-8')) == UNICODE_INI


def test_decode_falls_back_to_gbk(monkeypatch):
    # a confident but wrong guess fails, and gbk is the last resort.
    monkeypatch.setattr(
        chardet, 'detect', lambda raw: {'encoding': 'utf-8', 'confidence': 1})
    assert IniFileHandler.decode(UNICODE_INI.encode('gbk')) == UNICODE_INI


@pytest.mark.parametrize('document', [
    '- [a, b]\n',
    's: [a, b]\n',
    's:\n- [a, b, c]\n',
    's:\n- a\n',
    's:\n  key: value\n',
])
def test_yaml_malformed_documents(tmp_path, document):
    path = tmp_path / 'bad.yaml'
    path.write_text(document, encoding='utf-8')
    with pytest.raises(InvalidYamlDocument):
        IniYamlHandler(path).read()


def test_yaml_malformed_document_is_an_ini_error(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text('s:\n- [a, b, c]\n', encoding='utf-8')
    with pytest.raises(IniError, match='not a \\[key, value\\] pair'):
        IniReader().read_yaml(path)


def test_yaml_section_without_items(tmp_path):
    path = tmp_path / 'empty_section.yaml'
    path.write_text('s:\n', encoding='utf-8')
    assert len(IniYamlHandler(path).read()['s']) == 0
