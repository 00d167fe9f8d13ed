import json

import pytest
from botocore.exceptions import ClientError

from address_encoder import lambda_function


@pytest.fixture(autouse=True)
def codec(toy_codec, monkeypatch):
    monkeypatch.setattr(lambda_function, '_codec', toy_codec)
    return toy_codec


def _invoke(event):
    response = lambda_function.lambda_handler(event, None)
    return response['statusCode'], json.loads(response['body'])


def test_encode_from_json_body(codec):
    status, body = _invoke({'body': json.dumps({'lat': 1.5, 'lon': 2.5})})

    assert status == 200
    assert body['words'] == codec.encode(1.5, 2.5)
    assert body['display'] == body['words'].replace('.', ' ')
    assert body['center'] == {'lat': 5.625, 'lon': 5.625}
    assert body['bounds'] == {'south': 0.0, 'west': 0.0, 'north': 11.25, 'east': 11.25}
    assert body['format_version'] == 'v1'


def test_encode_from_query_string(codec):
    status, body = _invoke({'queryStringParameters': {'lat': '-90', 'lon': '-180'}})
    assert status == 200
    assert body['words'] == 'cat.gnu.elk'


def test_encode_from_coordinate_string(codec):
    status, body = _invoke({'body': {'coordinates': '-89, -179'}})
    assert status == 200
    assert body['words'] == 'cat.gnu.elk'


def test_response_headers():
    response = lambda_function.lambda_handler({'body': {'lat': 0, 'lon': 0}}, None)
    assert response['headers']['Content-Type'] == 'application/json'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'


@pytest.mark.parametrize("event", [
    {'body': json.dumps({'lat': 90.0001, 'lon': 0})},
    {'body': json.dumps({'lat': 10})},
    {'body': json.dumps({'lat': 'north', 'lon': 0})},
    {'body': json.dumps({'lat': True, 'lon': 0})},
    {'body': json.dumps({'lat': 'nan', 'lon': 0})},
    {'body': json.dumps({'coordinates': '95, 0'})},
    {'body': '{not json'},
    {'body': json.dumps([1, 2])},
    {},
])
def test_bad_requests(event):
    status, body = _invoke(event)
    assert status == 400
    assert body['error']


def test_dictionary_load_failure(monkeypatch):
    def fail():
        raise ClientError({'Error': {'Code': 'NoSuchKey', 'Message': 'missing'}}, 'GetObject')

    monkeypatch.setattr(lambda_function, '_codec', None)
    monkeypatch.setattr(lambda_function, 'load_codec_from_env', fail)

    status, body = _invoke({'body': json.dumps({'lat': 0, 'lon': 0})})
    assert status == 500
    assert body['error'] == 'Failed to load dictionary'


def test_codec_is_built_once(monkeypatch, toy_codec):
    calls = []

    def build():
        calls.append(1)
        return toy_codec

    monkeypatch.setattr(lambda_function, '_codec', None)
    monkeypatch.setattr(lambda_function, 'load_codec_from_env', build)

    _invoke({'body': {'lat': 0, 'lon': 0}})
    _invoke({'body': {'lat': 1, 'lon': 1}})
    assert len(calls) == 1


@pytest.fixture
def unloaded(monkeypatch):
    monkeypatch.setattr(lambda_function, '_codec', None)
    for key in ('DICTIONARY_BUCKET', 'DICTIONARY_PATH', 'DICTIONARY_SIZE'):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_non_numeric_dictionary_size_is_server_error(unloaded):
    unloaded.setenv('DICTIONARY_SIZE', 'abc')

    status, body = _invoke({'body': json.dumps({'lat': 0, 'lon': 0})})
    assert status == 500
    assert body['error'] == 'Failed to load dictionary'


def test_too_small_dictionary_file_is_server_error(unloaded, tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('ant\nbee\ncat\n', encoding='utf-8')
    unloaded.setenv('DICTIONARY_PATH', str(path))

    status, body = _invoke({'body': json.dumps({'lat': 0, 'lon': 0})})
    assert status == 500
    assert body['error'] == 'Failed to load dictionary'
    assert lambda_function._codec is None
