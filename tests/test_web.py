"""
Tests for the morsewave HTTP API
"""

import base64
import io

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from morsewave.web import create_app


@pytest.fixture
def client():
    app = create_app({'TESTING': True})
    return app.test_client()


class TestTextEndpoints:
    """Tests for text <-> Morse endpoints."""

    def test_text_to_morse(self, client):
        resp = client.post('/api/morse', json={'text': 'sos'})
        data = resp.get_json()

        assert resp.status_code == 200
        assert data['success'] is True
        assert data['morse'] == '... --- ...'
        assert data['duration'] > 0

    def test_text_to_morse_unsupported(self, client):
        resp = client.post('/api/morse', json={'text': 'hi!'})
        assert resp.status_code == 400
        assert resp.get_json()['success'] is False

    def test_morse_to_text_drops_junk(self, client):
        resp = client.post('/api/text', json={'morse': '.. xyz .-'})
        assert resp.get_json()['text'] == 'IA'

    def test_missing_field(self, client):
        assert client.post('/api/text', json={}).status_code == 400
        assert client.post('/api/morse', json={}).status_code == 400

    def test_alphabet(self, client):
        alphabet = client.get('/api/alphabet').get_json()['alphabet']
        assert alphabet['A'] == '.-'
        assert len(alphabet) == 39


class TestAudioEndpoints:
    """Tests for audio encode/decode endpoints."""

    def test_encode_returns_wav(self, client):
        resp = client.post('/api/encode', json={'text': 'E'})
        data = resp.get_json()

        assert resp.status_code == 200
        assert data['morse'] == '.'
        assert data['audio_format'] == 'wav'
        assert base64.b64decode(data['audio'])[:4] == b'RIFF'

    def test_encode_unsupported_bits(self, client):
        resp = client.post('/api/encode', json={'text': 'E', 'bits': 24})
        assert resp.status_code == 400

    @pytest.mark.parametrize('bits', [None, [8], 'eight'])
    def test_encode_malformed_bits(self, client, bits):
        resp = client.post('/api/encode', json={'text': 'E', 'bits': bits})
        assert resp.status_code == 400
        assert resp.get_json()['success'] is False

    def test_encode_non_object_body(self, client):
        resp = client.post('/api/encode', json=['E'])
        assert resp.status_code == 400

    def test_roundtrip_json(self, client):
        encoded = client.post('/api/encode', json={'text': 'Hello World', 'bits': 8}).get_json()
        resp = client.post('/api/decode', json={'audio': encoded['audio'], 'bits': 8})
        data = resp.get_json()

        assert resp.status_code == 200
        assert data['text'] == 'HELLO WORLD'
        assert data['morse'] == encoded['morse']

    def test_roundtrip_upload(self, client):
        encoded = client.post('/api/encode', json={'text': 'SOS'}).get_json()
        wav_bytes = base64.b64decode(encoded['audio'])

        resp = client.post(
            '/api/decode',
            data={'audio': (io.BytesIO(wav_bytes), 'sos.wav')},
            content_type='multipart/form-data'
        )
        assert resp.get_json()['text'] == 'SOS'

    def test_decode_width_mismatch(self, client):
        encoded = client.post('/api/encode', json={'text': 'E', 'bits': 8}).get_json()
        resp = client.post('/api/decode', json={'audio': encoded['audio']})
        assert resp.status_code == 400
        assert 'sample width' in resp.get_json()['error']

    def test_decode_invalid_base64(self, client):
        resp = client.post('/api/decode', json={'audio': '***'})
        assert resp.status_code == 400

    def test_decode_non_string_audio(self, client):
        resp = client.post('/api/decode', json={'audio': 12345})
        assert resp.status_code == 400
        assert resp.get_json()['success'] is False

    def test_decode_not_wav(self, client):
        audio = base64.b64encode(b'definitely not audio').decode('ascii')
        resp = client.post('/api/decode', json={'audio': audio})
        assert resp.status_code == 400
