"""
Flask routes for morsewave
"""

from flask import Blueprint, request, jsonify
import base64
import binascii

from ..morse import (
    MorseEncoder, MorseDecoder, MorseTranscoder, ToneRenderer,
    MorseError, SampleWidth
)
from ..morse.alphabet import MORSE_CODE

api_bp = Blueprint('api', __name__)

_transcoder = MorseTranscoder()


def _error(message: str, status: int = 400):
    return jsonify({'success': False, 'error': message}), status


def _sample_width(data) -> SampleWidth:
    bits = (data or {}).get('bits', SampleWidth.INT16.value)
    return SampleWidth.from_bits(bits)


def _json_body():
    """Request JSON if it is an object, else None."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@api_bp.route('/encode', methods=['POST'])
def encode_message():
    """
    Encode text to Morse audio.

    Request JSON:
        text: str - text to encode (A-Z, 0-9, '.', ',', '?', space)
        bits: int - sample width, 8/16/32 (optional, default 16)

    Returns:
        JSON with Morse string, duration and base64 WAV audio
    """
    data = _json_body()
    if not data or 'text' not in data:
        return _error('No text provided')

    try:
        sample_width = _sample_width(data)
        encoder = MorseEncoder(sample_width)
        morse = encoder.to_morse(str(data['text']))
        audio = encoder.codec.render(morse)
        wav_bytes = encoder.to_bytes(audio)

        return jsonify({
            'success': True,
            'morse': morse,
            'duration': len(audio) / encoder.sample_rate,
            'bits': sample_width.value,
            'audio': base64.b64encode(wav_bytes).decode('utf-8'),
            'audio_format': 'wav'
        })

    except MorseError as e:
        return _error(str(e))


@api_bp.route('/decode', methods=['POST'])
def decode_message():
    """
    Decode Morse audio to text.

    Accepts:
        - File upload (multipart/form-data with 'audio' field, optional 'bits')
        - JSON with base64 'audio' and optional 'bits'

    Returns:
        JSON with detected Morse string and decoded text
    """
    try:
        if request.content_type and 'multipart/form-data' in request.content_type:
            if 'audio' not in request.files:
                return _error('No audio file provided')
            audio_bytes = request.files['audio'].read()
            sample_width = _sample_width(request.form)
        else:
            data = _json_body()
            if not data or 'audio' not in data:
                return _error('No audio provided')
            if not isinstance(data['audio'], str):
                return _error('Audio must be a base64 string')
            audio_bytes = base64.b64decode(data['audio'], validate=True)
            sample_width = _sample_width(data)

        decoder = MorseDecoder(sample_width)
        samples, sample_rate = decoder.container.from_bytes(audio_bytes)
        morse = decoder.to_morse(samples, sample_rate)

        return jsonify({
            'success': True,
            'morse': morse,
            'text': decoder.transcoder.decode(morse)
        })

    except binascii.Error:
        return _error('Audio is not valid base64')
    except MorseError as e:
        return _error(str(e))


@api_bp.route('/morse', methods=['POST'])
def text_to_morse():
    """Translate text to a Morse string (no audio)."""
    data = _json_body()
    if not data or 'text' not in data:
        return _error('No text provided')

    try:
        morse = _transcoder.encode(str(data['text']))
    except MorseError as e:
        return _error(str(e))

    return jsonify({
        'success': True,
        'morse': morse,
        'duration': ToneRenderer().duration(morse)
    })


@api_bp.route('/text', methods=['POST'])
def morse_to_text():
    """Translate a Morse string to text. Unknown tokens are dropped."""
    data = _json_body()
    if not data or 'morse' not in data:
        return _error('No Morse provided')

    return jsonify({
        'success': True,
        'text': _transcoder.decode(str(data['morse']))
    })


@api_bp.route('/alphabet', methods=['GET'])
def get_alphabet():
    """Get the supported characters and their Morse patterns."""
    return jsonify({
        'alphabet': {char: pattern for char, pattern in MORSE_CODE.items() if char != ' '}
    })
