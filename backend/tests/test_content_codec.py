import pytest

from sealnote.utils.content_codec import ContentDecodeError, decode_content, encode_content


@pytest.mark.parametrize("text", ["", "hello", "héllo 世界", "emoji 🎉 and\nnewlines\t", "a|b|c"])
def test_decode_inverts_encode(text):
    assert decode_content(encode_content(text)) == text


def test_ascii_encoding_is_plain_base64():
    assert encode_content("hello") == "aGVsbG8="
    assert encode_content("héllo 世界") == "aMOpbGxvIOS4lueVjA=="


def test_encoded_form_is_ascii():
    assert encode_content("日本語のメモ").isascii()


@pytest.mark.parametrize("stored", ["not base64!", "aGVsbG8", "//79", "ünïcode", None])
def test_invalid_stored_content_is_rejected(stored):
    # "//79" decodes to bytes that are not valid UTF-8
    with pytest.raises(ContentDecodeError):
        decode_content(stored)
