# tests/test_hwp5_distdoc.py
import pytest

from hwptext.core.errors import DecryptFailedError
from hwptext.core.processor.hwp5_helper.hwp5_distdoc import (
    MsvcRand,
    decrypt_view_text,
    descramble_dist_data,
    extract_aes_key,
)
from tests.builders import (
    FLAG_COMPRESSED,
    FLAG_DISTRIBUTION,
    TAG_DISTRIBUTE_DOC_DATA,
    build_hwp,
    encrypt_view_text,
    paragraph,
    raw_deflate,
    record,
)

KEY = b"distribution-key"


def _dist_record_payload(stream: bytes) -> bytes:
    return stream[4:4 + 256]


def test_msvc_rand_sequence():
    rand = MsvcRand(1)

    assert [rand.next() for _ in range(3)] == [41, 18467, 6334]


@pytest.mark.parametrize("seed", [0, 0x12345678, 0xDEADBEEF, 0x0000000F])
def test_key_is_recovered_for_any_seed(seed):
    stream = encrypt_view_text(b"x" * 16, seed=seed, key=KEY)

    assert extract_aes_key(_dist_record_payload(stream)) == KEY


def test_descramble_keeps_seed_bytes():
    stream = encrypt_view_text(b"x" * 16, seed=0xCAFEBABE, key=KEY)
    payload = _dist_record_payload(stream)

    assert descramble_dist_data(payload)[:4] == payload[:4]


def test_decrypt_restores_section_data():
    section = raw_deflate(paragraph("Secret text"))
    stream = encrypt_view_text(section, key=KEY)

    decrypted = decrypt_view_text(stream, stream="ViewText/Section0")

    assert decrypted[:len(section)] == section
    assert len(decrypted) % 16 == 0


def test_stream_without_key_record_fails():
    with pytest.raises(DecryptFailedError) as excinfo:
        decrypt_view_text(paragraph("plain"), stream="ViewText/Section0")

    assert excinfo.value.stream == "ViewText/Section0"


def test_empty_stream_fails():
    with pytest.raises(DecryptFailedError):
        decrypt_view_text(b"")


def test_short_key_record_fails():
    with pytest.raises(DecryptFailedError):
        decrypt_view_text(record(TAG_DISTRIBUTE_DOC_DATA, b"\x00" * 100))


def test_truncated_key_record_fails():
    stream = encrypt_view_text(b"x" * 16, key=KEY)

    with pytest.raises(DecryptFailedError):
        decrypt_view_text(stream[:100])


def test_distribution_document_is_extracted(processor):
    sections = [
        encrypt_view_text(raw_deflate(paragraph("First")), seed=7, key=KEY),
        encrypt_view_text(raw_deflate(paragraph("Second")), seed=99, key=KEY),
    ]
    data = build_hwp(sections, flags=FLAG_COMPRESSED | FLAG_DISTRIBUTION, storage="ViewText")

    assert processor.extract_text(data) == "First\n\nSecond"


def test_distribution_flag_without_view_text_reads_body_text(processor):
    data = build_hwp([paragraph("Body")], flags=FLAG_COMPRESSED | FLAG_DISTRIBUTION)

    assert processor.extract_text(data) == "Body"
