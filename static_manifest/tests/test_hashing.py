import hashlib
import pathlib

import pytest

from ..hashing import check_algorithm, file_digest


def test_file_digest__md5(tmp_path: pathlib.Path) -> None:
    path = tmp_path / 'root.css'
    path.write_bytes(b'root file')
    assert file_digest(path) == hashlib.md5(b'root file').hexdigest()


def test_file_digest__same_content_same_digest(tmp_path: pathlib.Path) -> None:
    first = tmp_path / 'a.js'
    (tmp_path / 'nested').mkdir()
    second = tmp_path / 'nested' / 'b.css'
    first.write_bytes(b'identical')
    second.write_bytes(b'identical')
    assert file_digest(first) == file_digest(second)


def test_file_digest__single_byte_difference(tmp_path: pathlib.Path) -> None:
    first = tmp_path / 'a.js'
    second = tmp_path / 'b.js'
    first.write_bytes(b'content-a')
    second.write_bytes(b'content-b')
    assert file_digest(first) != file_digest(second)


def test_file_digest__larger_than_one_chunk(tmp_path: pathlib.Path) -> None:
    content = bytes(range(256)) * 1024
    path = tmp_path / 'big.wasm'
    path.write_bytes(content)
    assert file_digest(path) == hashlib.md5(content).hexdigest()


def test_file_digest__truncated_sha256(tmp_path: pathlib.Path) -> None:
    path = tmp_path / 'app.js'
    path.write_bytes(b'console.log(1)')
    digest = file_digest(path, algorithm='sha256', length=12)
    assert digest == hashlib.sha256(b'console.log(1)').hexdigest()[:12]


def test_file_digest__missing_file(tmp_path: pathlib.Path) -> None:
    with pytest.raises(FileNotFoundError):
        file_digest(tmp_path / 'missing.css')


@pytest.mark.parametrize('algorithm', ['not-a-hash', 'shake_128'])
def test_check_algorithm__unsupported(algorithm: str) -> None:
    with pytest.raises(ValueError, match='Unsupported hash algorithm'):
        check_algorithm(algorithm)
