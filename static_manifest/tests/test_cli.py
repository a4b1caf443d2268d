import pathlib

import pytest

from ..__main__ import main


@pytest.fixture
def assets(tmp_path: pathlib.Path) -> pathlib.Path:
    assets = tmp_path / 'assets'
    (assets / 'vendor').mkdir(parents=True)
    (assets / 'root.css').write_bytes(b'root file')
    (assets / 'vendor' / 'script.js').write_bytes(b'nested file')
    return assets


def test_cli__help(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as err_info:
        main(['--help'])
    assert err_info.value.code == 0
    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) > 1


def test_cli__generate(assets: pathlib.Path, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    destination = tmp_path / 'static_files.py'
    extra = tmp_path / 'favicon.png'
    extra.write_bytes(b'png')

    exit_code = main([
        'generate', str(destination),
        '--asset-dir', str(assets),
        '--extra-file', str(extra),
    ])

    assert exit_code == 0
    assert f'Writing static manifest to {destination}' in capsys.readouterr().out
    generated = destination.read_text()
    assert 'STATICS: tuple[StaticFile, ...] = (\n    root_css,\n    favicon_png,\n    vendor.script_js,\n)\n' in generated


def test_cli__generate_rust(assets: pathlib.Path, tmp_path: pathlib.Path) -> None:
    destination = tmp_path / 'static_gen.rs'
    exit_code = main([
        'generate', str(destination),
        '--asset-dir', str(assets),
        '--format', 'rust',
        '--url-prefix', '/assets',
        '--hash-length', '8',
    ])
    assert exit_code == 0
    generated = destination.read_text()
    assert '&vendor::script_js' in generated
    assert '"/assets/vendor/script-' in generated


def test_cli__generate_failure(tmp_path: pathlib.Path) -> None:
    destination = tmp_path / 'static_files.py'
    exit_code = main(['generate', str(destination), '--extra-file', str(tmp_path / 'missing.css')])
    assert exit_code == 1
    assert not destination.exists()


def test_cli__generate_invalid_asset(assets: pathlib.Path, tmp_path: pathlib.Path) -> None:
    (assets / 'README').write_text('no extension')
    destination = tmp_path / 'static_files.py'
    assert main(['generate', str(destination), '--asset-dir', str(assets)]) == 1
    assert main(['generate', str(destination), '--asset-dir', str(assets), '--ignore', 'README']) == 0


def test_cli__export(assets: pathlib.Path, tmp_path: pathlib.Path) -> None:
    target = tmp_path / 'static'
    assert main(['export', str(target), '--asset-dir', str(assets)]) == 0

    created_files = [
        path for path in target.glob('**/*') if path.is_file() and not path.name.startswith('.')
    ]
    assert len(created_files) == 2
    assert (target / '.manifest.json').exists()
