import pathlib

import strongpass

PYPROJECT = pathlib.Path(__file__).parent.parent / "pyproject.toml"


def test_version_comes_from_package():
    text = PYPROJECT.read_text(encoding="utf-8")
    assert 'dynamic = ["version"]' in text
    assert 'version = {attr = "strongpass.version"}' in text
    assert f'version = "{strongpass.version}"' not in text
