import pathlib

import pytest

from .. import naming
from ..errors import InvalidAssetPath


@pytest.mark.parametrize(
    ["rel_path", "expected"],
    [
        ("", ""),
        (".", ""),
        ("vendor", "vendor"),
        ("vendor/js-lib", "vendor/js_lib"),
        ("vendor\\js-lib\\v1.2", "vendor/js_lib/v1_2"),
        (pathlib.PurePosixPath("a.b/c-d"), "a_b/c_d"),
    ],
)
def test_module_path(rel_path, expected: str) -> None:
    assert naming.module_path(rel_path) == expected


def test_namespace_segments() -> None:
    assert naming.namespace_segments("vendor/js-lib") == ("vendor", "js_lib")
    assert naming.namespace_segments(pathlib.PurePath(".")) == ()


def test_scope_name__uses_last_component() -> None:
    assert naming.scope_name("vendor/js-lib") == "js_lib"
    assert naming.scope_name("") == ""


@pytest.mark.parametrize(
    ["file_name", "expected"],
    [
        ("root.css", "root_css"),
        ("script.min.js", "script_min_js"),
        ("my-logo.svg", "my_logo_svg"),
    ],
)
def test_identifier_for(file_name: str, expected: str) -> None:
    assert naming.identifier_for(file_name) == expected


def test_qualify() -> None:
    assert naming.qualify((), "root_css", "::") == "root_css"
    assert naming.qualify(("vendor",), "script_js", "::") == "vendor::script_js"
    assert naming.qualify(("vendor", "", "js_lib"), "app_js", ".") == "vendor.js_lib.app_js"


def test_check_identifier() -> None:
    path = pathlib.Path("assets/root.css")
    assert naming.check_identifier("root_css", path) == "root_css"
    with pytest.raises(InvalidAssetPath, match="not a valid identifier"):
        naming.check_identifier("1_png", pathlib.Path("assets/1.png"))
    with pytest.raises(InvalidAssetPath):
        naming.check_identifier("my icon_png", pathlib.Path("assets/my icon.png"))
