"""Tests for source to target mappings"""

import logging

import pytest

from magento_deploy.api.exceptions import ConfigError
from magento_deploy.core.mapping import Mapping, load_mappings, parse_modman
from magento_deploy.models.package import Package

from .conftest import write_files


def test_parse_modman() -> None:
    content = """
# Acme_Foo
app/code/local/Acme/Foo     app/code/local/Acme/Foo
app/etc/modules/Acme_Foo.xml  app/etc/modules/
skin
"""
    assert parse_modman(content) == [
        Mapping("app/code/local/Acme/Foo", "app/code/local/Acme/Foo"),
        Mapping("app/etc/modules/Acme_Foo.xml", "app/etc/modules/Acme_Foo.xml"),
        Mapping("skin", "skin"),
    ]


def test_parse_modman_skips_directives(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        mappings = parse_modman("@import modules/Other\njs js")

    assert mappings == [Mapping("js", "js")]
    assert "@import" in caplog.text


@pytest.mark.parametrize("line", [
    "a b c",
    "/etc/passwd app/etc",
    "code ../outside",
])
def test_parse_modman_rejects_invalid_lines(line) -> None:
    with pytest.raises(ConfigError):
        parse_modman(line)


def test_extra_map_takes_precedence(tmp_path) -> None:
    write_files(tmp_path, {"modman": "js js", "src/Foo.php": "<?php"})
    package = Package(name="acme/foo", type="magento-module",
                      extra={"map": [["src", "lib/Acme"]]})

    assert load_mappings(package, tmp_path) == [Mapping("src", "lib/Acme")]


def test_invalid_extra_map_raises(tmp_path) -> None:
    package = Package(name="acme/foo", type="magento-module", extra={"map": [["only-one"]]})

    with pytest.raises(ConfigError):
        load_mappings(package, tmp_path)


def test_modman_file_used_without_extra_map(tmp_path) -> None:
    write_files(tmp_path, {"modman": "code app/code/community/Acme", "code/Foo.php": "<?php"})
    package = Package(name="acme/foo", type="magento-module")

    assert load_mappings(package, tmp_path) == [Mapping("code", "app/code/community/Acme")]


def test_default_mapping_lists_top_level_entries(tmp_path) -> None:
    write_files(tmp_path, {
        "app/Mage.php": "<?php",
        "index.php": "<?php",
        "composer.json": "{}",
        ".git/HEAD": "ref",
    })
    package = Package(name="magento/core", type="magento-core")

    assert load_mappings(package, tmp_path) == [
        Mapping("app", "app"),
        Mapping("index.php", "index.php"),
    ]


def test_glob_sources_expand(tmp_path) -> None:
    write_files(tmp_path, {
        "modman": "src/* app/code/local/",
        "src/Foo/Model.php": "<?php",
        "src/Bar/Model.php": "<?php",
    })
    package = Package(name="acme/foo", type="magento-module")

    assert load_mappings(package, tmp_path) == [
        Mapping("src/Bar", "app/code/local/Bar"),
        Mapping("src/Foo", "app/code/local/Foo"),
    ]
