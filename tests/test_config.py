"""
Tests for parser options loading.
"""

import logging

import pytest

from leaf import DEFAULT_OPTIONS, ConfigError, ParserOptions, load_options, options_from_mapping, setup_logging


class TestParserOptions:

    def test_defaults(self):
        assert DEFAULT_OPTIONS.sigil == "#"
        assert DEFAULT_OPTIONS.sigil_byte == 0x23
        assert DEFAULT_OPTIONS.balanced_bodies is False

    @pytest.mark.parametrize("sigil", ["", "##", "é", 5])
    def test_sigil_must_be_single_ascii_character(self, sigil):
        with pytest.raises(ConfigError, match="sigil"):
            ParserOptions(sigil=sigil)

    @pytest.mark.parametrize("sigil", ["(", "}", '"', ",", "\\", " ", "-", "a", "7"])
    def test_reserved_sigil(self, sigil):
        with pytest.raises(ConfigError, match="reserved"):
            ParserOptions(sigil=sigil)

    def test_balanced_bodies_must_be_bool(self):
        with pytest.raises(ConfigError, match="balanced_bodies"):
            ParserOptions(balanced_bodies="maybe")


class TestOptionsFromMapping:

    def test_none_gives_defaults(self):
        assert options_from_mapping(None) is DEFAULT_OPTIONS

    def test_known_keys(self):
        options = options_from_mapping({"sigil": "@", "balanced_bodies": True})
        assert options == ParserOptions(sigil="@", balanced_bodies=True)

    def test_unknown_keys(self):
        with pytest.raises(ConfigError, match="unknown option\\(s\\): colour"):
            options_from_mapping({"colour": "red"})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="expected mapping"):
            options_from_mapping(["sigil"])


class TestLoadOptions:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "leaf.yaml"
        path.write_text('sigil: "@"\nbalanced_bodies: true\n', encoding="utf-8")

        options = load_options(path)

        assert options.sigil == "@"
        assert options.balanced_bodies is True

    def test_empty_file(self, tmp_path):
        path = tmp_path / "leaf.yaml"
        path.write_text("", encoding="utf-8")

        assert load_options(path) == DEFAULT_OPTIONS

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "leaf.yaml"
        path.write_text("sigil: [\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="invalid YAML"):
            load_options(path)

    def test_invalid_value_names_file(self, tmp_path):
        path = tmp_path / "leaf.yaml"
        path.write_text("sigil: '('\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="leaf.yaml: sigil"):
            load_options(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read"):
            load_options(tmp_path / "absent.yaml")


class TestLogging:

    def test_setup_logging_is_idempotent(self):
        setup_logging()
        handlers = list(logging.getLogger("leaf").handlers)
        setup_logging()

        assert logging.getLogger("leaf").handlers == handlers
        assert handlers
