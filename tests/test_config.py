"""Tests for path specifiers and buster configuration."""

import re
from pathlib import Path

import pytest

from assetbuster.core.config import BusterConfig, load_project
from assetbuster.core.pathspec import (
    LiteralSpec,
    PatternSpec,
    parse_path_spec,
    parse_path_specs,
)
from assetbuster.errors import ConfigError
from assetbuster.fingerprint.digest import DigestAlgorithm


class TestPathSpecs:
    """Tests for parsing the files setting."""

    def test_string_is_literal(self):
        """Plain strings should become literal specifiers."""
        spec = parse_path_spec("css/app.css")
        assert spec == LiteralSpec(path="css/app.css")

    def test_compiled_regex_is_pattern(self):
        """Compiled regexes should become pattern specifiers."""
        spec = parse_path_spec(re.compile(r"\.css$"))
        assert isinstance(spec, PatternSpec)
        assert spec.matches("/srv/app/site.css")
        assert not spec.matches("/srv/app/site.js")

    def test_regex_mapping_is_pattern(self):
        """A {regex: ...} mapping should become a pattern specifier."""
        spec = parse_path_spec({"regex": r"js/.*\.js$"})
        assert isinstance(spec, PatternSpec)
        assert spec.matches("/root/js/app.js")

    def test_pattern_uses_search_semantics(self):
        """Patterns should match anywhere in the path."""
        spec = parse_path_spec({"regex": "public"})
        assert spec.matches("/home/me/project/public/a.css")

    def test_invalid_regex_rejected(self):
        """Invalid regexes should raise a configuration error."""
        with pytest.raises(ConfigError, match="invalid regex"):
            parse_path_spec({"regex": "("})

    def test_unsupported_entry_rejected(self):
        """Numbers and other values are not specifiers."""
        with pytest.raises(ConfigError):
            parse_path_spec(42)

    def test_mixed_list(self):
        """Lists may mix literals and patterns, preserving order."""
        specs = parse_path_specs(["a.css", {"regex": r"\.js$"}, "b.css"])
        assert [type(s) for s in specs] == [LiteralSpec, PatternSpec, LiteralSpec]

    @pytest.mark.parametrize("raw", [None, "a.css", {"regex": "x"}, 42])
    def test_non_sequence_rejected(self, raw):
        """Absent or non-sequence values should abort."""
        with pytest.raises(ConfigError, match="must be a sequence"):
            parse_path_specs(raw)

    def test_empty_rejected(self):
        """An empty list should abort."""
        with pytest.raises(ConfigError, match="is empty"):
            parse_path_specs([])


class TestBusterConfig:
    """Tests for BusterConfig validation and resolution."""

    def test_defaults(self):
        """Only files is required."""
        config = BusterConfig.from_mapping({"files": ["foo.css"]})
        assert config.files_base is None
        assert config.output_base is None
        assert config.manifest is None
        assert config.merge is False
        assert config.digest == DigestAlgorithm.MD5
        assert config.digest_length == 10

    def test_hyphenated_keys(self):
        """Hyphenated keys should populate the matching fields."""
        config = BusterConfig.from_mapping(
            {
                "files": ["foo.css"],
                "files-base": "resources/public",
                "output-base": "dist",
                "digest-length": 8,
            }
        )
        assert config.files_base == "resources/public"
        assert config.output_base == "dist"
        assert config.digest_length == 8

    def test_python_keys(self):
        """Field names should also be accepted."""
        config = BusterConfig(files=["foo.css"], files_base="public", merge=True)
        assert config.files_base == "public"
        assert config.merge is True
        assert config.files == (LiteralSpec(path="foo.css"),)

    def test_missing_files(self):
        """A missing files key is a configuration error."""
        with pytest.raises(ConfigError, match="must be a sequence"):
            BusterConfig.from_mapping({"merge": True})

    def test_empty_files_direct_construction(self):
        """Direct construction should also reject an empty files list."""
        with pytest.raises(ConfigError, match="is empty"):
            BusterConfig(files=[])

    def test_unknown_key(self):
        """Unknown keys should be rejected."""
        with pytest.raises(ConfigError, match="buster.colour"):
            BusterConfig.from_mapping({"files": ["a.css"], "colour": "blue"})

    def test_bad_digest(self):
        """Unknown digest algorithms should be rejected."""
        with pytest.raises(ConfigError, match="buster.digest"):
            BusterConfig.from_mapping({"files": ["a.css"], "digest": "crc32"})

    def test_non_mapping(self):
        """The section itself must be a mapping."""
        with pytest.raises(ConfigError, match="must be a mapping"):
            BusterConfig.from_mapping(["a.css"])

    def test_config_is_frozen(self):
        """Config should be immutable."""
        config = BusterConfig(files=["a.css"])
        with pytest.raises(Exception):
            config.merge = True

    def test_resolve_defaults(self, tmp_path: Path):
        """Paths should default to the project root and output-base."""
        settings = BusterConfig(files=["a.css"]).resolve(tmp_path)
        root = tmp_path.resolve()
        assert settings.files_base == root
        assert settings.output_base == root
        assert settings.manifest == root / "rev-manifest.json"
        assert settings.merge is False

    def test_resolve_output_base_defaults_to_files_base(self, tmp_path: Path):
        """Output-base and manifest follow files-base when unset."""
        settings = BusterConfig(files=["a.css"], files_base="resources/public/").resolve(tmp_path)
        public = tmp_path.resolve() / "resources" / "public"
        assert settings.files_base == public
        assert settings.output_base == public
        assert settings.manifest == public / "rev-manifest.json"

    def test_resolve_explicit_paths(self, tmp_path: Path):
        """Explicit paths are relative to the project root."""
        settings = BusterConfig(
            files=["a.css"],
            files_base="src",
            output_base="dist",
            manifest="build/manifest.json",
        ).resolve(tmp_path)
        root = tmp_path.resolve()
        assert settings.output_base == root / "dist"
        assert settings.manifest == root / "build" / "manifest.json"


class TestLoadProject:
    """Tests for loading YAML project files."""

    def test_load(self, tmp_path: Path):
        """The buster section should be parsed and the root set."""
        project_file = tmp_path / "buster.yaml"
        project_file.write_text(
            "buster:\n"
            "  files:\n"
            "    - css/app.css\n"
            "    - regex: '\\.js$'\n"
            "  files-base: public\n"
            "  merge: true\n"
        )
        project = load_project(project_file)
        assert project.root == tmp_path.resolve()
        assert project.config.merge is True
        assert isinstance(project.config.files[1], PatternSpec)
        assert project.settings.files_base == tmp_path.resolve() / "public"

    def test_missing_file(self, tmp_path: Path):
        """A missing project file is a configuration error."""
        with pytest.raises(ConfigError, match="not found"):
            load_project(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        """Unparsable YAML is a configuration error."""
        project_file = tmp_path / "buster.yaml"
        project_file.write_text("buster: [unclosed\n")
        with pytest.raises(ConfigError, match="Error parsing"):
            load_project(project_file)

    def test_missing_section(self, tmp_path: Path):
        """A file without a buster section is a configuration error."""
        project_file = tmp_path / "buster.yaml"
        project_file.write_text("other: 1\n")
        with pytest.raises(ConfigError, match="no 'buster' section"):
            load_project(project_file)

    def test_empty_files(self, tmp_path: Path):
        """An empty files list in the project file aborts."""
        project_file = tmp_path / "buster.yaml"
        project_file.write_text("buster:\n  files: []\n")
        with pytest.raises(ConfigError, match="is empty"):
            load_project(project_file)
