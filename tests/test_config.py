"""
Unit tests for aethergate.config module
"""
import os
import shutil
import tempfile
import tomllib
import unittest
from pathlib import Path
from unittest.mock import patch

from aethergate.config import (
    default_configuration,
    dumps,
    get_config_path,
    get_layout_path,
    load,
    parse_config,
    write_default,
)
from aethergate.domain import Configuration, RepositoryRecord
from aethergate.errors import NotFoundError, ParseError, WriteError


class TestDefaultConfiguration(unittest.TestCase):
    """Test the configuration written by init"""

    def test_default_configuration(self):
        config = default_configuration()

        self.assertEqual(config.version, 1)
        self.assertEqual(config.domain, "go.endfieldind.com")
        self.assertEqual(len(config.repositories), 1)

        record = config.repositories[0]
        self.assertEqual(record.path, "aethergate")
        self.assertEqual(record.vcs, "git")
        self.assertEqual(record.repo, "https://git.sr.ht/~endmin/aethergate")

    def test_default_configuration_is_immutable(self):
        config = default_configuration()
        with self.assertRaises(AttributeError):
            config.domain = "other.example.com"


class TestLoadAndWrite(unittest.TestCase):
    """Test reading and writing aethergate.toml"""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "aethergate.toml"

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_written_default_loads_back_equal(self):
        config = default_configuration()
        write_default(config, self.config_path)

        self.assertEqual(load(self.config_path), config)

    def test_written_file_documents_each_field(self):
        write_default(default_configuration(), self.config_path)
        content = self.config_path.read_text()

        self.assertIn("# Version of aethergate", content)
        self.assertIn("# Domain of vanity remote import", content)
        self.assertIn("# List of repositories to serve", content)
        self.assertIn("Path of vanity remote import", content)
        self.assertIn("Version control system", content)
        self.assertIn("Repository URL", content)
        self.assertIn("[[repository]]", content)

    def test_multiple_records_keep_order(self):
        config = Configuration(
            version=2,
            domain="go.example.com",
            repositories=(
                RepositoryRecord("b", "git", "https://example.com/b"),
                RepositoryRecord("a", "hg", "https://example.com/a"),
                RepositoryRecord("c", "git", "https://example.com/c"),
            ),
        )
        write_default(config, self.config_path)
        loaded = load(self.config_path)

        self.assertEqual([r.path for r in loaded.repositories], ["b", "a", "c"])
        self.assertEqual(loaded.repositories[1].vcs, "hg")
        self.assertEqual(loaded.version, 2)

    def test_empty_repository_list(self):
        config = Configuration(version=1, domain="go.example.com")
        write_default(config, self.config_path)

        self.assertEqual(load(self.config_path).repositories, ())

    def test_load_missing_file(self):
        with self.assertRaises(NotFoundError) as ctx:
            load(self.config_path)
        self.assertIn("read config file", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    def test_load_invalid_toml(self):
        self.config_path.write_text('domain = "unterminated\n')
        with self.assertRaises(ParseError) as ctx:
            load(self.config_path)
        self.assertIn("unmarshal data", str(ctx.exception))

    def test_load_missing_domain_is_empty(self):
        self.config_path.write_text('version = 1\n')
        config = load(self.config_path)
        self.assertEqual(config.domain, "")
        self.assertEqual(config.repositories, ())

    def test_load_version_must_be_integer(self):
        self.config_path.write_text('version = "one"\ndomain = "go.example.com"\n')
        with self.assertRaises(ParseError):
            load(self.config_path)

    def test_load_record_missing_fields_are_empty(self):
        self.config_path.write_text(
            'domain = "go.example.com"\n'
            '[[repository]]\n'
            'vcs = "git"\n'
            'repo = "r"\n'
        )
        record = load(self.config_path).repositories[0]
        self.assertEqual(record, RepositoryRecord(path="", vcs="git", repo="r"))

    def test_load_record_wrong_type(self):
        self.config_path.write_text(
            'domain = "go.example.com"\n'
            '[[repository]]\n'
            'path = 7\n'
        )
        with self.assertRaises(ParseError) as ctx:
            load(self.config_path)
        self.assertIn("repository[0]", str(ctx.exception))
        self.assertIn("path", str(ctx.exception))

    def test_load_keeps_empty_path(self):
        """Field values are not validated, only the shape."""
        self.config_path.write_text(
            'domain = "go.example.com"\n'
            '[[repository]]\n'
            'path = ""\n'
            'vcs = "git"\n'
            'repo = "https://example.com/root"\n'
        )
        config = load(self.config_path)
        self.assertEqual(config.repositories[0].path, "")

    def test_load_defaults_version_to_zero(self):
        self.config_path.write_text('domain = "go.example.com"\n')
        self.assertEqual(load(self.config_path).version, 0)

    def test_write_default_to_missing_directory(self):
        target = Path(self.temp_dir) / "missing" / "aethergate.toml"
        with self.assertRaises(WriteError):
            write_default(default_configuration(), target)


class TestParseConfig(unittest.TestCase):
    """Test schema checks on decoded documents"""

    def test_repository_must_be_list(self):
        with self.assertRaises(ParseError):
            parse_config({"domain": "go.example.com", "repository": "foo"})

    def test_repository_items_must_be_tables(self):
        with self.assertRaises(ParseError):
            parse_config({"domain": "go.example.com", "repository": ["foo"]})

    def test_boolean_version_rejected(self):
        with self.assertRaises(ParseError):
            parse_config({"version": True, "domain": "go.example.com"})

    def test_unknown_keys_ignored(self):
        config = parse_config({"domain": "go.example.com", "theme": "dark"})
        self.assertEqual(config.domain, "go.example.com")

    def test_dumps_is_valid_toml(self):
        data = tomllib.loads(dumps(default_configuration()))
        self.assertEqual(data["domain"], "go.endfieldind.com")
        self.assertEqual(data["repository"][0]["vcs"], "git")


class TestPathOverrides(unittest.TestCase):
    """Test environment overrides of the well-known file names"""

    def test_default_paths(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop('AETHERGATE_CONFIG', None)
            os.environ.pop('AETHERGATE_LAYOUT', None)
            self.assertEqual(get_config_path(), Path("aethergate.toml"))
            self.assertEqual(get_layout_path(), Path("layout.html"))

    def test_env_overrides(self):
        with patch.dict(os.environ, {
            'AETHERGATE_CONFIG': '/srv/site/gate.toml',
            'AETHERGATE_LAYOUT': '/srv/site/gate.html',
        }):
            self.assertEqual(get_config_path(), Path('/srv/site/gate.toml'))
            self.assertEqual(get_layout_path(), Path('/srv/site/gate.html'))


if __name__ == '__main__':
    unittest.main()
