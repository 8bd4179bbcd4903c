# tests/test_config.py - Tests for configuration
"""
Unit tests for the Config class.
"""

import pytest
import yaml
from compile_ebpf.utils.config import Config, DEFAULT_CLANG


class TestConfig:
    """Test cases for Config"""

    def test_defaults(self):
        """Test default values without a config file"""
        cfg = Config()

        assert cfg.get('compiler.clang') == DEFAULT_CLANG
        assert cfg.get('compiler.target') == 'bpf'
        assert cfg.get('paths.include_dir') == 'include'
        assert cfg.get('missing.key', 'fallback') == 'fallback'

    def test_load_merges_over_defaults(self, tmp_path):
        """Test YAML values override defaults without dropping siblings"""
        path = tmp_path / "config.yaml"
        path.write_text("compiler:\n  clang: /opt/llvm/bin/clang\n")

        cfg = Config(str(path))

        assert cfg.get('compiler.clang') == '/opt/llvm/bin/clang'
        assert cfg.get('paths.include_dir') == 'include'

    def test_missing_file_keeps_defaults(self, tmp_path):
        """Test a missing file is ignored"""
        cfg = Config(str(tmp_path / "nope.yaml"))

        assert cfg.get('compiler.clang') == DEFAULT_CLANG

    def test_empty_file_keeps_defaults(self, tmp_path):
        """Test an empty YAML document is treated as no overrides"""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert Config(str(path)).to_dict() == Config().to_dict()

    def test_invalid_yaml_raises(self, tmp_path):
        """Test malformed YAML is reported"""
        path = tmp_path / "bad.yaml"
        path.write_text("compiler: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            Config(str(path))

    def test_non_mapping_raises(self, tmp_path):
        """Test a YAML list at the top level is rejected"""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError):
            Config(str(path))

    def test_set_does_not_leak_into_defaults(self):
        """Test instances do not share nested default dictionaries"""
        cfg = Config()
        cfg.set('compiler.clang', '/tmp/clang')

        assert Config().get('compiler.clang') == DEFAULT_CLANG

    def test_clang_env_override(self, tmp_path):
        """Test CLANG beats the configured compiler path"""
        path = tmp_path / "config.yaml"
        path.write_text("compiler:\n  clang: /opt/llvm/bin/clang\n")
        cfg = Config(str(path))

        assert cfg.clang_path({'CLANG': '/usr/local/bin/clang-17'}) == '/usr/local/bin/clang-17'
        assert cfg.clang_path({}) == '/opt/llvm/bin/clang'
