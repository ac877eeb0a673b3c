"""Tests for jsonshelf.config — ServerConfig, loading and bootstrap."""

import json
from pathlib import Path

import pytest

from jsonshelf.config import (
    ServerConfig,
    load_config,
    parse_config,
    resolve_config,
    write_default_config,
)
from jsonshelf.errors import ConfigurationError

VALID = {"host": "0.0.0.0", "port": 8080, "json_directories": ["./a", "./b"]}


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig()
        assert config.host == "localhost"
        assert config.port == 3000
        assert config.json_directories == ("./json",)
        assert config.workers == 0
        assert config.log_level == "info"

    def test_frozen(self) -> None:
        config = ServerConfig()
        with pytest.raises(AttributeError):
            config.port = 9000  # type: ignore[misc]

    def test_to_dict_has_only_file_keys(self) -> None:
        assert ServerConfig(workers=4).to_dict() == {
            "host": "localhost",
            "port": 3000,
            "json_directories": ["./json"],
        }


class TestParseConfig:
    def test_valid(self) -> None:
        config = parse_config(VALID)
        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.json_directories == ("./a", "./b")

    def test_optional_fields(self) -> None:
        config = parse_config({**VALID, "workers": 2, "log_level": "DEBUG"})
        assert config.workers == 2
        assert config.log_level == "debug"

    def test_unknown_keys_ignored(self) -> None:
        assert parse_config({**VALID, "extra": True}).port == 8080

    def test_empty_directory_list_allowed(self) -> None:
        assert parse_config({**VALID, "json_directories": []}).json_directories == ()

    def test_port_bounds(self) -> None:
        assert parse_config({**VALID, "port": 0}).port == 0
        assert parse_config({**VALID, "port": 65535}).port == 65535

    def test_not_an_object(self) -> None:
        with pytest.raises(ConfigurationError, match="expected a JSON object"):
            parse_config(["host"])

    @pytest.mark.parametrize("field", ["host", "port", "json_directories"])
    def test_missing_field(self, field: str) -> None:
        data = {k: v for k, v in VALID.items() if k != field}
        with pytest.raises(ConfigurationError, match=f"missing required field '{field}'"):
            parse_config(data)

    @pytest.mark.parametrize("port", [-1, 65536, "3000", 3.5, True, None])
    def test_invalid_port(self, port: object) -> None:
        with pytest.raises(ConfigurationError, match="'port'"):
            parse_config({**VALID, "port": port})

    def test_host_must_be_string(self) -> None:
        with pytest.raises(ConfigurationError, match="'host'"):
            parse_config({**VALID, "host": 127})

    @pytest.mark.parametrize("dirs", ["./json", [1, 2], ["./ok", None]])
    def test_directories_must_be_strings(self, dirs: object) -> None:
        with pytest.raises(ConfigurationError, match="'json_directories'"):
            parse_config({**VALID, "json_directories": dirs})

    @pytest.mark.parametrize("workers", [-1, "4", False])
    def test_invalid_workers(self, workers: object) -> None:
        with pytest.raises(ConfigurationError, match="'workers'"):
            parse_config({**VALID, "workers": workers})

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="'log_level'"):
            parse_config({**VALID, "log_level": "verbose"})

    def test_source_in_message(self) -> None:
        with pytest.raises(ConfigurationError, match=r"^my\.json:"):
            parse_config({}, source="my.json")


class TestLoadConfig:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(VALID), encoding="utf-8")
        assert load_config(path) == parse_config(VALID)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{host: localhost", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="invalid JSON"):
            load_config(path)

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_config(tmp_path)


class TestDefaultConfig:
    def test_write_default(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        config = write_default_config(path)

        assert config == ServerConfig()
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "host": "localhost",
            "port": 3000,
            "json_directories": ["./json"],
        }

    def test_written_with_two_space_indent(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        write_default_config(path)
        assert '\n  "host": "localhost"' in path.read_text(encoding="utf-8")

    def test_resolve_creates_default(self, workdir: Path) -> None:
        config = resolve_config()

        assert config == ServerConfig()
        assert (workdir / "config.json").is_file()

    def test_resolve_reads_existing_default(self, workdir: Path) -> None:
        (workdir / "config.json").write_text(json.dumps(VALID), encoding="utf-8")
        assert resolve_config().port == 8080

    def test_resolve_explicit_path(self, workdir: Path) -> None:
        (workdir / "custom.json").write_text(json.dumps(VALID), encoding="utf-8")
        assert resolve_config("custom.json").host == "0.0.0.0"

    def test_resolve_explicit_missing_is_error(self, workdir: Path) -> None:
        with pytest.raises(ConfigurationError):
            resolve_config("custom.json")
        assert not (workdir / "custom.json").exists()
        assert not (workdir / "config.json").exists()
