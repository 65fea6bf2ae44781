"""
minipack configuration.

Settings are read from a minipack.json registry, the same way for the CLI and
the Python API. Every field has a default, so a missing file is not an error.
"""
import json
import os
import re
from typing import List, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from packcore.errors import ConfigError

CONFIG_FILE = "minipack.json"
CONFIG_PATHS = [CONFIG_FILE, os.path.expanduser("~/.minipack/config.json")]

_IDENTIFIER = re.compile(r'^[A-Za-z_$][\w$]*$')

# Names the runtime itself binds inside the bundle
RUNTIME_NAMES = {"module", "modules", "installedModules", "moduleId", "Object", "Error"}

RESERVED_WORDS = {
    "await", "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "implements", "import", "in",
    "instanceof", "interface", "let", "new", "null", "package", "private",
    "protected", "public", "return", "static", "super", "switch", "this",
    "throw", "true", "try", "typeof", "var", "void", "while", "with", "yield",
    "arguments", "eval",
}


class BundleConfig(BaseModel):
    """Bundler settings."""
    root: str = Field(default_factory=os.getcwd)
    source_root: str = "src"
    entry: str = "src/index.js"
    output: str = "dist/bundle.js"
    loader_name: str = "require"
    strict_imports: bool = True
    resolve_from: Literal["source_root", "importer"] = "source_root"
    extensions: List[str] = Field(default_factory=lambda: [".js", ".mjs", ".cjs"])

    @field_validator('loader_name')
    @classmethod
    def _check_loader_name(cls, value):
        if not _IDENTIFIER.match(value):
            raise ValueError(f"'{value}' is not usable as the loader name")
        if value in RESERVED_WORDS:
            raise ValueError(f"'{value}' is a reserved word in JavaScript")
        if value in RUNTIME_NAMES:
            raise ValueError(f"'{value}' is already used by the bundle runtime")
        return value

    @field_validator('root')
    @classmethod
    def _absolute_root(cls, value):
        return os.path.abspath(value)

    def entry_path(self):
        """Absolute path of the entry module."""
        return os.path.normpath(os.path.join(self.root, self.entry))

    def output_path(self):
        """Absolute path the bundle is written to."""
        return os.path.normpath(os.path.join(self.root, self.output))


def load_config(path=None, **overrides):
    """
    Load the bundler configuration.

    Args:
        path: Explicit config file. If None, the first existing file of
              CONFIG_PATHS is used, or the defaults when there is none.
        **overrides: Values that take precedence over the file (None values
                     are ignored so CLI flags can be passed straight through).

    Returns:
        BundleConfig

    Raises:
        ConfigError: If the file cannot be read or holds invalid values
    """
    paths = [path] if path else CONFIG_PATHS
    data = {}
    for p in paths:
        if os.path.exists(p):
            try:
                with open(p, "r") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"Cannot read {p}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"{p} must contain a JSON object")
            # Relative roots are relative to the config file, not the cwd
            if "root" in data:
                data["root"] = os.path.join(os.path.dirname(os.path.abspath(p)), data["root"])
            break
    else:
        if path:
            raise ConfigError(f"Config file not found: {path}")

    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return BundleConfig(**data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {e}",
            suggestion=f"Check the values in {CONFIG_FILE}",
        ) from e
