"""
Dependency graph collection for minipack.

Starting from the entry file, recursively reads and parses every imported
module and returns the ordered dependency list the transformer consumes.
"""
import os

from packcore.config import BundleConfig
from packcore.nodes import Dependency
from packcore.parser import parse_module
from packcore.resolver import ModuleResolver


def find_module_file(path, extensions):
    """Return the file an extensionless import path refers to, or None."""
    candidates = [path]
    candidates += [path + ext for ext in extensions]
    candidates += [os.path.join(path, "index" + ext) for ext in extensions]
    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate
    return None


def collect_dependencies(entry_path, config=None):
    """
    Build the dependency list for an entry module.

    Modules are listed in discovery order, depth first, so the entry is
    always module 0. Each file appears once even when imported from several
    modules or through a cycle.

    Args:
        entry_path: Path to the entry module
        config: BundleConfig. If None, uses the defaults.

    Returns:
        List of Dependency

    Raises:
        FileNotFoundError: If the entry or an imported file doesn't exist
        BundleSyntaxError: If a module does not parse
    """
    config = config if config is not None else BundleConfig()
    # Only the path convention of the resolver is needed here
    paths = ModuleResolver([], config)
    dependencies = []
    visited = set()

    def visit(file_path, importer=None):
        abs_path = os.path.abspath(file_path)
        if abs_path in visited:
            return
        visited.add(abs_path)

        if not os.path.isfile(abs_path):
            if importer:
                raise FileNotFoundError(f"Import not found: {abs_path} (imported from {importer})")
            raise FileNotFoundError(f"Entry module not found: {abs_path}")

        with open(abs_path, 'r') as f:
            code = f.read()

        dependency = Dependency(name=abs_path, source=parse_module(code, name=abs_path))
        dependencies.append(dependency)

        for item in dependency.source.body:
            if item.type == "ImportDeclaration":
                target = paths.resolve_path(item.source.value, importer=abs_path)
                found = find_module_file(target, config.extensions)
                visit(found or target, importer=abs_path)

    visit(entry_path)
    return dependencies
