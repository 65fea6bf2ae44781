import sys

from pydantic import ValidationError

from packcore.config import BundleConfig
from packcore.errors import BundleError, MalformedDeclarationError
from packcore.graph import collect_dependencies
from packcore.nodes import Dependency
from packcore.parser import parse_module
from packcore.transformer import (
    EXPORT_COLLAPSED,
    RETURN_BUNDLE_STRING,
    TRANSFORM_DEPS,
    BundleTransformer,
)

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)

def warn_log(message):
    """Log a warning to stderr."""
    print(f"\033[93mWARNING:\033[0m {message}", file=sys.stderr)

def log_progress(event):
    """Report transform progress events."""
    if event.name == TRANSFORM_DEPS:
        debug_log(f"Transforming {event.payload} module(s)")
    elif event.name == EXPORT_COLLAPSED:
        warn_log(f"{event.payload} has several export declarations; only the last one is kept")
    elif event.name == RETURN_BUNDLE_STRING:
        debug_log("Bundle string ready")

def transform_dependencies(dependencies, config):
    """Run the transformer, turning shape errors into bundle errors."""
    try:
        transformer = BundleTransformer(config, on_progress=log_progress)
        return transformer.transform(dependencies)
    except BundleError:
        raise  # Re-raise our custom errors
    except ValidationError as e:
        raise MalformedDeclarationError(
            message=f"Invalid module tree: {e}",
            suggestion="Check the shape of the dependency list",
        ) from e

def compile_sources(modules, config=None):
    """
    Bundle modules given as source text.

    Args:
        modules: Ordered list of (absolute name, source code) pairs, entry first
        config: BundleConfig. If None, uses the defaults.

    Returns:
        The bundle string
    """
    config = config if config is not None else BundleConfig()
    dependencies = []
    for name, source_code in modules:
        debug_log(f"Parsing {name}")
        dependencies.append(Dependency(name=name, source=parse_module(source_code, name=name)))
    return transform_dependencies(dependencies, config)

def build_bundle(entry_path=None, config=None):
    """
    Bundle an entry module and everything it imports.

    Args:
        entry_path: Entry module. If None, uses the configured entry.
        config: BundleConfig. If None, uses the defaults.

    Returns:
        The bundle string
    """
    config = config if config is not None else BundleConfig()
    entry_path = entry_path or config.entry_path()

    debug_log(f"Collecting dependencies from {entry_path}")
    dependencies = collect_dependencies(entry_path, config)
    for module_id, dependency in enumerate(dependencies):
        debug_log(f"  [{module_id}] {dependency.name}")

    return transform_dependencies(dependencies, config)
