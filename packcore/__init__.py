# minipack - Core Bundler Components
"""
Core modules for the minipack bundler:
- errors: Error types and reporting helpers
- nodes: Syntax tree node models
- grammar: Lark grammar for the module-level ES syntax
- parser: Source text to syntax tree
- config: Bundler settings (minipack.json)
- resolver: Import path to module id resolution
- rewriter: Import/export declaration rewriting
- runtime: Module factory and loader templates
- transformer: Dependency list to bundle string
- graph: Dependency list collection from an entry file
"""

from .errors import (
    BundleError,
    BundleSyntaxError,
    ConfigError,
    MalformedDeclarationError,
    UnresolvedImportError,
    UnsupportedDeclarationError,
)
from .config import BundleConfig, load_config
from .nodes import Dependency, Program
from .grammar import module_grammar
from .parser import parse_module
from .transformer import BundleTransformer, ProgressEvent, transform
from .graph import collect_dependencies

__all__ = [
    'BundleError',
    'BundleSyntaxError',
    'ConfigError',
    'MalformedDeclarationError',
    'UnresolvedImportError',
    'UnsupportedDeclarationError',
    'BundleConfig',
    'load_config',
    'Dependency',
    'Program',
    'module_grammar',
    'parse_module',
    'BundleTransformer',
    'ProgressEvent',
    'transform',
    'collect_dependencies',
]
