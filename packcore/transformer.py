"""
minipack Transformer - Turns a dependency list into a bundle string.

This module contains the BundleTransformer class, which rewrites the
import/export declarations of every module into loader calls, regenerates
each module's code, wraps it in a module factory and embeds all factories in
the loader runtime.
"""

from typing import Any, Optional

from pydantic import BaseModel

from packcore.config import BundleConfig
from packcore.nodes import Dependency
from packcore.resolver import ModuleResolver
from packcore.rewriter import rewrite_export, rewrite_import
from packcore.runtime import build_module_template, build_runtime_template

# Progress event names
TRANSFORM_DEPS = "transform_deps"
EXPORT_COLLAPSED = "export_collapsed"
RETURN_BUNDLE_STRING = "return_bundle_string"


class ProgressEvent(BaseModel):
    """A step of the transform, reported to the on_progress callback."""
    name: str
    payload: Optional[Any] = None


class BundleTransformer:
    """
    Transforms a dependency list into a bundle string.

    The dependency list is ordered: a module's id is its position and module
    0 is the entry. Each module's source tree is rewritten in place.
    """

    def __init__(self, config=None, on_progress=None):
        """
        Initialize the transformer.

        Args:
            config: BundleConfig. If None, uses the defaults.
            on_progress: Optional callable receiving ProgressEvent objects,
                         synchronously and in order.
        """
        self.config = config if config is not None else BundleConfig()
        self._on_progress = on_progress

    def _emit(self, name, payload=None):
        if self._on_progress is not None:
            self._on_progress(ProgressEvent(name=name, payload=payload))

    def transform_module(self, dependency, resolver):
        """Rewrite one module's declarations and return its wrapped code."""
        loader = self.config.loader_name
        body = []
        exports = 0
        for item in dependency.source.body:
            if item.type == "ImportDeclaration":
                # replace module import with a loader call
                item = rewrite_import(item, resolver, module=dependency.name, loader=loader)
            elif item.type == "ExportNamedDeclaration":
                # replace export with an assignment to the module record
                item = rewrite_export(item, module=dependency.name)
                exports += 1
            body.append(item)
        dependency.source.body = body

        if exports > 1:
            # Every assignment replaces module.exports; only the last survives
            self._emit(EXPORT_COLLAPSED, dependency.name)

        # Turn the tree back into source text
        updated_source = dependency.source.generate()
        return build_module_template(updated_source, loader=loader)

    def transform(self, dependencies):
        """
        Build the bundle.

        Args:
            dependencies: Ordered list of Dependency (or dicts of the same
                          shape, which are validated into Dependency first)

        Returns:
            The bundle source as a string

        Raises:
            BundleError: On unresolved imports or unsupported declarations.
                         No partial bundle is produced.
        """
        dependencies = [
            d if isinstance(d, Dependency) else Dependency.model_validate(d)
            for d in dependencies
        ]
        self._emit(TRANSFORM_DEPS, len(dependencies))

        resolver = ModuleResolver(dependencies, self.config)
        modules = [self.transform_module(d, resolver) for d in dependencies]

        bundle_string = build_runtime_template(",".join(modules), loader=self.config.loader_name)

        self._emit(RETURN_BUNDLE_STRING)
        return bundle_string


def transform(dependencies, config=None, on_progress=None):
    """Take a dependency list and return the bundle string."""
    return BundleTransformer(config, on_progress).transform(dependencies)
