# minipack Runtime Templates
"""
JavaScript templates that make up a bundle.

These are real .js files so they can be read and linted as JavaScript, and
are filled in at bundle time:
- module.js: the factory wrapped around each module's code
- loader.js: the bootstrap with the module cache and the loader function
"""

import os

LOADER_MARKER = "__LOADER__"
MODULE_CODE_MARKER = "__MODULE_CODE__"
MODULES_MARKER = "__MODULES__"


def _read_template(filename):
    runtime_dir = os.path.dirname(__file__)
    with open(os.path.join(runtime_dir, filename), 'r') as f:
        return f.read().rstrip("\n")


def build_module_template(module_code, loader="require"):
    """
    Wrap one module's code in a factory taking the module record and the loader.

    Each factory is a function of its own, so a module's top-level bindings
    never leak into another module.
    """
    template = _read_template('module.js').replace(LOADER_MARKER, loader)
    return template.replace(MODULE_CODE_MARKER, module_code)


def build_runtime_template(all_modules, loader="require"):
    """
    Embed the comma-joined module factories in the loader bootstrap.

    The result is a self-invoking expression that requires module 0 and
    evaluates to its exports.
    """
    template = _read_template('loader.js').replace(LOADER_MARKER, loader)
    return template.replace(MODULES_MARKER, all_modules) + "\n"
