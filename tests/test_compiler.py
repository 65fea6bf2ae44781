"""
Tests for the compiler pipeline (compiler.py).
"""
import os
import sys
import tempfile

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
import compiler
from compiler import build_bundle, compile_sources, log_progress, set_verbose
from packcore.config import BundleConfig
from packcore.errors import MalformedDeclarationError, UnsupportedDeclarationError
from packcore.transformer import EXPORT_COLLAPSED, TRANSFORM_DEPS, ProgressEvent


@pytest.fixture(autouse=True)
def quiet():
    yield
    set_verbose(False)


class TestCompileSources:
    """Tests for compile_sources()."""

    def test_spec_example(self):
        bundle = compile_sources([
            ("/src/index.js", "import {add} from './math'; export {add};"),
            ("/src/math.js", "export {add};"),
        ], BundleConfig(root="/"))
        assert "const add = require(1);\nmodule.exports = add;" in bundle
        assert '"use strict";\n  module.exports = add;\n})' in bundle

    def test_unsupported_declaration_propagates(self):
        with pytest.raises(UnsupportedDeclarationError):
            compile_sources([("/src/index.js", "export { a, b };")], BundleConfig(root="/"))


class TestBuildBundle:
    """Tests for build_bundle()."""

    def test_builds_from_entry_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            src = os.path.join(tmpdir, 'src')
            os.makedirs(src)
            with open(os.path.join(src, 'index.js'), 'w') as f:
                f.write("import { add } from './math';\nconsole.log(add(1, 2));")
            with open(os.path.join(src, 'math.js'), 'w') as f:
                f.write("function add(a, b) { return a + b; }\nexport { add };")

            bundle = build_bundle(config=BundleConfig(root=tmpdir))

        assert "const add = require(1);\nconsole.log(add(1, 2));" in bundle
        assert "function add(a, b) { return a + b; }\nmodule.exports = add;" in bundle

    def test_invalid_tree_is_malformed(self):
        dependencies = [{"name": "/src/index.js", "source": {"body": [{"type": "ImportDeclaration"}]}}]
        with pytest.raises(MalformedDeclarationError):
            compiler.transform_dependencies(dependencies, BundleConfig(root="/"))


class TestLogging:
    """Tests for debug and warning output."""

    def test_debug_hidden_by_default(self, capsys):
        log_progress(ProgressEvent(name=TRANSFORM_DEPS, payload=3))
        assert capsys.readouterr().err == ""

    def test_debug_shown_when_verbose(self, capsys):
        set_verbose(True)
        log_progress(ProgressEvent(name=TRANSFORM_DEPS, payload=3))
        assert "Transforming 3 module(s)" in capsys.readouterr().err

    def test_collapsed_exports_always_warned(self, capsys):
        log_progress(ProgressEvent(name=EXPORT_COLLAPSED, payload="/src/index.js"))
        err = capsys.readouterr().err
        assert "WARNING:" in err
        assert "/src/index.js" in err
