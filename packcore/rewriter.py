"""
Import and export rewriting.

Replaces module syntax with code that talks to the bundle's loader:

    import { add } from "./math";   ->   const add = require(1);
    export { add };                 ->   module.exports = add;
"""

from packcore.errors import MalformedDeclarationError, UnsupportedDeclarationError
from packcore.nodes import (
    ExportAssignment,
    ExpressionStatement,
    Identifier,
    RequireCall,
    VariableDeclaration,
)


def _single_specifier(node, module=None):
    """Return the only specifier of a declaration, rejecting other shapes."""
    keyword = "import" if node.type == "ImportDeclaration" else "export"
    if not node.specifiers:
        raise MalformedDeclarationError(
            f"{keyword} declaration has no specifier",
            module=module,
            context=node.generate(),
        )
    if len(node.specifiers) > 1:
        names = ", ".join(s.generate() for s in node.specifiers)
        raise UnsupportedDeclarationError(
            f"{keyword} of several names ({names}) is not supported",
            module=module,
            context=node.generate(),
            suggestion=f"Use one '{keyword} {{ name }}' per module",
        )
    return node.specifiers[0]


def rewrite_import(node, resolver, module=None, loader="require"):
    """
    Build the loader call that replaces an import declaration.

    Args:
        node: ImportDeclaration
        resolver: ModuleResolver for the dependency list
        module: Name of the module being rewritten
        loader: Name of the loader function inside module factories

    Returns:
        VariableDeclaration binding the local name to the required module
    """
    specifier = _single_specifier(node, module)
    module_id = resolver.resolve(node.source.value, importer=module)
    return VariableDeclaration(
        kind="const",
        id=Identifier(name=specifier.local.name),
        init=RequireCall(module_id=module_id, loader=loader),
    )


def rewrite_export(node, module=None):
    """
    Build the assignment that replaces an export declaration.

    The whole export record is replaced, so when a module has several export
    declarations the last one wins at run time. The assigned value is the
    local name: in `export { a as b }` the alias b is not a binding, so the
    statement becomes `module.exports = a;`.
    """
    if node.source is not None:
        raise UnsupportedDeclarationError(
            "re-exporting from another module is not supported",
            module=module,
            context=node.generate(),
            suggestion="Import the name first, then 'export { name };'",
        )
    specifier = _single_specifier(node, module)
    return ExpressionStatement(
        expression=ExportAssignment(value=Identifier(name=specifier.local.name)),
    )
