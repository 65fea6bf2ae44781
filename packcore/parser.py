"""
minipack Parser - Builds the module syntax tree from source text.

This module contains the ModuleBuilder transformer, which turns Lark parse
trees into the node models of packcore.nodes, and parse_module(), which wraps
parsing with error reporting.
"""

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from packcore.errors import BundleSyntaxError, detect_common_error_patterns, get_line_context
from packcore.grammar import module_grammar
from packcore.nodes import (
    ExportNamedDeclaration,
    ExportSpecifier,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    Passthrough,
    Program,
    StringLiteral,
)

_parser = None


def get_parser():
    """Return the shared LALR parser, building it on first use."""
    global _parser
    if _parser is None:
        _parser = Lark(module_grammar, parser='lalr', propagate_positions=True)
    return _parser


def _unquote(token):
    # Module paths never carry escapes; strip the surrounding quotes.
    return str(token)[1:-1]


class ModuleBuilder(Transformer):
    """
    Transforms a module parse tree into a Program node.

    Import and export declarations become their node types. Runs of any other
    statements become Passthrough nodes holding the exact source text, which
    is why the builder needs the source text.
    """

    def __init__(self, source_code):
        super().__init__()
        self._source = source_code

    def start(self, items):
        """Collect top-level statements in source order."""
        return Program(body=items)

    def import_decl(self, args):
        *specifiers, source = [a for a in args if a is not None]
        return ImportDeclaration(specifiers=specifiers, source=StringLiteral(value=_unquote(source)))

    def import_specifier(self, args):
        return ImportSpecifier(imported=Identifier(name=args[0]), local=Identifier(name=args[-1]))

    def export_decl(self, args):
        args = [a for a in args if a is not None]
        source = None
        if args and not isinstance(args[-1], ExportSpecifier):
            source = StringLiteral(value=_unquote(args[-1]))
            args = args[:-1]
        return ExportNamedDeclaration(specifiers=args, source=source)

    def export_specifier(self, args):
        return ExportSpecifier(local=Identifier(name=args[0]), exported=Identifier(name=args[-1]))

    @v_args(meta=True)
    def passthrough(self, meta, children):
        """Slice the statement run straight out of the source."""
        if meta.empty:
            return Passthrough(code="")
        return Passthrough(code=self._source[meta.start_pos:meta.end_pos])

    def NAME(self, t):
        return str(t)


def parse_module(source_code, name=None):
    """
    Parse ES module source into a Program.

    Args:
        source_code: Module source text
        name: Module path, used in error reports

    Returns:
        Program node

    Raises:
        BundleSyntaxError: If the source does not parse
    """
    try:
        tree = get_parser().parse(source_code)
    except UnexpectedInput as e:
        line_number = getattr(e, 'line', None)
        column = getattr(e, 'column', None)
        if line_number is not None and line_number < 0:
            line_number, column = None, None

        context = get_line_context(source_code, line_number) if line_number else None

        suggestion_text, _ = detect_common_error_patterns(source_code)
        if not suggestion_text:
            suggestion_text = "Only 'import { name } from \"./file\"' and 'export { name }' are supported"

        raise BundleSyntaxError(
            message="Unexpected token",
            module=name,
            line_number=line_number,
            column=column,
            context=context,
            suggestion=suggestion_text,
        ) from e

    return ModuleBuilder(source_code).transform(tree)
