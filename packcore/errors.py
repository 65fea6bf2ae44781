"""
Error handling utilities for the minipack bundler.
"""
import re


class BundleError(Exception):
    """Base exception for bundling errors with location, context and hints."""
    title = "Bundle Error"

    def __init__(self, message, module=None, line_number=None, column=None, context=None, suggestion=None):
        self.message = message
        self.module = module
        self.line_number = line_number
        self.column = column
        self.context = context  # The offending line
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with location, context and suggestion."""
        lines = [f"\n❌ {self.title}"]
        if self.module:
            lines.append(f" in {self.module}")
        if self.line_number:
            lines.append(f" at line {self.line_number}")
            if self.column:
                lines.append(f", column {self.column}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.context:
            lines.append(f"   > {self.context}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class BundleSyntaxError(BundleError):
    """The module source could not be parsed."""
    title = "Syntax Error"


class UnresolvedImportError(BundleError):
    """An import path matches no module in the dependency list."""
    title = "Unresolved Import"

    def __init__(self, import_path, resolved_path, importer=None):
        self.import_path = import_path
        self.resolved_path = resolved_path
        self.importer = importer
        super().__init__(
            f"Cannot resolve '{import_path}' (looked for {resolved_path})",
            module=importer,
            suggestion="Check the import path and that the file is part of the dependency list",
        )


class UnsupportedDeclarationError(BundleError):
    """The declaration uses a form the bundler does not handle."""
    title = "Unsupported Declaration"


class MalformedDeclarationError(BundleError):
    """The declaration node does not have the expected shape."""
    title = "Malformed Declaration"


class ConfigError(BundleError):
    """The configuration file is unreadable or invalid."""
    title = "Configuration Error"


def get_line_context(source_code, line_number):
    """Extract the line of code from source by line number (1-based)."""
    if not source_code or line_number is None:
        return None
    source_lines = source_code.split('\n')
    if 0 < line_number <= len(source_lines):
        return source_lines[line_number - 1].strip()
    return None


def detect_common_error_patterns(source_code):
    """Detect module syntax the bundler does not support and return a hint."""
    # Default import: import x from "./x"
    if re.search(r'^\s*import\s+[A-Za-z_$][\w$]*\s*(,|from\b)', source_code, re.MULTILINE):
        return "Default imports are not supported: use 'import { name } from \"./file\"'", "default_import"

    # Namespace import: import * as ns from "./x"
    if re.search(r'^\s*import\s*\*', source_code, re.MULTILINE):
        return "Namespace imports are not supported: import a single name with 'import { name }'", "namespace_import"

    # Side-effect import: import "./x"
    if re.search(r'^\s*import\s*["\']', source_code, re.MULTILINE):
        return "Bare imports are not supported: import a name with 'import { name } from \"./file\"'", "bare_import"

    # Dynamic import: import("./x")
    if re.search(r'^\s*import\s*\(', source_code, re.MULTILINE):
        return "Dynamic imports are not supported", "dynamic_import"

    if re.search(r'^\s*export\s+default\b', source_code, re.MULTILINE):
        return "Default exports are not supported: declare the value, then 'export { name };'", "default_export"

    if re.search(r'^\s*export\s*\*', source_code, re.MULTILINE):
        return "Namespace re-exports are not supported", "namespace_export"

    # Declaration exports: export const x = ..., export function f() {}
    if re.search(r'^\s*export\s+(const|let|var|function|class|async)\b', source_code, re.MULTILINE):
        return "Exporting a declaration is not supported: declare it, then 'export { name };'", "declaration_export"

    open_braces = source_code.count('{')
    close_braces = source_code.count('}')
    if open_braces != close_braces:
        return f"Unmatched braces: found {open_braces} '{{' but {close_braces} '}}'", "unmatched_braces"

    open_parens = source_code.count('(')
    close_parens = source_code.count(')')
    if open_parens != close_parens:
        return f"Unmatched parentheses: found {open_parens} '(' but {close_parens} ')'", "unmatched_parens"

    return None, None
