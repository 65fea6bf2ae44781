"""
minipack syntax tree.

A closed set of node variants for the module-level structure of an ES module.
Only the nodes the bundler consumes get their own type; every other statement
is kept verbatim as a Passthrough. Nodes follow the ESTree naming so a tree can
also be validated from plain ESTree-shaped dicts.
"""

import json
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Identifier(BaseModel):
    type: Literal["Identifier"] = "Identifier"
    name: str

    def generate(self):
        return self.name


class StringLiteral(BaseModel):
    type: Literal["Literal"] = "Literal"
    value: str

    def generate(self):
        return json.dumps(self.value)


class ImportSpecifier(BaseModel):
    type: Literal["ImportSpecifier"] = "ImportSpecifier"
    imported: Identifier
    local: Identifier

    def generate(self):
        if self.imported.name == self.local.name:
            return self.local.name
        return f"{self.imported.name} as {self.local.name}"


class ExportSpecifier(BaseModel):
    type: Literal["ExportSpecifier"] = "ExportSpecifier"
    local: Identifier
    exported: Identifier

    def generate(self):
        if self.local.name == self.exported.name:
            return self.local.name
        return f"{self.local.name} as {self.exported.name}"


class ImportDeclaration(BaseModel):
    """`import { a } from "./a";`"""
    type: Literal["ImportDeclaration"] = "ImportDeclaration"
    specifiers: List[ImportSpecifier] = Field(default_factory=list)
    source: StringLiteral

    def generate(self):
        names = ", ".join(s.generate() for s in self.specifiers)
        return f"import {{ {names} }} from {self.source.generate()};"


class ExportNamedDeclaration(BaseModel):
    """`export { a };`"""
    type: Literal["ExportNamedDeclaration"] = "ExportNamedDeclaration"
    specifiers: List[ExportSpecifier] = Field(default_factory=list)
    source: Optional[StringLiteral] = None

    def generate(self):
        names = ", ".join(s.generate() for s in self.specifiers)
        code = f"export {{ {names} }}"
        if self.source is not None:
            code += f" from {self.source.generate()}"
        return code + ";"


class Passthrough(BaseModel):
    """Statements the bundler does not touch, kept as source text."""
    type: Literal["Passthrough"] = "Passthrough"
    code: str

    def generate(self):
        return self.code


class RequireCall(BaseModel):
    type: Literal["RequireCall"] = "RequireCall"
    module_id: int
    loader: str = "require"

    def generate(self):
        return f"{self.loader}({self.module_id})"


class VariableDeclaration(BaseModel):
    """`const <id> = require(<module_id>);`"""
    type: Literal["VariableDeclaration"] = "VariableDeclaration"
    kind: Literal["const", "let", "var"] = "const"
    id: Identifier
    init: RequireCall

    def generate(self):
        return f"{self.kind} {self.id.generate()} = {self.init.generate()};"


class ExportAssignment(BaseModel):
    type: Literal["ExportAssignment"] = "ExportAssignment"
    value: Identifier

    def generate(self):
        return f"module.exports = {self.value.generate()}"


class ExpressionStatement(BaseModel):
    """`module.exports = <value>;`"""
    type: Literal["ExpressionStatement"] = "ExpressionStatement"
    expression: ExportAssignment

    def generate(self):
        return self.expression.generate() + ";"


Statement = Annotated[
    Union[
        ImportDeclaration,
        ExportNamedDeclaration,
        Passthrough,
        VariableDeclaration,
        ExpressionStatement,
    ],
    Field(discriminator="type"),
]


class Program(BaseModel):
    type: Literal["Program"] = "Program"
    body: List[Statement] = Field(default_factory=list)

    def generate(self):
        return "\n".join(node.generate() for node in self.body)


class Dependency(BaseModel):
    """One module of the bundle: its absolute path and its parsed source."""
    name: str
    source: Program
