"""
minipack Grammar Definition.

This module contains the Lark grammar for the module-level structure of an
ES module. Import and export declarations are parsed into their parts; any
other code between them is matched as a balanced run of tokens and kept as
source text.

A slash starts a regular expression literal only where an operand may begin,
such as after punctuation or a keyword like return. After an operand it is
division. The runs below track which of the two positions the parser is in,
and the contextual lexer only offers REGEX where it is allowed.
"""

module_grammar = r"""
    start: passthrough? (_module_decl passthrough?)*

    _module_decl: import_decl | export_decl

    // --- Imports ---
    import_decl: "import" "{" import_specifier ("," import_specifier)* [","] "}" "from" STRING [";"]
    import_specifier: NAME ("as" NAME)?

    // --- Exports ---
    export_decl: "export" "{" export_specifier ("," export_specifier)* [","] "}" ("from" STRING)? [";"]
    export_specifier: NAME ("as" NAME)?

    // --- Everything else ---
    passthrough: _after_punct | _after_operand
    _after_punct: _punct | _after_punct _punct | _after_operand _punct
    _after_operand: _operand | REGEX
                  | _after_punct _operand | _after_punct REGEX
                  | _after_operand _operand

    // Inside brackets import and export are ordinary names
    _body: _body_after_punct | _body_after_operand
    _body_after_punct: _punct | _body_after_punct _punct | _body_after_operand _punct
    _body_after_operand: _body_operand | REGEX
                       | _body_after_punct _body_operand | _body_after_punct REGEX
                       | _body_after_operand _body_operand
    _body_operand: _operand | "import" | "export"

    _operand: NAME | NUMBER | STRING | TEMPLATE | "as" | "from" | group
    _punct: PUNCT | ";" | "," | _keyword | block
    _keyword: "return" | "typeof" | "instanceof" | "in" | "new" | "delete" | "void"
            | "throw" | "case" | "do" | "else" | "yield" | "await"

    group: "(" _body? ")" | "[" _body? "]"
    block: "{" _body? "}"

    // --- Terminals ---
    NAME: /(?:[^\W\d]|\$)[\w$]*/
    NUMBER: /\d[\w.]*/
    STRING: /"(?:[^"\\\n]|\\[\s\S])*"|'(?:[^'\\\n]|\\[\s\S])*'/
    TEMPLATE: /`(?:[^`\\]|\\[\s\S])*`/
    REGEX: /\/(?![*\/])(?:[^\n\\\/\[]|\\.|\[(?:[^\n\\\]]|\\.)*\])+\/[a-z]*/
    PUNCT: /[^\s\w$"'`(){}\[\];,]/

    LINE_COMMENT: /\/\/[^\n]*/
    BLOCK_COMMENT: /\/\*[\s\S]*?\*\//

    %import common.WS
    %ignore WS
    %ignore LINE_COMMENT
    %ignore BLOCK_COMMENT
"""
