# qmlkit

Building blocks for QML editor tooling. Everything here works on plain text
and the filesystem; no Qt installation is needed.

## What is in it

- `qmlkit.formatting`: whitespace-only formatting. `format_qml` re-indents
  by brace and parenthesis depth (ignoring brackets inside strings and
  comments), trims each line, collapses runs of blank lines to one and ends
  the text with a single newline. `format_document` and `format_range` return
  a list of `TextEdit` values (empty when nothing changes). Indentation comes
  from `FormattingOptions(tab_size=4, insert_spaces=True)`; with
  `insert_spaces=False` a tab is used.
- `qmlkit.positions`: `Position` and `Range` dataclasses, and
  `position_to_byte` / `byte_offset_to_position` for converting between
  positions and byte offsets (characters are counted as UTF-8 bytes; out of
  range values clamp).
- `qmlkit.qmldir`: `parse_qmldir` and `parse_qmldir_file` read the
  `module`, `typeinfo`, `depends` and `import` lines of a `qmldir` file into a
  `QMLDirModule` (`name`, `type_info`, `depends`, `imports`, `dir`).
- `qmlkit.qmlls_ini`: `parse_qmlls_ini` reads `buildDir` and `importPaths`
  from a `.qmlls.ini` file into a `QMLLSConfig`; `find_and_parse_qmlls_ini`
  returns the first one found among a list of roots, or `None`.
- `qmlkit.modules`: `qml_import_paths` lists existing system Qt QML
  directories followed by those in `QML_IMPORT_PATH` and `QML2_IMPORT_PATH`;
  `discover_modules` walks a directory for `qmldir` files whose type-info
  file exists, returning `DiscoveredModule` values and recording each
  module's `qmldir` for `lookup_module_qmldir` (first recorded path wins).
- `qmlkit.imports`: `resolve_import_target` turns the source of an `import`
  into an `ImportTarget(path, tooltip)` or `None`. Quoted paths resolve
  relative to the document's directory and prefer a `qmldir` inside a target
  directory; module ids look up recorded modules, dropping trailing dotted
  segments until one matches.
- `qmlkit.completion_context`: `detect_completion_context` classifies the
  cursor on a line as a `CompletionContext`; helpers such as
  `identifier_before_dot`, `open_brace_stack_before` and
  `enclosing_type_from_text` work out context from raw text.
- `qmlkit.scanner`: `QmljsScanner.scan` recognises the external tokens of
  the QML/JavaScript grammar (automatic semicolons, template characters, the
  ternary `?`, HTML comments, JSX text) over a `StringLexer`, given the set
  of `ExternalToken` values that are valid.
- `qmlkit.bindings`: `extract_id_from_binding`, `is_color_keyword`,
  `is_quoted_string` and `param_name`.
- `qmlkit.errors`: `HandlerError` and a few specific exception types, plus
  `safe_string` and `safe_len`.

## What it does not do

There is no language server, no command-line program and no QML parser or
syntax tree here. Features that need a parse tree, such as hover, go to
definition, diagnostics, folding and inlay hints, are not provided; the
modules above are the text- and file-level pieces such features build on.

## Installation

```
pip install qmlkit
```

## Examples

```python
from qmlkit.formatting import FormattingOptions, format_qml

source = "Rectangle {\nwidth: 100\n}\n"
print(format_qml(source, FormattingOptions(tab_size=4, insert_spaces=True)))
```

Output:

```
Rectangle {
    width: 100
}
```

```python
from qmlkit.qmldir import parse_qmldir

module = parse_qmldir("module QtQuick\ntypeinfo plugins.qmltypes\n")
print(module.name, module.type_info)   # QtQuick plugins.qmltypes
```

```python
from qmlkit.scanner import ExternalToken, QmljsScanner, ResultSymbol, StringLexer

lexer = StringLexer("\nfoo")
found = QmljsScanner().scan(lexer, [ExternalToken.AUTO_SEMICOLON])
print(found, lexer.result_symbol is ResultSymbol.AUTO_SEMICOLON)   # True True
```

## Running the tests

```
pip install -e ".[test]"
pytest
```