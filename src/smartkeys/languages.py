# smartkeys/languages.py
"""
Built-in language definitions.

Each definition bundles the keyboard buttons (grouped into tabs), the
affinity table used by the scoring engine, the tokenizer's syntax tables,
new-line starter weights and canonical placeholder fill values.

Order of SUPPORTED_LANGUAGES matters: the first entry is the fallback for
unknown keys and extensions.
"""

from __future__ import annotations
from typing import Dict, Iterable, Tuple

from .models import (
    BlockComment,
    KeyboardTab,
    LanguageDefinition,
    LanguageSyntax,
    SnippetItem,
    TemplateMatchType as T,
)

Row = Tuple[str, str, str]


def _tab(key: str, label: str, rows: Iterable[Row]) -> KeyboardTab:
    return KeyboardTab(key=key, label=label, data=tuple(SnippetItem(*r) for r in rows))


def _seq(table: Dict[str, list]) -> Dict[str, Tuple[str, ...]]:
    return {k: tuple(v) for k, v in table.items()}


# Punctuation every language gets as its last tab. Language-specific buttons
# declared earlier win the label dedup in the candidate pool.
SYMBOL_ROWS: Tuple[Row, ...] = (
    ("sym_1", "(", "("),
    ("sym_2", ")", ")"),
    ("sym_3", "[", "["),
    ("sym_4", "]", "]"),
    ("sym_5", "{", "{"),
    ("sym_6", "}", "}"),
    ("sym_7", '"', '""'),
    ("sym_8", "'", "''"),
    ("sym_9", ",", ", "),
    ("sym_10", ".", "."),
    ("sym_11", ";", ";"),
    ("sym_12", ":", ":"),
    ("sym_13", "==", " == "),
    ("sym_14", "!=", " != "),
    ("sym_15", "<", " < "),
    ("sym_16", ">", " > "),
    ("sym_17", "<=", " <= "),
    ("sym_18", ">=", " >= "),
    ("sym_19", "+", " + "),
    ("sym_20", "-", " - "),
    ("sym_21", "*", " * "),
    ("sym_22", "/", " / "),
    ("sym_23", "%", " % "),
    ("sym_24", "&&", " && "),
    ("sym_25", "||", " || "),
    ("sym_26", "[]", "[]"),
    ("sym_27", "{}", "{}"),
)


def _symbols() -> KeyboardTab:
    return _tab("symbols", "Symbols", SYMBOL_ROWS)


# ---------------------------------------------------------------- Python

PYTHON = LanguageDefinition(
    key="python",
    name="Python",
    file_extensions=frozenset({"py", "pyw", "pyi"}),
    snippets=(
        _tab("basic", "Basic", [
            ("py_1", "=", "= "),
            ("py_2", "+=", "+= "),
            ("py_3", "var", "var"),
            ("py_4", ":", ":"),
            ("py_5", "0", "0"),
            ("py_6", "1", "1"),
            ("py_7", "10", "10"),
            ("py_8", "''", "''"),
            ("py_9", "i", "i"),
            ("py_10", "x", "x"),
        ]),
        _tab("controlFlow", "Control", [
            ("py_11", "if", "if condition:\n    "),
            ("py_12", "else", "else:\n    "),
            ("py_13", "elif", "elif condition:\n    "),
            ("py_14", "for", "for var in range(var):\n    "),
            ("py_15", "while", "while condition:\n    "),
            ("py_16", "try", "try:\n    \nexcept Exception as var:\n    "),
            ("py_17", "def", "def function(var):\n    "),
            ("py_18", "class", "class ClassName:\n    def __init__(self, var):\n        "),
            ("py_19", "in", "in "),
            ("py_20", "return", "return "),
        ]),
        _tab("functions", "Functions", [
            ("py_21", "print", "print("),
            ("py_22", "input", "input("),
            ("py_23", "len", "len("),
            ("py_24", "range", "range("),
            ("py_25", "enumerate", "enumerate("),
            ("py_26", "zip", "zip("),
            ("py_27", "open", "open("),
            ("py_28", ")", ")"),
            ("py_29", "import", "import "),
            ("py_30", "from", "from module import "),
        ]),
        _tab("dataTypes", "Types", [
            ("py_31", "type", "type("),
            ("py_32", "int", "int("),
            ("py_33", "str", "str("),
            ("py_34", "float", "float("),
            ("py_35", "bool", "bool("),
            ("py_36", "None", "None"),
            ("py_37", "True", "True"),
            ("py_38", "False", "False"),
            ("py_39", "[]", "[]"),
            ("py_40", "{}", "{}"),
        ]),
        _tab("collections", "Collections", [
            ("py_41", "defaultdict", "collections.defaultdict("),
            ("py_42", "Counter", "collections.Counter("),
            ("py_43", "OrderedDict", "collections.OrderedDict("),
            ("py_44", "deque", "collections.deque("),
            ("py_45", "heappush", "heapq.heappush("),
            ("py_46", "heappop", "heapq.heappop("),
            ("py_47", "namedtuple", "collections.namedtuple("),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        # control flow
        "for": ["i", "var"],
        "i": ["in"],
        "var": ["in", "=", "+", "-", "*", "/", "%", "<", ">", "<=", ">="],
        "if": ["condition", "var"],
        "elif": ["condition", "var"],
        "else": [":"],
        "while": ["condition", "var"],
        "condition": [":", "==", "!=", "<", ">", "<=", ">=", "and", "or", "not"],
        # functions and iterables
        "in": ["range", "enumerate", "zip", "[]", "{}", "var"],
        "range": ["("],
        "enumerate": ["("],
        "zip": ["("],
        "len": ["("],
        "print": ["("],
        "input": ["("],
        # operators
        "=": ["var", "0", "1", "[", "{", "(", "input", "int", "str", "float",
              "bool", '"', "'", "None", "True", "False"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "def", "class", "if", "elif", "else", "for", "while", "try", "except", "finally",
            "import", "from", "as", "return", "yield", "break", "continue", "pass", "lambda",
            "and", "or", "not", "in", "is", "True", "False", "None", "with", "async", "await",
        }),
        builtins=frozenset({
            "print", "input", "len", "range", "enumerate", "zip", "map", "filter", "reduce",
            "str", "int", "float", "bool", "list", "dict", "set", "tuple", "type", "isinstance",
        }),
        operators=("=", "+=", "-=", "*=", "/=", "==", "!=", "<", ">", "<=", ">=", "and", "or", "not"),
        string_delimiters=frozenset({'"', "'"}),
        comment_start="#",
    ),
    starters={
        "if": 0.9, "for": 0.8, "while": 0.7, "def": 0.6, "class": 0.6, "var": 0.6,
        "try": 0.5, "import": 0.5, "from": 0.5, "print": 0.4, "=": 0.3,
    },
    placeholder_values={
        T.FUNCTION: ("main", "solve", "helper"),
        T.CLASS: ("Solution", "Node"),
        T.VARIABLE: ("result", "data", "value", "item", "index", "count"),
        T.CONDITION: ("x > 0", "i < len(arr)", "data is not None"),
        T.MODULE: ("os", "sys", "math", "random", "json", "collections"),
        T.TYPE: ("int", "str", "float", "bool", "list", "dict"),
    },
)

# ------------------------------------------------------------ JavaScript

_JS_CONTROL: Tuple[Row, ...] = (
    ("js_11", "if", "if (condition) {\n    \n}"),
    ("js_12", "else", "else {\n    \n}"),
    ("js_13", "for", "for (let var = 0; var < var; var++) {\n    \n}"),
    ("js_14", "while", "while (condition) {\n    \n}"),
    ("js_15", "switch", "switch (var) {\n    case var:\n        break;\n    default:\n        break;\n}"),
    ("js_16", "try", "try {\n    \n} catch (var) {\n    \n}"),
    ("js_17", "function", "function function(var) {\n    \n}"),
    ("js_18", "=>", "=> "),
    ("js_19", "return", "return "),
    ("js_20", "break", "break;"),
)

_JS_FUNCTIONS: Tuple[Row, ...] = (
    ("js_21", "console.log", "console.log("),
    ("js_22", "alert", "alert("),
    ("js_23", "prompt", "prompt("),
    ("js_24", "parseInt", "parseInt("),
    ("js_25", "parseFloat", "parseFloat("),
    ("js_26", "JSON.parse", "JSON.parse("),
    ("js_27", "JSON.stringify", "JSON.stringify("),
    ("js_28", ")", ")"),
    ("js_29", "import", 'import { } from "";'),
    ("js_30", "export", "export "),
)

_JS_DATA_TYPES: Tuple[Row, ...] = (
    ("js_31", "let", "let "),
    ("js_32", "const", "const "),
    ("js_33", "var", "var "),
    ("js_34", "null", "null"),
    ("js_35", "undefined", "undefined"),
    ("js_36", "[]", "[]"),
    ("js_37", "{}", "{}"),
    ("js_38", "new", "new "),
    ("js_39", "Array", "Array("),
    ("js_40", "Object", "Object("),
)

_JS_SEQUENCES = {
    "if": ["(", "condition"],
    "else": ["{", "if"],
    "for": ["("],
    "while": ["(", "condition"],
    "switch": ["(", "var"],
    "let": ["var"],
    "const": ["var"],
    "var": ["var"],
    "function": ["name"],
    "console.log": ["("],
    "alert": ["("],
    "parseInt": ["("],
    "=": ["var", "0", "1", "[", "{", "null", "undefined", "true", "false", '"', "'"],
    "=>": ["{"],
}

_JS_KEYWORDS = frozenset({
    "function", "let", "const", "var", "if", "else", "for", "while", "do", "switch", "case", "default",
    "try", "catch", "finally", "throw", "return", "break", "continue", "true", "false", "null", "undefined",
    "class", "extends", "import", "export", "from", "as", "async", "await", "yield", "new", "this", "super",
})

_JS_BUILTINS = frozenset({
    "console", "alert", "prompt", "parseInt", "parseFloat", "isNaN", "isFinite", "Array", "Object", "String",
    "Number", "Boolean", "Date", "Math", "JSON", "RegExp", "Error", "Promise", "Set", "Map", "WeakSet", "WeakMap",
})

_C_BLOCK = BlockComment("/*", "*/")

_JS_STARTERS = {
    "const": 0.95, "let": 0.9, "if": 0.85, "for": 0.8, "function": 0.75,
    "while": 0.7, "return": 0.6, "console.log": 0.5,
}

_JS_PLACEHOLDERS = {
    T.FUNCTION: ("main", "handleClick", "fetchData"),
    T.CLASS: ("App", "Component"),
    T.VARIABLE: ("result", "data", "value", "item", "index"),
    T.CONDITION: ("x > 0", "i < arr.length", "data !== null"),
    T.MODULE: ("fs", "path", "react"),
    T.TYPE: ("number", "string", "boolean", "object"),
}

JAVASCRIPT = LanguageDefinition(
    key="javascript",
    name="JavaScript",
    file_extensions=frozenset({"js", "jsx", "mjs"}),
    snippets=(
        _tab("basic", "Basic", [
            ("js_1", "let", "let "),
            ("js_2", "const", "const "),
            ("js_3", "var", "var "),
            ("js_4", "var", "var"),
            ("js_5", "name", "name"),
            ("js_6", "=", " = "),
            ("js_7", "0", "0"),
            ("js_8", "true", "true"),
            ("js_9", "false", "false"),
            ("js_10", ";", ";"),
        ]),
        _tab("controlFlow", "Control", _JS_CONTROL),
        _tab("functions", "Functions", _JS_FUNCTIONS),
        _tab("dataTypes", "Types", _JS_DATA_TYPES),
        _symbols(),
    ),
    sequences=_seq(_JS_SEQUENCES),
    syntax=LanguageSyntax(
        keywords=_JS_KEYWORDS,
        builtins=_JS_BUILTINS,
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "===", "!=", "!==", "<", ">", "<=", ">=", "&&", "||", "!"),
        string_delimiters=frozenset({'"', "'", "`"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters=_JS_STARTERS,
    placeholder_values=_JS_PLACEHOLDERS,
)

# ------------------------------------------------------------ TypeScript

TYPESCRIPT = LanguageDefinition(
    key="typescript",
    name="TypeScript",
    file_extensions=frozenset({"ts", "tsx"}),
    snippets=(
        _tab("basic", "Basic", [
            ("ts_1", "let", "let "),
            ("ts_2", "const", "const "),
            ("ts_3", "var", "var "),
            ("ts_4", "var", "var"),
            ("ts_5", "name", "name"),
            ("ts_6", ":", ": "),
            ("ts_9", "=", " = "),
            ("ts_10", "0", "0"),
        ]),
        _tab("controlFlow", "Control", _JS_CONTROL),
        _tab("functions", "Functions", _JS_FUNCTIONS),
        _tab("dataTypes", "Types", _JS_DATA_TYPES + (
            ("ts_41", "interface", "interface Name {\n    \n}"),
            ("ts_42", "type alias", "type Name = "),
            ("ts_43", "enum", "enum Name {\n    \n}"),
            ("ts_44", "type", "type"),
            ("ts_45", "string", "string"),
            ("ts_46", "number", "number"),
            ("ts_47", "boolean", "boolean"),
        )),
        _symbols(),
    ),
    sequences=_seq({
        **_JS_SEQUENCES,
        "interface": ["Name"],
        "type": ["Name"],
        "enum": ["Name"],
        ":": ["string", "number", "boolean", "any", "void"],
    }),
    syntax=LanguageSyntax(
        keywords=_JS_KEYWORDS | {
            "interface", "type", "enum", "public", "private", "protected", "readonly", "static",
            "abstract", "implements", "namespace", "module", "declare", "keyof", "typeof",
        },
        builtins=_JS_BUILTINS | {"string", "number", "boolean", "any", "void", "never", "unknown"},
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "===", "!=", "!==", "<", ">", "<=", ">=", "&&", "||", "!"),
        string_delimiters=frozenset({'"', "'", "`"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters=_JS_STARTERS,
    placeholder_values=_JS_PLACEHOLDERS,
)

# ------------------------------------------------------------------ Java

JAVA = LanguageDefinition(
    key="java",
    name="Java",
    file_extensions=frozenset({"java"}),
    snippets=(
        _tab("basic", "Basic", [
            ("java_1", "public", "public "),
            ("java_2", "private", "private "),
            ("java_4", "int", "int "),
            ("java_5", "var", "var"),
            ("java_6", "name", "name"),
            ("java_7", "i", "i"),
            ("java_8", "=", " = "),
            ("java_9", "0", "0"),
            ("java_10", ";", ";"),
        ]),
        _tab("controlFlow", "Control", [
            ("java_11", "if", "if (condition) {\n    \n}"),
            ("java_12", "else", "else {\n    \n}"),
            ("java_13", "for", "for (int var = 0; var < var; var++) {\n    \n}"),
            ("java_14", "while", "while (condition) {\n    \n}"),
            ("java_15", "switch", "switch (var) {\n    case var:\n        break;\n    default:\n        break;\n}"),
            ("java_16", "try", "try {\n    \n} catch (Exception var) {\n    \n}"),
            ("java_17", "method", "public type function(var) {\n    \n}"),
            ("java_18", "class", "public class ClassName {\n    \n}"),
            ("java_19", "return", "return "),
            ("java_20", "break", "break;"),
        ]),
        _tab("functions", "Functions", [
            ("java_21", "System.out.println", "System.out.println("),
            ("java_22", "System.out.print", "System.out.print("),
            ("java_23", "Scanner", "Scanner("),
            ("java_24", "Integer.parseInt", "Integer.parseInt("),
            ("java_25", "Double.parseDouble", "Double.parseDouble("),
            ("java_26", "String.valueOf", "String.valueOf("),
            ("java_27", "Arrays.toString", "Arrays.toString("),
            ("java_28", ")", ")"),
            ("java_29", "import", "import "),
            ("java_30", "package", "package "),
        ]),
        _tab("dataTypes", "Types", [
            ("java_3", "type", "type "),
            ("java_31", "String", "String "),
            ("java_32", "double", "double "),
            ("java_33", "boolean", "boolean "),
            ("java_34", "new", "new "),
            ("java_35", "null", "null"),
            ("java_36", "true", "true"),
            ("java_37", "false", "false"),
            ("java_39", "ArrayList", "ArrayList<>("),
            ("java_40", "HashMap", "HashMap<>("),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        "if": ["(", "condition"],
        "else": ["{", "if"],
        "for": ["("],
        "while": ["(", "condition"],
        "int": ["var"],
        "String": ["var"],
        "double": ["var"],
        "boolean": ["var"],
        "System.out.println": ["("],
        "System.out.print": ["("],
        "Integer.parseInt": ["("],
        "=": ["var", "0", "1", "new", "null", "true", "false", '"'],
        "type": [" ", "var"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "public", "private", "protected", "static", "final", "abstract", "class", "interface", "extends",
            "implements", "if", "else", "for", "while", "do", "switch", "case", "default", "try", "catch",
            "finally", "throw", "throws", "return", "break", "continue", "new", "this", "super", "null",
            "true", "false", "import", "package", "synchronized", "volatile", "transient", "native",
            "strictfp", "enum", "assert",
        }),
        builtins=frozenset({
            "int", "double", "float", "long", "short", "byte", "char", "boolean", "void", "String", "Object",
            "System", "Math", "Arrays", "Collections", "List", "ArrayList", "Map", "HashMap", "Set", "HashSet",
        }),
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!", "++", "--"),
        string_delimiters=frozenset({'"', "'"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters={
        "int": 0.95, "String": 0.9, "if": 0.85, "for": 0.8, "while": 0.7,
        "return": 0.6, "System.out.println": 0.5,
    },
    placeholder_values={
        T.FUNCTION: ("main", "calculate", "process"),
        T.CLASS: ("Main", "Solution"),
        T.VARIABLE: ("result", "count", "value", "index"),
        T.CONDITION: ("i < n", "x > 0", "obj != null"),
        T.MODULE: ("java.util.*", "java.io.*"),
        T.TYPE: ("int", "String", "double", "boolean", "void"),
    },
)

# ------------------------------------------------------------------- C++

CPP = LanguageDefinition(
    key="cpp",
    name="C++",
    file_extensions=frozenset({"cpp", "cc", "cxx", "c++", "hpp", "h++"}),
    snippets=(
        _tab("basic", "Basic", [
            ("cpp_1", "#include", "#include <>"),
            ("cpp_3", "int", "int "),
            ("cpp_4", "var", "var"),
            ("cpp_5", "i", "i"),
            ("cpp_6", "j", "j"),
            ("cpp_7", "=", " = "),
            ("cpp_8", "0", "0"),
            ("cpp_9", ".size()", ".size()"),
            ("cpp_10", ";", ";"),
            ("cpp_11", "cout", "cout << "),
            ("cpp_12", "endl", "endl"),
        ]),
        _tab("controlFlow", "Control", [
            ("cpp_13", "if", "if (condition) {\n    \n}"),
            ("cpp_14", "else", "else {\n    \n}"),
            ("cpp_15", "for", "for (int var = 0; var < var; var++) {\n    \n}"),
            ("cpp_16", "for-each", "for (auto& var : var) {\n    \n}"),
            ("cpp_17", "while", "while (condition) {\n    \n}"),
            ("cpp_18", "switch", "switch (var) {\ncase var:\n    break;\ndefault:\n    break;\n}"),
        ]),
        _tab("functions", "Functions", [
            ("cpp_19", "main", "int main(var) {\n    \n    return 0;\n}"),
            ("cpp_20", "function", "type function(var) {\n    \n}"),
            ("cpp_21", "return", "return "),
            ("cpp_22", "class", "class ClassName {\npublic:\n    \nprivate:\n    \n};"),
            ("cpp_23", "<<", " << "),
            ("cpp_24", ">>", " >> "),
            ("cpp_25", "cin", "cin >> "),
        ]),
        _tab("dataTypes", "Types", [
            ("cpp_2", "type", "type "),
            ("cpp_26", "const", "const "),
            ("cpp_27", "double", "double "),
            ("cpp_28", "bool", "bool "),
            ("cpp_29", "auto", "auto "),
            ("cpp_30", "string", "string "),
            ("cpp_31", "true", "true"),
            ("cpp_32", "false", "false"),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        "#include": ["<iostream>", "<vector>", "<string>", "<algorithm>"],
        "cout": ["<<"],
        "std::cout": ["<<"],
        "cin": [">>"],
        "std::cin": [">>"],
        "if": ["("],
        "for": ["("],
        "while": ["("],
        "int": ["var"],
        "string": ["var"],
        "double": ["var"],
        "bool": ["var"],
        "auto": ["var"],
        "vector<int>": ["var"],
        "map<int, int>": ["var"],
        "=": ["0", "1", "true", "false", '"', "new", "var"],
        "var": ["=", "[", "."],
        "type": [" ", "var"],
        ".size": ["()"],
        ".push_back": ["("],
        ".begin": ["()"],
        ".end": ["()"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "int", "double", "float", "char", "bool", "void", "auto", "const", "static", "class", "struct",
            "if", "else", "for", "while", "do", "switch", "case", "default", "break", "continue",
            "return", "try", "catch", "throw", "public", "private", "protected", "virtual", "override",
            "namespace", "using", "template", "typename", "new", "delete", "true", "false", "nullptr",
        }),
        builtins=frozenset({"std", "cout", "cin", "endl", "vector", "map", "string", "pair", "make_pair"}),
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!",
                   "++", "--", "<<", ">>"),
        string_delimiters=frozenset({'"', "'"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters={
        "int": 0.95, "auto": 0.9, "if": 0.85, "for": 0.8, "while": 0.7,
        "return": 0.6, "cout": 0.5,
    },
    placeholder_values={
        T.FUNCTION: ("solve", "helper", "compute"),
        T.CLASS: ("Solution", "Node"),
        T.VARIABLE: ("n", "result", "count", "idx"),
        T.CONDITION: ("i < n", "x > 0", "ptr != nullptr"),
        T.MODULE: ("<iostream>", "<vector>", "<string>"),
        T.TYPE: ("int", "double", "bool", "std::string", "void", "auto"),
    },
)

# --------------------------------------------------------------------- C

C = LanguageDefinition(
    key="c",
    name="C",
    file_extensions=frozenset({"c", "h"}),
    snippets=(
        _tab("basic", "Basic", [
            ("c_1", "#include", "#include <>"),
            ("c_2", "int", "int "),
            ("c_3", "double", "double "),
            ("c_4", "char", "char "),
            ("c_5", "var", "var"),
            ("c_6", "name", "name"),
            ("c_7", "i", "i"),
            ("c_8", "=", " = "),
            ("c_9", "0", "0"),
            ("c_10", ";", ";"),
        ]),
        _tab("controlFlow", "Control", [
            ("c_11", "if", "if (condition) {\n    \n}"),
            ("c_12", "else", "else {\n    \n}"),
            ("c_13", "for", "for (int var = 0; var < var; var++) {\n    \n}"),
            ("c_14", "while", "while (condition) {\n    \n}"),
            ("c_15", "switch", "switch (var) {\ncase var:\n    break;\ndefault:\n    break;\n}"),
        ]),
        _tab("functions", "Functions", [
            ("c_16", "main", "int main(var) {\n    \n    return 0;\n}"),
            ("c_17", "function", "type function(var) {\n    \n}"),
            ("c_18", "return", "return "),
            ("c_19", "malloc", "malloc("),
            ("c_20", "free", "free("),
            ("c_27", "printf", "printf("),
            ("c_28", "scanf", "scanf("),
        ]),
        _tab("dataTypes", "Types", [
            ("c_25", "type", "type "),
            ("c_21", "struct", "struct "),
            ("c_22", "typedef", "typedef "),
            ("c_23", "const", "const "),
            ("c_24", "static", "static "),
            ("c_26", "NULL", "NULL"),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        "#include": ["<stdio.h>", "<stdlib.h>", "<string.h>"],
        "printf": ["("],
        "scanf": ["("],
        "for": ["("],
        "if": ["("],
        "while": ["("],
        "int": ["var", "name"],
        "double": ["var", "name"],
        "char": ["var", "name"],
        "=": ["0", "var", "NULL", '"', "'"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "int", "double", "float", "char", "void", "const", "static", "struct", "typedef", "enum",
            "if", "else", "for", "while", "do", "switch", "case", "default", "break", "continue",
            "return", "goto", "sizeof", "auto", "register", "extern", "volatile", "signed", "unsigned",
        }),
        builtins=frozenset({"printf", "scanf", "malloc", "free", "strlen", "strcpy", "strcmp", "NULL"}),
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!", "++", "--"),
        string_delimiters=frozenset({'"', "'"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters={
        "int": 0.95, "char": 0.85, "if": 0.85, "for": 0.8, "while": 0.7,
        "return": 0.6, "printf": 0.5,
    },
    placeholder_values={
        T.FUNCTION: ("main", "helper", "compute"),
        T.CLASS: ("Node",),
        T.VARIABLE: ("n", "result", "count", "buf"),
        T.CONDITION: ("i < n", "x > 0", "ptr != NULL"),
        T.MODULE: ("<stdio.h>", "<stdlib.h>", "<string.h>"),
        T.TYPE: ("int", "double", "char", "void", "size_t"),
    },
)

# -------------------------------------------------------------------- Go

GO = LanguageDefinition(
    key="go",
    name="Go",
    file_extensions=frozenset({"go"}),
    snippets=(
        _tab("basic", "Basic", [
            ("go_1", "package", "package "),
            ("go_2", "var", "var "),
            ("go_3", "name", "name"),
            ("go_4", "string", "string"),
            ("go_5", "int", "int"),
            ("go_6", ":=", " := "),
            ("go_7", "=", " = "),
            ("go_8", "0", "0"),
            ("go_9", "true", "true"),
            ("go_10", "false", "false"),
        ]),
        _tab("controlFlow", "Control", [
            ("go_11", "if", "if condition {\n    \n}"),
            ("go_12", "else", "else {\n    \n}"),
            ("go_13", "for", "for var := 0; var < var; var++ {\n    \n}"),
            ("go_14", "range", "range "),
            ("go_15", "switch", "switch var {\ncase var:\n    \ndefault:\n    \n}"),
            ("go_16", "defer", "defer "),
        ]),
        _tab("functions", "Functions", [
            ("go_17", "main", "func main(var) {\n    \n}"),
            ("go_18", "return", "return "),
            ("go_19", "make", "make("),
            ("go_20", "append", "append("),
            ("go_21", "fmt.Println", "fmt.Println("),
            ("go_22", "fmt.Printf", "fmt.Printf("),
            ("go_27", "func", "func function(var) {\n    \n}"),
        ]),
        _tab("dataTypes", "Types", [
            ("go_28", "type", "type"),
            ("go_23", "map", "map[string]int"),
            ("go_24", "struct", "struct {\n    \n}"),
            ("go_25", "interface", "interface {\n    \n}"),
            ("go_26", "chan", "chan "),
            ("go_29", "err", "err"),
            ("go_30", "nil", "nil"),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        "package": ["main"],
        "import": ["fmt", '"fmt"'],
        "func": ["main"],
        "fmt.Println": ["("],
        "fmt.Printf": ["("],
        "for": ["i", "range"],
        "if": ["err"],
        "err": ["!="],
        "!=": ["nil"],
        "var": ["name"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "package", "import", "func", "var", "const", "type", "struct", "interface", "chan", "map",
            "if", "else", "for", "range", "switch", "case", "default", "break", "continue", "fallthrough",
            "return", "go", "defer", "select", "true", "false", "nil", "make", "new", "len", "cap",
        }),
        builtins=frozenset({"fmt", "append", "make", "len", "cap", "new", "delete", "panic", "recover"}),
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!",
                   "++", "--", ":=", "<-"),
        string_delimiters=frozenset({'"', "`"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters={
        "var": 0.95, "if": 0.85, "for": 0.8, "func": 0.7, "return": 0.6,
        "defer": 0.5, "fmt.Println": 0.4,
    },
    placeholder_values={
        T.FUNCTION: ("main", "handle", "run"),
        T.CLASS: ("Server", "Config"),
        T.VARIABLE: ("err", "ctx", "result", "n"),
        T.CONDITION: ("err != nil", "i < n", "ok"),
        T.MODULE: ("fmt", "os", "strings"),
        T.TYPE: ("int", "string", "bool", "error", "float64"),
    },
)

# ------------------------------------------------------------------ Rust

RUST = LanguageDefinition(
    key="rust",
    name="Rust",
    file_extensions=frozenset({"rs"}),
    snippets=(
        _tab("basic", "Basic", [
            ("rust_1", "let", "let "),
            ("rust_2", "mut", "mut "),
            ("rust_3", "name", "name"),
            ("rust_4", ":", ": "),
            ("rust_5", "i32", "i32"),
            ("rust_6", "String", "String"),
            ("rust_7", "=", " = "),
            ("rust_8", "0", "0"),
            ("rust_9", "true", "true"),
            ("rust_10", "false", "false"),
        ]),
        _tab("controlFlow", "Control", [
            ("rust_11", "if", "if condition {\n    \n}"),
            ("rust_12", "else", "else {\n    \n}"),
            ("rust_13", "for", "for var in 0..var {\n    \n}"),
            ("rust_14", "while", "while condition {\n    \n}"),
            ("rust_15", "match", "match var {\n    var => var,\n    _ => var,\n}"),
            ("rust_16", "loop", "loop {\n    \n}"),
            ("rust_28", "in", "in "),
        ]),
        _tab("functions", "Functions", [
            ("rust_17", "main", "fn main(var) {\n    \n}"),
            ("rust_18", "return", "return "),
            ("rust_19", "impl", "impl "),
            ("rust_20", "use", "use "),
            ("rust_29", "println!", "println!("),
        ]),
        _tab("dataTypes", "Types", [
            ("rust_21", "type", "type"),
            ("rust_22", "Vec", "Vec<>"),
            ("rust_23", "HashMap", "HashMap<String, i32>"),
            ("rust_24", "Option", "Option<>"),
            ("rust_25", "Result", "Result<>"),
            ("rust_26", "struct", "struct "),
            ("rust_27", "enum", "enum "),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        "let": ["mut", "name"],
        "mut": ["name"],
        "fn": ["main"],
        "println!": ["("],
        "use": ["std"],
        "match": ["value"],
        "for": ["i"],
        ":": ["i32", "String", "Vec"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "fn", "let", "mut", "const", "static", "struct", "enum", "impl", "trait", "type", "mod", "use", "pub",
            "if", "else", "match", "for", "while", "loop", "break", "continue", "return", "yield",
            "true", "false", "Some", "None", "Ok", "Err", "self", "Self", "super", "crate", "where", "in",
        }),
        builtins=frozenset({"println", "print", "vec", "format", "panic", "assert", "Vec", "HashMap",
                            "Option", "Result"}),
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!", "->", "=>"),
        string_delimiters=frozenset({'"'}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters={
        "let": 0.95, "if": 0.85, "for": 0.8, "match": 0.75, "while": 0.7,
        "return": 0.6, "println!": 0.5,
    },
    placeholder_values={
        T.FUNCTION: ("main", "run", "parse"),
        T.CLASS: ("Config", "State"),
        T.VARIABLE: ("result", "value", "count", "idx"),
        T.CONDITION: ("x > 0", "i < n", "opt.is_some()"),
        T.MODULE: ("std::collections::HashMap", "std::io"),
        T.TYPE: ("i32", "u64", "String", "bool", "usize"),
    },
)

# -------------------------------------------------------------------- C#

CSHARP = LanguageDefinition(
    key="csharp",
    name="C#",
    file_extensions=frozenset({"cs"}),
    snippets=(
        _tab("basic", "Basic", [
            ("cs_1", "public", "public "),
            ("cs_2", "private", "private "),
            ("cs_3", "int", "int "),
            ("cs_4", "string", "string "),
            ("cs_5", "var", "var "),
            ("cs_6", "name", "name"),
            ("cs_7", "=", " = "),
            ("cs_8", "0", "0"),
            ("cs_9", "true", "true"),
            ("cs_10", ";", ";"),
        ]),
        _tab("controlFlow", "Control", [
            ("cs_11", "if", "if (condition)\n{\n    \n}"),
            ("cs_12", "else", "else\n{\n    \n}"),
            ("cs_13", "for", "for (int var = 0; var < var; var++)\n{\n    \n}"),
            ("cs_14", "foreach", "foreach (var var in var)\n{\n    \n}"),
            ("cs_15", "while", "while (condition)\n{\n    \n}"),
            ("cs_16", "try", "try\n{\n    \n}\ncatch (Exception var)\n{\n    \n}"),
            ("cs_25", "in", "in "),
        ]),
        _tab("functions", "Functions", [
            ("cs_17", "Main", "static void Main(var[] var)\n{\n    \n}"),
            ("cs_18", "method", "public type function(var)\n{\n    \n}"),
            ("cs_19", "return", "return "),
            ("cs_20", "namespace", "namespace "),
            ("cs_24", "Console.WriteLine", "Console.WriteLine("),
        ]),
        _tab("dataTypes", "Types", [
            ("cs_26", "type", "type "),
            ("cs_21", "List", "List<>"),
            ("cs_22", "Dictionary", "Dictionary<string, int>"),
            ("cs_23", "Array", "int[] "),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        "using": ["System", "System.Collections.Generic"],
        "Console.WriteLine": ["("],
        "for": ["("],
        "foreach": ["("],
        "if": ["("],
        "while": ["("],
        "public": ["class", "void", "int", "string"],
        "int": ["name"],
        "string": ["name"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "using", "namespace", "class", "struct", "interface", "enum", "public", "private", "protected",
            "internal", "static", "readonly", "const", "virtual", "override", "abstract", "sealed", "partial",
            "if", "else", "for", "foreach", "while", "do", "switch", "case", "default", "break", "continue",
            "try", "catch", "finally", "throw", "return", "yield", "true", "false", "null", "new", "this",
            "base", "in",
        }),
        builtins=frozenset({"Console", "string", "int", "double", "bool", "var", "object", "List",
                            "Dictionary", "Array"}),
        operators=("=", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!",
                   "++", "--", "=>"),
        string_delimiters=frozenset({'"', "'"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters={
        "var": 0.95, "int": 0.9, "if": 0.85, "foreach": 0.8, "for": 0.75,
        "return": 0.6, "Console.WriteLine": 0.5,
    },
    placeholder_values={
        T.FUNCTION: ("Main", "Calculate", "Process"),
        T.CLASS: ("Program", "Service"),
        T.VARIABLE: ("result", "count", "item", "value"),
        T.CONDITION: ("i < n", "x > 0", "obj != null"),
        T.MODULE: ("System", "System.Linq", "System.Collections.Generic"),
        T.TYPE: ("int", "string", "bool", "double", "void"),
    },
)

# ------------------------------------------------------------------- PHP

PHP = LanguageDefinition(
    key="php",
    name="PHP",
    file_extensions=frozenset({"php"}),
    snippets=(
        _tab("basic", "Basic", [
            ("php_1", "$", "$"),
            ("php_2", "name", "name"),
            ("php_3", "=", " = "),
            ("php_4", "0", "0"),
            ("php_5", "true", "true"),
            ("php_6", "false", "false"),
            ("php_7", "null", "null"),
            ("php_8", ";", ";"),
            ("php_9", '"', '""'),
            ("php_10", "'", "''"),
        ]),
        _tab("controlFlow", "Control", [
            ("php_11", "if", "if (condition) {\n    \n}"),
            ("php_12", "else", "else {\n    \n}"),
            ("php_13", "for", "for ($var = 0; $var < $var; $var++) {\n    \n}"),
            ("php_14", "foreach", "foreach ($var as $var) {\n    \n}"),
            ("php_15", "while", "while (condition) {\n    \n}"),
            ("php_16", "try", "try {\n    \n} catch (Exception $var) {\n    \n}"),
            ("php_27", "as", "as "),
        ]),
        _tab("functions", "Functions", [
            ("php_17", "function", "function function($var) {\n    \n}"),
            ("php_18", "return", "return "),
            ("php_19", "class", "class ClassName {\n    \n}"),
            ("php_20", "public", "public function "),
            ("php_28", "echo", "echo "),
        ]),
        _tab("dataTypes", "Types", [
            ("php_21", "type", "type"),
            ("php_22", "[]", "[]"),
            ("php_24", "isset", "isset("),
            ("php_25", "empty", "empty("),
            ("php_26", "count", "count("),
        ]),
        _symbols(),
    ),
    sequences=_seq({
        "$": ["name"],
        "echo": ['"'],
        "if": ["("],
        "for": ["("],
        "while": ["("],
        "foreach": ["("],
        "=": ["0", "true", "false", "null", "[]", '"', "'", "$"],
    }),
    syntax=LanguageSyntax(
        keywords=frozenset({
            "if", "else", "elseif", "for", "foreach", "while", "do", "switch", "case", "default", "break",
            "continue", "function", "class", "interface", "trait", "extends", "implements", "public",
            "private", "protected", "static", "final", "abstract", "const", "var", "global", "return",
            "yield", "try", "catch", "finally", "throw", "new", "clone", "instanceof", "true", "false",
            "null", "self", "parent", "this", "as",
        }),
        builtins=frozenset({"echo", "print", "var_dump", "print_r", "isset", "empty", "count", "strlen",
                            "array", "unset"}),
        operators=("=", ".=", "+=", "-=", "*=", "/=", "%=", "==", "===", "!=", "!==", "<", ">", "<=", ">=",
                   "&&", "||", "!", "++", "--", "->", "=>"),
        string_delimiters=frozenset({'"', "'"}),
        comment_start="//",
        block_comment=_C_BLOCK,
    ),
    starters={
        "$": 0.95, "if": 0.85, "foreach": 0.8, "for": 0.75, "function": 0.7,
        "return": 0.6, "echo": 0.5,
    },
    placeholder_values={
        T.FUNCTION: ("index", "handle", "render"),
        T.CLASS: ("Controller", "Model"),
        T.VARIABLE: ("result", "data", "item", "value"),
        T.CONDITION: ("$x > 0", "isset($data)", "$i < count($arr)"),
        T.MODULE: ("App\\Models", "App\\Http"),
        T.TYPE: ("int", "string", "array", "bool"),
    },
)


SUPPORTED_LANGUAGES: Tuple[LanguageDefinition, ...] = (
    PYTHON,
    JAVASCRIPT,
    TYPESCRIPT,
    JAVA,
    CPP,
    C,
    GO,
    RUST,
    CSHARP,
    PHP,
)
