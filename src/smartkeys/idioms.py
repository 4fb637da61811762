# smartkeys/idioms.py
"""
Language-specific idiom scorers.

An idiom scorer looks at the current line for a partially typed construct
(an open call, a loop header in progress, a declaration waiting for its
name, ...) and names the canonical next button(s) with a fixed confidence.

Each scorer is an ordered cascade of sub-rules:

    loop header  ->  open call  ->  terminator / block opener
                 ->  declaration pairing  ->  call opening

For a given label only the first sub-rule that names it contributes. New
languages are added with `register_scorer`, never by branching here.
"""

from __future__ import annotations
import re
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from . import languages as L
from .models import LanguageDefinition

Suggestions = Dict[str, float]
Rule = Callable[[str], Optional[Suggestions]]


class IdiomScorer(Protocol):
    def score(self, line: str, label: str) -> float: ...


# ---------------------------------------------------------------- helpers

_CALLEE = re.compile(r"([A-Za-z_$][\w.$:!]*)\s*$")
_QUOTES = "\"'`"
# a value that can end an expression: word char, closing bracket or quote
_VALUE_END = re.compile(r"[\w)\]\"'`]$")
_CLOSERS = {")": "(", "]": "[", "}": "{"}


def _unclosed(line: str) -> List[Tuple[int, str]]:
    # (offset, opener) of every bracket still open at end of line, outermost first
    stack: List[Tuple[int, str]] = []
    quote = None
    for i, ch in enumerate(line):
        if quote:
            if ch == quote and line[i - 1] != "\\":
                quote = None
            continue
        if ch in _QUOTES:
            quote = ch
        elif ch in "([{":
            stack.append((i, ch))
        elif ch in _CLOSERS:
            # a closer only cancels the latest opener of its own kind
            for j in range(len(stack) - 1, -1, -1):
                if stack[j][1] == _CLOSERS[ch]:
                    del stack[j]
                    break
    return stack


def open_call(line: str) -> Optional[Tuple[str, str]]:
    """
    Innermost unclosed '(' on the line as (callee, text after the paren).

    The callee is "" for a bare parenthesis. Parens inside quotes are ignored.
    """
    parens = [pos for pos, ch in _unclosed(line) if ch == "("]
    if not parens:
        return None
    pos = parens[-1]
    m = _CALLEE.search(line[:pos])
    return (m.group(1) if m else ""), line[pos + 1:]


def unclosed_bracket(line: str) -> Optional[str]:
    """Innermost '(', '[' or '{' left open on the line, ignoring quoted text."""
    stack = _unclosed(line)
    return stack[-1][1] if stack else None


def _alternation(words: Iterable[str]) -> str:
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


class NullScorer:
    def score(self, line: str, label: str) -> float:
        return 0.0


class RuleScorer:
    """
    Base for rule-cascade scorers.

    Subclasses list their sub-rule method names in `rule_names`, in priority
    order. Each sub-rule returns {label: confidence} or None.
    """
    rule_names: Tuple[str, ...] = (
        "loop_header",
        "iterable_call",
        "terminator",
        "declaration",
        "call_opening",
    )

    def __init__(self, language: LanguageDefinition) -> None:
        self.language = language
        self.reserved = language.syntax.keywords | language.syntax.builtins
        self._rules: Tuple[Rule, ...] = tuple(getattr(self, name) for name in self.rule_names)
        self._last: Tuple[Optional[str], Suggestions] = (None, {})

    def suggestions(self, line: str) -> Suggestions:
        cached_line, cached = self._last
        if cached_line == line:
            return cached
        merged: Suggestions = {}
        for rule in self._rules:
            hits = rule(line)
            if not hits:
                continue
            for label, value in hits.items():
                merged.setdefault(label, value)
        self._last = (line, merged)
        return merged

    def score(self, line: str, label: str) -> float:
        return self.suggestions(line).get(label, 0.0)

    # default sub-rules: nothing matches
    def loop_header(self, line: str) -> Optional[Suggestions]:
        return None

    def iterable_call(self, line: str) -> Optional[Suggestions]:
        return None

    def terminator(self, line: str) -> Optional[Suggestions]:
        return None

    def declaration(self, line: str) -> Optional[Suggestions]:
        return None

    def call_opening(self, line: str) -> Optional[Suggestions]:
        return None

    # shared pieces
    helpers: frozenset = frozenset()
    callables: frozenset = frozenset()
    member_chains: Dict[str, Suggestions] = {}

    def _close_open_call(self, line: str, *, skip: Sequence[str] = ("for",)) -> Optional[Suggestions]:
        call = open_call(line)
        if call is None:
            return None
        name, args = call
        if name in skip:
            return None
        args = args.strip()
        known = name in self.helpers
        if not args:
            return self._empty_call_args(name) if known else None
        if _VALUE_END.search(args):
            return {")": 1.0 if known else 0.85}
        return None

    def _empty_call_args(self, name: str) -> Optional[Suggestions]:
        return {"var": 0.8}

    def _member_chain(self, line: str) -> Optional[Suggestions]:
        for prefix, hits in self.member_chains.items():
            if line.endswith(prefix) and (len(line) == len(prefix) or not line[-len(prefix) - 1].isalnum()):
                return hits
        return None

    def _callable_at_end(self, line: str) -> Optional[Suggestions]:
        if not self.callables:
            return None
        if re.search(r"(?:^|[\s(=,\[])(?:%s)$" % _alternation(self.callables), line):
            return {"(": 0.7}
        return None


# ----------------------------------------------------------------- Python

_PY_FOR_START = re.compile(r"^\s*for\s+$")
_PY_FOR_VARS = re.compile(r"^\s*for\s+[A-Za-z_]\w*(\s*,\s*[A-Za-z_]\w*)*\s+$")
_PY_FOR_IN = re.compile(r"^\s*for\s+[A-Za-z_]\w*(\s*,\s*[A-Za-z_]\w*)*\s+in\s+$")
_PY_BARE_HEADER = re.compile(r"^\s*(else|try|finally)$")
_PY_COND_HEADER = re.compile(r"^\s*(if|elif|while|with)\s+\S")
_PY_FOR_HEADER = re.compile(r"^\s*for\s+.+\s+in\s+\S")
_PY_DEF_HEADER = re.compile(r"^\s*def\s+\w+\s*\(.*\)\s*(->\s*\S+)?$")
_PY_CLASS_HEADER = re.compile(r"^\s*class\s+\w+(\s*\(.*\))?$")
_PY_EXCEPT_HEADER = re.compile(r"^\s*except(\s+[\w.]+(\s+as\s+\w+)?)?$")
_PY_BARE_NAME = re.compile(r"^\s*([A-Za-z_]\w*)\s*$")
_PY_CONDITION_OPERAND = re.compile(r"^\s*(if|elif|while)\s+[A-Za-z_][\w.]*\s+$")


class PythonScorer(RuleScorer):
    helpers = frozenset({"range", "enumerate", "zip", "len"})
    callables = frozenset({
        "print", "input", "len", "range", "enumerate", "zip", "open", "type",
        "int", "str", "float", "bool", "list", "dict", "set", "tuple", "sorted",
    })
    member_chains = {
        "collections.": {"defaultdict": 0.8, "Counter": 0.75, "deque": 0.7,
                         "OrderedDict": 0.7, "namedtuple": 0.65},
        "heapq.": {"heappush": 0.8, "heappop": 0.75},
    }

    def loop_header(self, line: str) -> Optional[Suggestions]:
        if _PY_FOR_START.match(line):
            return {"i": 1.0}
        if _PY_FOR_VARS.match(line):
            return {"in": 1.0}
        m = _PY_FOR_IN.match(line)
        if m:
            if m.group(1):
                # several targets: most likely unpacking enumerate/zip
                return {"enumerate": 1.0, "zip": 0.9, "range": 0.8}
            return {"range": 1.0, "enumerate": 0.9, "zip": 0.8}
        return None

    def iterable_call(self, line: str) -> Optional[Suggestions]:
        return self._close_open_call(line)

    def _empty_call_args(self, name: str) -> Optional[Suggestions]:
        if name == "range":
            return {"len": 0.9, "var": 0.8, "10": 0.7}
        return {"var": 0.9}

    def terminator(self, line: str) -> Optional[Suggestions]:
        s = line.rstrip()
        if not s or s.endswith(":") or open_call(s) is not None:
            return None
        if _PY_BARE_HEADER.match(s) or _PY_DEF_HEADER.match(s) or _PY_CLASS_HEADER.match(s):
            return {":": 1.0}
        if _PY_EXCEPT_HEADER.match(s):
            return {":": 1.0}
        if (_PY_COND_HEADER.match(s) or _PY_FOR_HEADER.match(s)) and _VALUE_END.search(s):
            return {":": 1.0}
        return None

    def declaration(self, line: str) -> Optional[Suggestions]:
        if _PY_CONDITION_OPERAND.match(line):
            return {"==": 0.9, "!=": 0.8, "in": 0.7}
        m = _PY_BARE_NAME.match(line)
        if m and m.group(1) not in self.reserved:
            return {"=": 0.9, "+=": 0.7}
        return None

    def call_opening(self, line: str) -> Optional[Suggestions]:
        return self._member_chain(line) or self._callable_at_end(line)


# --------------------------------------------------------- brace languages

_MODIFIERS = r"(?:(?:const|static|final|public|private|protected|unsigned|signed|readonly)\s+)*"
_BRACE_HEADER = re.compile(r"^\s*(?:\}\s*)?(?:if|while|for|switch|foreach|catch|else\s+if)\s*\(.*\)$")
_BRACE_BARE_HEADER = re.compile(r"^\s*(?:\}\s*)?(?:else|try|do|finally)$")
_ASSIGNMENT = re.compile(r"(?<![=!<>])[-+*/%.]?=(?!=)\s*\S")
_INC_DEC = re.compile(r"(\+\+|--)$")
_JUMP = re.compile(r"^\s*(break|continue)$")
_RETURN = re.compile(r"^\s*return\b")
_IDENT_LINE = re.compile(r"^\s*([A-Za-z_$][\w$]*)\s*$")
_OPEN_ENDINGS = tuple(";{}(,+-*/=<>&|!:?")


class BraceScorer(RuleScorer):
    """C-family languages: parenthesised headers, braces, ';' terminators."""

    type_words: frozenset = frozenset()
    name_labels: Tuple[str, ...] = ("var", "name")
    terminator_label: Optional[str] = ";"
    loop_declarator: Optional[str] = None
    foreach_declarator: Optional[str] = None
    membership_label: Optional[str] = None
    var_sigil: Optional[str] = None
    function_words: frozenset = frozenset()
    stream_objects: frozenset = frozenset()

    def __init__(self, language: LanguageDefinition) -> None:
        super().__init__(language)
        types = _alternation(self.type_words) if self.type_words else r"(?!x)x"
        type_token = r"(?:%s)(?:<[^<>]*>)?\s*[&*]*" % types
        self._decl_start = re.compile(r"^\s*%s%s\s+$" % (_MODIFIERS, type_token))
        self._decl_named = re.compile(r"^\s*%s%s\s+[A-Za-z_$][\w$]*\s*$" % (_MODIFIERS, type_token))
        self._func_header = None
        if self.function_words or self.type_words:
            heads = _alternation(self.function_words | self.type_words)
            self._func_header = re.compile(
                r"^\s*%s(?:%s)(?:<[^<>]*>)?\s+[\w$]*\s*\(.*\)$" % (_MODIFIERS, heads))

    def loop_header(self, line: str) -> Optional[Suggestions]:
        if re.match(r"^\s*for\s*\(\s*$", line):
            return {self.loop_declarator: 1.0} if self.loop_declarator else None
        if re.match(r"^\s*for\s*\(\s*[\w$]+\s+$", line):
            return {"i": 1.0}
        if re.match(r"^\s*for\s*\(\s*(?:[\w$]+\s+)?[\w$]+\s*$", line):
            return {"=": 1.0}
        if re.match(r"^\s*for\s*\([^;]*=\s*[^;\s][^;]*$", line) and _VALUE_END.search(line.rstrip()):
            return {";": 1.0}
        if re.match(r"^\s*for\s*\([^;]*;\s*[\w$]+\s*$", line):
            return {"<": 1.0, "<=": 0.8}
        if re.match(r"^\s*for\s*\([^;]*;[^;]*[\w)]\s*$", line):
            return {";": 1.0}
        if self.foreach_declarator and re.match(r"^\s*foreach\s*\(\s*$", line):
            return {self.foreach_declarator: 1.0}
        if self.membership_label and re.match(r"^\s*foreach\s*\(\s*(?:[\w$]+\s+)?[\w$]+\s+$", line):
            return {self.membership_label: 1.0}
        return None

    def iterable_call(self, line: str) -> Optional[Suggestions]:
        return self._close_open_call(line, skip=("for", "foreach"))

    def _empty_call_args(self, name: str) -> Optional[Suggestions]:
        return {'"': 0.85, "var": 0.8}

    def terminator(self, line: str) -> Optional[Suggestions]:
        s = line.rstrip()
        if not s or open_call(s) is not None:
            return None
        if _BRACE_HEADER.match(s) or _BRACE_BARE_HEADER.match(s):
            return {"{": 1.0}
        if self._func_header is not None and self._func_header.match(s) and not _RETURN.match(s):
            return {"{": 1.0}
        if not self.terminator_label or s.endswith(_OPEN_ENDINGS):
            return None
        label = self.terminator_label
        if _JUMP.match(s) or _INC_DEC.search(s):
            return {label: 1.0}
        if _RETURN.match(s) and s.strip() != "return":
            return {label: 1.0}
        if self.stream_objects and re.match(r"^\s*(?:std::)?(?:%s)\s*(<<|>>)" % _alternation(self.stream_objects), s):
            op = "<<" if "<<" in s else ">>"
            return {label: 0.9, op: 0.8}
        if _ASSIGNMENT.search(s) and _VALUE_END.search(s):
            return {label: 1.0}
        if s.endswith(")"):
            return {label: 1.0}
        return None

    def declaration(self, line: str) -> Optional[Suggestions]:
        if self.var_sigil and line.rstrip().endswith(self.var_sigil) and line.strip() == self.var_sigil:
            return {"name": 1.0}
        if self._decl_start.match(line):
            return {label: 1.0 - 0.1 * i for i, label in enumerate(self.name_labels)}
        if self._decl_named.match(line):
            hits = {"=": 1.0}
            if self.terminator_label:
                hits[self.terminator_label] = 0.8
            return hits
        m = _IDENT_LINE.match(line)
        if m and m.group(1) not in self.reserved and m.group(1) not in self.type_words:
            return {"=": 0.9}
        return None

    def call_opening(self, line: str) -> Optional[Suggestions]:
        return self._member_chain(line) or self._callable_at_end(line)


class JavaScriptScorer(BraceScorer):
    type_words = frozenset({"let", "const", "var"})
    name_labels = ("var", "name")
    loop_declarator = "let"
    function_words = frozenset({"function", "async function"})
    helpers = frozenset({"console.log", "parseInt", "parseFloat", "JSON.parse", "JSON.stringify", "alert", "prompt"})
    callables = frozenset({"console.log", "alert", "prompt", "parseInt", "parseFloat", "JSON.parse", "JSON.stringify"})
    member_chains = {"console.": {"console.log": 0.8}, "JSON.": {"JSON.parse": 0.8, "JSON.stringify": 0.75}}


class TypeScriptScorer(JavaScriptScorer):
    def declaration(self, line: str) -> Optional[Suggestions]:
        if re.match(r"^\s*(?:let|const|var)\s+[A-Za-z_$][\w$]*\s*:\s*$", line):
            return {"string": 1.0, "number": 0.9, "boolean": 0.8}
        if re.match(r"^\s*(?:let|const|var)\s+[A-Za-z_$][\w$]*\s*$", line):
            return {"=": 1.0, ":": 0.9, ";": 0.8}
        return super().declaration(line)


class JavaScorer(BraceScorer):
    type_words = frozenset({"int", "double", "float", "long", "char", "boolean", "String", "var", "void"})
    name_labels = ("var", "name")
    loop_declarator = "int"
    function_words = frozenset({"void"})
    helpers = frozenset({"System.out.println", "System.out.print", "Integer.parseInt",
                         "Double.parseDouble", "String.valueOf", "Arrays.toString"})
    callables = helpers
    member_chains = {
        "System.out.": {"System.out.println": 0.9, "System.out.print": 0.8},
        "Integer.": {"Integer.parseInt": 0.8},
    }


class CppScorer(BraceScorer):
    type_words = frozenset({"int", "double", "float", "char", "bool", "auto", "long", "short", "void",
                            "string", "std::string", "size_t", "vector", "std::vector", "map", "std::map"})
    name_labels = ("var",)
    loop_declarator = "int"
    stream_objects = frozenset({"cout", "cin", "cerr"})
    helpers = frozenset({"push_back", "size", "begin", "end"})

    def call_opening(self, line: str) -> Optional[Suggestions]:
        # member access on a container in progress
        if re.search(r"[A-Za-z_]\w*\.$", line):
            return {".size()": 0.7}
        return None


class CScorer(BraceScorer):
    type_words = frozenset({"int", "double", "float", "char", "long", "short", "void", "unsigned", "size_t",
                            "struct"})
    name_labels = ("var", "name")
    loop_declarator = "int"
    helpers = frozenset({"printf", "scanf", "malloc", "free", "strlen"})
    callables = frozenset({"printf", "scanf", "malloc", "free"})


class CSharpScorer(BraceScorer):
    type_words = frozenset({"int", "double", "float", "bool", "string", "var", "char", "long", "void"})
    name_labels = ("name",)
    loop_declarator = "int"
    foreach_declarator = "var"
    membership_label = "in"
    helpers = frozenset({"Console.WriteLine", "Console.Write"})
    callables = helpers
    member_chains = {"Console.": {"Console.WriteLine": 0.9}}


class PhpScorer(BraceScorer):
    name_labels = ("name",)
    loop_declarator = "$"
    foreach_declarator = "$"
    membership_label = "as"
    var_sigil = "$"
    function_words = frozenset({"function"})
    helpers = frozenset({"isset", "empty", "count", "strlen"})
    callables = helpers


# ---------------------------------------------------------- Go and Rust

class GoScorer(RuleScorer):
    helpers = frozenset({"make", "append", "len", "fmt.Println", "fmt.Printf"})
    callables = helpers
    member_chains = {"fmt.": {"fmt.Println": 0.9, "fmt.Printf": 0.8}}

    def loop_header(self, line: str) -> Optional[Suggestions]:
        if re.match(r"^\s*for\s+[A-Za-z_]\w*(\s*,\s*[A-Za-z_]\w*)?\s*$", line):
            return {":=": 1.0}
        if re.match(r"^\s*for\s+[A-Za-z_]\w*(\s*,\s*[A-Za-z_]\w*)?\s*:=\s*$", line):
            return {"range": 1.0, "0": 0.8}
        return None

    def iterable_call(self, line: str) -> Optional[Suggestions]:
        return self._close_open_call(line)

    def terminator(self, line: str) -> Optional[Suggestions]:
        s = line.rstrip()
        if not s or s.endswith("{") or open_call(s) is not None:
            return None
        if re.match(r"^\s*(?:\}\s*)?else$", s):
            return {"{": 1.0}
        if re.match(r"^\s*func\s+\w+\s*\(.*\)(\s*[\w\[\]*.]+)?$", s):
            return {"{": 1.0}
        if not _VALUE_END.search(s):
            return None
        if re.match(r"^\s*for\s+\S", s) and ("range" in s or ";" in s):
            return {"{": 1.0}
        if re.match(r"^\s*(if|switch)\s+\S", s):
            return {"{": 1.0}
        return None

    def declaration(self, line: str) -> Optional[Suggestions]:
        if re.match(r"^\s*var\s+$", line):
            return {"name": 1.0}
        if re.match(r"^\s*var\s+[A-Za-z_]\w*\s*$", line):
            return {"int": 0.9, "string": 0.85, "=": 0.8}
        m = re.match(r"^\s*([A-Za-z_]\w*)(\s*,\s*[A-Za-z_]\w*)*\s*$", line)
        if m and m.group(1) not in self.reserved:
            return {":=": 0.9, "=": 0.8}
        return None

    def call_opening(self, line: str) -> Optional[Suggestions]:
        return self._member_chain(line) or self._callable_at_end(line)


class RustScorer(RuleScorer):
    helpers = frozenset({"println!", "vec!", "format!", "Some", "Ok"})

    def loop_header(self, line: str) -> Optional[Suggestions]:
        if re.match(r"^\s*for\s+[A-Za-z_]\w*\s+$", line):
            return {"in": 1.0}
        if re.match(r"^\s*for\s+[A-Za-z_]\w*\s+in\s+$", line):
            return {"0": 0.9}
        return None

    def iterable_call(self, line: str) -> Optional[Suggestions]:
        return self._close_open_call(line)

    def terminator(self, line: str) -> Optional[Suggestions]:
        s = line.rstrip()
        if not s or s.endswith(("{", ";")) or open_call(s) is not None:
            return None
        if re.match(r"^\s*(?:\}\s*)?(?:else|loop)$", s):
            return {"{": 1.0}
        if re.match(r"^\s*(?:pub\s+)?fn\s+\w+\s*\(.*\)(\s*->\s*\S+)?$", s):
            return {"{": 1.0}
        if not _VALUE_END.search(s):
            return None
        if re.match(r"^\s*(if|while|match)\s+\S", s) or re.match(r"^\s*for\s+.+\s+in\s+\S", s):
            return {"{": 1.0}
        if re.match(r"^\s*let\s+.+=\s*\S", s) or re.match(r"^\s*return\s+\S", s) or s.endswith(")"):
            return {";": 1.0}
        return None

    def declaration(self, line: str) -> Optional[Suggestions]:
        if re.match(r"^\s*let\s+$", line):
            return {"mut": 1.0, "name": 0.9}
        if re.match(r"^\s*let\s+mut\s+$", line):
            return {"name": 1.0}
        if re.match(r"^\s*let\s+(mut\s+)?[A-Za-z_]\w*\s*:\s*$", line):
            return {"i32": 1.0, "String": 0.9, "Vec": 0.8}
        if re.match(r"^\s*let\s+(mut\s+)?[A-Za-z_]\w*\s*$", line):
            return {":": 1.0, "=": 0.9}
        return None

    def call_opening(self, line: str) -> Optional[Suggestions]:
        if re.search(r"(?:^|[\s(=,])[a-z_]\w*!$", line):
            return {"(": 0.7}
        return None


# --------------------------------------------------------------- registry

_REGISTRY: Dict[str, IdiomScorer] = {}
_NULL = NullScorer()


def register_scorer(language_key: str, scorer: IdiomScorer) -> None:
    _REGISTRY[language_key] = scorer


def scorer_for(language: LanguageDefinition) -> IdiomScorer:
    return _REGISTRY.get(language.key, _NULL)


for _lang, _cls in (
    (L.PYTHON, PythonScorer),
    (L.JAVASCRIPT, JavaScriptScorer),
    (L.TYPESCRIPT, TypeScriptScorer),
    (L.JAVA, JavaScorer),
    (L.CPP, CppScorer),
    (L.C, CScorer),
    (L.GO, GoScorer),
    (L.RUST, RustScorer),
    (L.CSHARP, CSharpScorer),
    (L.PHP, PhpScorer),
):
    register_scorer(_lang.key, _cls(_lang))
