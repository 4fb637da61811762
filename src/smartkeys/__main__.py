from __future__ import annotations
import argparse, json, sys
from smartkeys.engine import Engine
from smartkeys.config import TOP_K
from smartkeys.context import extract_context
from smartkeys.tokenizer import classify_text


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="SmartKeys CLI (Engine-backed)")
    p.add_argument("--lang", default=None, help="Language key (python, cpp, go, ...)")
    p.add_argument("--file", default=None, help="Infer the language from this file name")
    p.add_argument("--db", default=None, help="Store DSN: sqlite:///path or memory://")
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K predictions")
    p.add_argument("--q", default=None, help="Text before the cursor; use \\n for new lines")
    p.add_argument("--highlight", action="store_true", help="Print token classes instead of predictions")
    p.add_argument("--repl", action="store_true", help="Interactive loop")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine(db_dsn=args.db, verbose=args.verbose)
    try:
        lang = eng.language(key=args.lang, filename=args.file)

        def run_query(text: str):
            if args.highlight:
                lines = classify_text(text, lang)
                if args.json:
                    print(json.dumps([[{"text": t.text, "type": t.type.value} for t in line] for line in lines],
                                     ensure_ascii=False, indent=2))
                else:
                    for line in lines:
                        print(" ".join(f"[{t.type.value}:{t.text}]" for t in line if t.text.strip()))
                return
            rows = eng.predict(text, len(text), lang, limit=args.k)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                if not rows:
                    print("(no predictions)"); return
                ctx = extract_context(text, len(text))
                print(f"{lang.name}  last_word={ctx.last_word!r}  new_line={ctx.is_new_line}")
                print("#  Score  Reason      Label")
                for i, r in enumerate(rows, 1):
                    print(f"{i:<2} {r.score:<6.2f} {r.reason.value:<11} {r.button.label}")

        if args.q is not None:
            run_query(args.q.replace("\\n", "\n"))

        if args.repl:
            print(f"[{lang.name}] Type a line (trailing spaces count; empty line to exit).")
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        if args.q is None and not args.repl:
            p.print_usage(sys.stderr)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
