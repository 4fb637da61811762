from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from smartkeys.engine import Engine
from smartkeys.config import TOP_K
from smartkeys.context import extract_context
from smartkeys.models import LanguageDefinition, TemplateMatch
from smartkeys.templates import find_all, find_at, parse_match_type

app = Flask(__name__)
_engine: Engine | None = None


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


def _bad_request(message: str):
    return jsonify({"error": message}), 400


def _language(eng: Engine, key: str | None = None) -> LanguageDefinition:
    return eng.language(key=key or request.args.get("lang"), filename=request.args.get("file"))


def _text_and_cursor() -> tuple[str, int]:
    text = request.args.get("text", "", type=str)
    cursor = request.args.get("cursor", len(text), type=int)
    return text, cursor


def _match_dict(m: TemplateMatch) -> dict:
    return {"placeholder": m.placeholder, "start": m.start, "end": m.end, "type": m.type.value}


# ---------- API ----------
@app.get("/health")
def health():
    eng = _get_engine()
    return jsonify({"ok": True, "languages": len(eng.catalog)})


@app.get("/api/languages")
def api_languages():
    eng = _get_engine()
    return jsonify([
        {"key": lang.key, "name": lang.name, "extensions": sorted(lang.file_extensions)}
        for lang in eng.catalog
    ])


@app.get("/api/predict")
def api_predict():
    eng = _get_engine()
    text, cursor = _text_and_cursor()
    k = request.args.get("k", TOP_K, type=int)
    lang = _language(eng)
    ctx = extract_context(text, cursor)
    rows = eng.get_predictions(eng.candidate_pool(lang), ctx, lang, limit=k)
    return jsonify({
        "language": lang.key,
        "context": {
            "last_word": ctx.last_word,
            "current_line": ctx.current_line,
            "is_new_line": ctx.is_new_line,
            "line_indentation": ctx.line_indentation,
        },
        "predictions": [p.to_dict() for p in rows],
    })


@app.get("/api/expand")
def api_expand():
    eng = _get_engine()
    button_id = request.args.get("id", "", type=str)
    text, cursor = _text_and_cursor()
    lang = _language(eng)
    button = eng.find_button(lang, button_id)
    if button is None:
        return _bad_request(f"unknown button id: {button_id!r}")
    ctx = extract_context(text, cursor)
    eng.on_selection_confirmed(button, ctx)
    return jsonify({"id": button.id, "label": button.label, "text": eng.expand_insertion_text(button, ctx, lang)})


@app.get("/api/classify")
def api_classify():
    eng = _get_engine()
    line = request.args.get("line", "", type=str)
    lang = _language(eng)
    return jsonify([{"text": t.text, "type": t.type.value} for t in eng.classify(line, lang)])


@app.post("/api/highlight")
def api_highlight():
    eng = _get_engine()
    payload = request.get_json(silent=True) or {}
    code = payload.get("code", "")
    if not isinstance(code, str):
        return _bad_request("'code' must be a string")
    lang = _language(eng, payload.get("lang"))
    lines = eng.highlight(code, lang)
    return jsonify({
        "language": lang.key,
        "lines": [[{"text": t.text, "type": t.type.value} for t in line] for line in lines],
    })


@app.get("/api/templates")
def api_templates():
    eng = _get_engine()
    text, cursor = _text_and_cursor()
    lang = _language(eng)
    active = find_at(text, cursor)
    return jsonify({
        "matches": [_match_dict(m) for m in find_all(text)],
        "active": _match_dict(active) if active else None,
        "suggestions": eng.templates.suggestions_for(active.type, lang) if active else [],
    })


@app.post("/api/templates/confirm")
def api_templates_confirm():
    eng = _get_engine()
    payload = request.get_json(silent=True) or {}
    value = payload.get("value")
    if not isinstance(value, str) or not value.strip():
        return _bad_request("'value' must be a non-empty string")
    try:
        match_type = parse_match_type(str(payload.get("type", "")))
    except ValueError as e:
        return _bad_request(str(e))
    recorded = eng.templates.record_confirmed(match_type, value)
    return jsonify({"type": match_type.value, "recorded": recorded, "values": eng.templates.values(match_type)})


# ---------- UI ----------
@app.get("/")
def home():
    # Editor box + prediction bar + highlighted preview; no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>SmartKeys • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
  --keyword:#c792ea; --builtin:#82aaff; --string:#c3e88d; --comment:#546e7a; --number:#f78c6c;
}
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace }
textarea{ width:100%; min-height:180px; padding:12px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:15px; outline:none; }
textarea:focus{ border-color:var(--accent) }
select,.btn{ padding:8px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); }
.bar{ display:flex; gap:8px; flex-wrap:wrap; margin:12px 0; }
.btn{ cursor:pointer }
.btn:hover{ border-color:var(--accent) }
.btn small{ color:var(--muted); margin-left:6px }
pre{ background:#0b1117; border:1px solid var(--border); border-radius:12px; padding:12px; overflow:auto; }
.keyword{color:var(--keyword)} .builtin{color:var(--builtin)} .string{color:var(--string)}
.comment{color:var(--comment)} .number{color:var(--number)}
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>SmartKeys</h1>
      <select id="lang"></select>
      <div id="bar" class="bar"></div>
      <textarea id="code" class="mono" spellcheck="false" autofocus></textarea>
      <pre id="preview" class="mono"></pre>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const code = $("#code"), bar = $("#bar"), lang = $("#lang"), preview = $("#preview");
let t;
const esc = (s) => s.replace(/&/g,"&amp;").replace(/</g,"&lt;").replace(/>/g,"&gt;");

async function loadLanguages(){
  const data = await (await fetch("/api/languages")).json();
  lang.innerHTML = data.map(l => `<option value="${l.key}">${l.name}</option>`).join("");
}

async function refresh(){
  const qs = `text=${encodeURIComponent(code.value)}&cursor=${code.selectionStart}&lang=${lang.value}`;
  const pred = await (await fetch(`/api/predict?${qs}`)).json();
  bar.innerHTML = pred.predictions.map(p =>
    `<button class="btn mono" data-id="${p.id}">${esc(p.label)}<small>${p.score}</small></button>`).join("");
  const hl = await (await fetch("/api/highlight", {method:"POST", headers:{"Content-Type":"application/json"},
    body: JSON.stringify({code: code.value, lang: lang.value})})).json();
  preview.innerHTML = hl.lines.map(line =>
    line.map(tok => `<span class="${tok.type}">${esc(tok.text)}</span>`).join("")).join("\n");
}

bar.addEventListener("click", async (ev) => {
  const btn = ev.target.closest("button"); if(!btn) return;
  const pos = code.selectionStart;
  const qs = `id=${btn.dataset.id}&text=${encodeURIComponent(code.value)}&cursor=${pos}&lang=${lang.value}`;
  const data = await (await fetch(`/api/expand?${qs}`)).json();
  code.value = code.value.slice(0, pos) + data.text + code.value.slice(pos);
  code.selectionStart = code.selectionEnd = pos + data.text.length;
  code.focus(); refresh();
});

function debounced(){ clearTimeout(t); t = setTimeout(refresh, 120); }
code.addEventListener("input", debounced);
code.addEventListener("click", debounced);
code.addEventListener("keyup", debounced);
lang.addEventListener("change", refresh);
loadLanguages().then(refresh);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--db", dest="db", default=None)  # DSN: "sqlite:///path" or "memory://"
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(db_dsn=args.db, verbose=args.verbose)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
