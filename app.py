# app.py
# CustomTkinter playground for SmartKeys (dark theme).
# - Editor pane with live syntax highlighting.
# - Prediction bar that re-ranks the keyboard buttons as you type (debounced).
# - Placeholder filler: put the cursor on "var", "function", ... and pick a value.

from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src or `pip install -e .`)
from smartkeys.engine import Engine
from smartkeys.context import extract_context
from smartkeys.models import Prediction, TemplateMatch, TokenType
from smartkeys.templates import find_at, substitute

TOKEN_COLORS = {
    TokenType.KEYWORD: "#c792ea",
    TokenType.BUILTIN: "#82aaff",
    TokenType.STRING: "#c3e88d",
    TokenType.COMMENT: "#546e7a",
    TokenType.NUMBER: "#f78c6c",
}


class SmartKeysApp(ctk.CTk):
    """Dark-themed editor that shows ranked keyboard predictions for the cursor position."""

    def __init__(self, engine: Optional[Engine] = None) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("SmartKeys")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self.engine = engine or Engine()
        self.lang = self.engine.catalog.default
        self._refresh_after_id: Optional[str] = None
        self._active_match: Optional[TemplateMatch] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=14)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)  # editor
        self.grid_rowconfigure(5, weight=0)  # log

        # Build UI
        self._build_header()
        self._build_predictions()
        self._build_editor()
        self._build_templates()
        self._build_log()

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self._refresh()

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(header, text="SmartKeys", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

        names = [lang.name for lang in self.engine.catalog]
        self.opt_lang = ctk.CTkOptionMenu(header, values=names, command=self._on_language_changed)
        self.opt_lang.set(self.lang.name)
        self.opt_lang.grid(row=0, column=2, padx=6, pady=10)

        ctk.CTkButton(header, text="Open File", command=self._open_file).grid(
            row=0, column=3, padx=(6, 12), pady=10
        )

    def _build_predictions(self) -> None:
        self.bar = ctk.CTkFrame(self, corner_radius=10)
        self.bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)

    def _build_editor(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=2, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(0, weight=1)

        self.editor = ctk.CTkTextbox(frame, wrap="none", font=self.font_mono, undo=True)
        self.editor.grid(row=0, column=0, sticky="nsew", padx=8, pady=8)
        for kind, color in TOKEN_COLORS.items():
            self.editor.tag_config(kind.value, foreground=color)
        self.editor.bind("<KeyRelease>", self._on_edit)
        self.editor.bind("<ButtonRelease-1>", self._on_edit)
        self.editor.focus_set()

    def _build_templates(self) -> None:
        self.tpl_bar = ctk.CTkFrame(self, corner_radius=10)
        self.tpl_bar.grid(row=3, column=0, sticky="ew", padx=12, pady=6)

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=5, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("Ready. Start typing; tap a prediction to insert it.")

    # --------- language / files ---------

    def _on_language_changed(self, name: str) -> None:
        for lang in self.engine.catalog:
            if lang.name == name:
                self.lang = lang
        self._log(f"Language: {self.lang.name}")
        self._refresh()

    def _open_file(self) -> None:
        path = fd.askopenfilename(title="Open source file")
        if not path:
            return
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            mb.showerror("Open error", f"Could not read {os.path.basename(path)}:\n{exc}")
            return
        self.lang = self.engine.language(filename=path)
        self.opt_lang.set(self.lang.name)
        self.editor.delete("1.0", "end")
        self.editor.insert("1.0", text)
        self._log(f"Opened {path} as {self.lang.name}")
        self._refresh()

    # --------- editing ---------

    def _text(self) -> str:
        return self.editor.get("1.0", "end-1c")

    def _cursor(self) -> int:
        return len(self.editor.get("1.0", "insert"))

    def _on_edit(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._refresh_after_id is not None:
            self.after_cancel(self._refresh_after_id)
        self._refresh_after_id = self.after(120, self._refresh)

    def _refresh(self) -> None:
        self._refresh_after_id = None
        text, cursor = self._text(), self._cursor()
        self._show_predictions(self.engine.predict(text, cursor, self.lang))
        self._highlight(text)
        self._show_templates(text, cursor)

    def _show_predictions(self, rows: List[Prediction]) -> None:
        for child in self.bar.winfo_children():
            child.destroy()
        if not rows:
            ctk.CTkLabel(self.bar, text="(no predictions)", font=self.font_label).grid(row=0, column=0, padx=12, pady=8)
            return
        for i, p in enumerate(rows):
            btn = ctk.CTkButton(
                self.bar, text=p.button.label, width=64, font=self.font_mono,
                command=lambda p=p: self._insert_prediction(p),
            )
            btn.grid(row=0, column=i, padx=(12 if i == 0 else 4, 4), pady=8)

    def _insert_prediction(self, p: Prediction) -> None:
        ctx = extract_context(self._text(), self._cursor())
        text = self.engine.expand_insertion_text(p.button, ctx, self.lang)
        self.engine.on_selection_confirmed(p.button, ctx)
        self.editor.insert("insert", text)
        self._log(f"{p.button.label} ({p.reason.value}, {p.score:.2f})")
        self.editor.focus_set()
        self._refresh()

    def _highlight(self, text: str) -> None:
        for kind in TOKEN_COLORS:
            self.editor.tag_remove(kind.value, "1.0", "end")
        for row, tokens in enumerate(self.engine.highlight(text, self.lang), start=1):
            col = 0
            for tok in tokens:
                if tok.type in TOKEN_COLORS:
                    self.editor.tag_add(tok.type.value, f"{row}.{col}", f"{row}.{col + len(tok.text)}")
                col += len(tok.text)

    # --------- placeholders ---------

    def _show_templates(self, text: str, cursor: int) -> None:
        for child in self.tpl_bar.winfo_children():
            child.destroy()
        self._active_match = find_at(text, cursor)
        if self._active_match is None:
            return
        m = self._active_match
        ctk.CTkLabel(self.tpl_bar, text=f"{m.placeholder} →", font=self.font_label).grid(
            row=0, column=0, padx=(12, 6), pady=8
        )
        values = self.engine.templates.suggestions_for(m.type, self.lang)[:8]
        for i, value in enumerate(values, start=1):
            ctk.CTkButton(
                self.tpl_bar, text=value, width=40, fg_color="gray25",
                command=lambda v=value: self._fill_placeholder(v),
            ).grid(row=0, column=i, padx=4, pady=8)

    def _fill_placeholder(self, value: str) -> None:
        m = self._active_match
        if m is None:
            return
        text = substitute(self._text(), m, value)
        self.editor.delete("1.0", "end")
        self.editor.insert("1.0", text)
        self.editor.mark_set("insert", f"1.0+{m.start + len(value)}c")
        self.engine.templates.record_confirmed(m.type, value)
        self._log(f"{m.placeholder} = {value}")
        self._refresh()

    # --------- misc UI helpers ---------

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self.engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = SmartKeysApp()
    app.mainloop()
