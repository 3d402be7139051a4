#!/usr/bin/env python3
"""Interactive host: a prompt_toolkit screen with the tabline on top."""

import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from bufferline.application.tabline_service import render_tabline
from bufferline.core.models import Tabline
from bufferline.core.options import BufferlineOptions
from bufferline.infrastructure.workspace import Workspace

from .tui_keybindings import build_key_bindings
from .tui_themes import build_style

PREVIEW_LINES = 200


class BufferlineTUI:
    def __init__(
        self,
        options: BufferlineOptions,
        workspace: Optional[Workspace] = None,
        paths: Sequence[str] = (),
    ):
        self.options = options
        self.workspace = workspace or Workspace()
        for path in paths:
            self.workspace.open_document(str(path))
        self.last_tabline: Optional[Tabline] = None
        self.style: Style = build_style(options.theme)

        kb = build_key_bindings(self.workspace, options, refresh=self.force_render)
        self.app = Application(
            layout=Layout(
                HSplit(
                    [
                        Window(content=FormattedTextControl(self.tabline_fragments), height=1),
                        Window(content=FormattedTextControl(self.body_fragments), wrap_lines=False),
                        Window(content=FormattedTextControl(self.status_fragments), height=1),
                    ]
                )
            ),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=True,
        )

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def tabline_fragments(self) -> FormattedText:
        self.last_tabline = render_tabline(
            self.options,
            self.workspace,
            self.workspace,
            self.workspace,
            columns=self.get_terminal_width(),
        )
        return self.last_tabline.fragments

    def body_fragments(self) -> FormattedText:
        doc = self.workspace.documents.get(self.workspace.current_id)
        if doc is None:
            return FormattedText([("class:text.dim", "No open documents")])
        parts: List[Tuple[str, str]] = [("class:text.dim", f"{doc.path or doc.name}\n\n")]
        path = Path(doc.path) if doc.path else None
        if path is not None and path.is_file():
            try:
                lines = path.read_text(encoding="utf-8", errors="replace").splitlines()[:PREVIEW_LINES]
            except OSError as exc:
                parts.append(("class:text.dim", f"Unable to read file: {exc}"))
            else:
                parts.append(("class:text", "\n".join(lines)))
        return FormattedText(parts)

    def status_fragments(self) -> FormattedText:
        tabline = self.last_tabline
        dropped = ""
        if tabline is not None and (tabline.left_dropped or tabline.right_dropped):
            dropped = f" | hidden: {tabline.left_dropped} left, {tabline.right_dropped} right"
        hint = "h/l switch | m modified | x close | s split | t new group | tab next group | q quit"
        return FormattedText([("class:text.dim", hint + dropped)])

    def force_render(self) -> None:
        self.app.invalidate()

    def run(self) -> None:
        self.app.run()


def cmd_tui(args, options: BufferlineOptions) -> int:
    tui = BufferlineTUI(options, paths=getattr(args, "paths", []) or [])
    tui.run()
    return 0


__all__ = ["BufferlineTUI", "cmd_tui"]
