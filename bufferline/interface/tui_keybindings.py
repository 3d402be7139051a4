"""Key bindings for the tabline host."""

from prompt_toolkit.key_binding import KeyBindings

from bufferline.application.tabline_service import go_to_item

GO_TO_SLOTS = 10


def add_go_to_bindings(kb: KeyBindings, workspace, refresh=None) -> KeyBindings:
    """Bind Alt+1..Alt+9 and Alt+0 to the first ten items of the listing."""
    for num in range(1, GO_TO_SLOTS + 1):
        key = str(num % 10)

        def _go(event, num=num):
            if go_to_item(num, workspace, workspace) and refresh is not None:
                refresh()

        kb.add("escape", key)(_go)
    return kb


def build_key_bindings(workspace, options, refresh=None) -> KeyBindings:
    kb = KeyBindings()

    @kb.add("q")
    @kb.add("c-c")
    def _(event):
        event.app.exit()

    @kb.add("right")
    @kb.add("l")
    def _(event):
        workspace.cycle(1)

    @kb.add("left")
    @kb.add("h")
    def _(event):
        workspace.cycle(-1)

    @kb.add("m")
    def _(event):
        doc = workspace.documents.get(workspace.current_id)
        if doc is not None:
            workspace.set_modified(doc.id, not doc.modified)

    @kb.add("x")
    def _(event):
        current = workspace.current_id
        if current is not None:
            workspace.close_item(current)

    @kb.add("s")
    def _(event):
        workspace.split_window()

    @kb.add("t")
    def _(event):
        workspace.new_group()

    @kb.add("tab")
    def _(event):
        groups = workspace.list_groups()
        if len(groups) > 1:
            nxt = groups[(workspace.active_group_index + 1) % len(groups)]
            workspace.select_group(nxt.id)

    if options.mappings:
        add_go_to_bindings(kb, workspace, refresh)
    return kb


__all__ = ["build_key_bindings", "add_go_to_bindings", "GO_TO_SLOTS"]
