from .workspace import Document, Window, Workspace, WorkspaceGroup

__all__ = ["Document", "Window", "Workspace", "WorkspaceGroup"]
