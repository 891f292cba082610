"""
User-facing message catalog.

Templates are plain data so a host can load translated catalogs; methods only
fill in the placeholders.
"""

from __future__ import annotations

from workspace_sync.base_model import StrictModel


class Messages(StrictModel):
    """Dialog titles, bodies, button labels and notification texts."""

    synchronize_dialog_title: str = 'Synchronize'
    exist_in_workspace_dialog_content: str = (
        "Project '{name}' exists in the workspace but is missing on the file system. "
        'Import it again or remove it from the workspace?'
    )
    change_location_prompt: str = 'Project source location'
    button_import: str = 'Import'
    button_remove: str = 'Remove'
    button_ok: str = 'OK'
    project_removed_template: str = "Project '{name}' removed"
    project_imported_template: str = "Project '{name}' imported"
    project_remove_failed_template: str = "Failed to remove project '{name}': {reason}"
    project_import_failed_template: str = "Failed to import project '{name}': {reason}"

    def exist_in_workspace(self, name: str) -> str:
        return self.exist_in_workspace_dialog_content.format(name=name)

    def project_removed(self, name: str) -> str:
        return self.project_removed_template.format(name=name)

    def project_imported(self, name: str) -> str:
        return self.project_imported_template.format(name=name)

    def project_remove_failed(self, name: str, reason: str) -> str:
        return self.project_remove_failed_template.format(name=name, reason=reason)

    def project_import_failed(self, name: str, reason: str) -> str:
        return self.project_import_failed_template.format(name=name, reason=reason)
