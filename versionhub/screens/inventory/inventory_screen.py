"""Inventory screen - cluster selector, application table and version panel."""

from __future__ import annotations

import logging
from contextlib import suppress

from rich.markup import escape
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Select, Static
from textual.worker import Worker, WorkerState

from versionhub.constants.enums import VersionFetchState
from versionhub.constants.screens.inventory import (
    APPLICATION_TABLE_COLUMNS,
    LOADING_VERSIONS_TEXT,
    NO_APPLICATIONS_TEXT,
    NO_DATA_TEXT,
    NO_VERSIONS_TEXT,
    SELECT_CLUSTER_PROMPT,
)
from versionhub.controllers import InventoryController
from versionhub.keyboard import INVENTORY_SCREEN_BINDINGS
from versionhub.models.core.application_info import ApplicationInfo
from versionhub.models.state.session_state import SessionSnapshot, SessionState
from versionhub.screens.inventory.presenter import (
    ApplicationsLoaded,
    CatalogLoaded,
    InventoryPresenter,
    SessionErrorRaised,
    VersionsUpdated,
)

logger = logging.getLogger(__name__)


class InventoryScreen(Screen[None]):
    """Main screen: pick a cluster, browse its applications, expand one for versions."""

    BINDINGS = INVENTORY_SCREEN_BINDINGS

    DEFAULT_CSS = """
    InventoryScreen {
        layout: vertical;
    }

    #cluster-bar {
        height: auto;
        padding: 1 2 0 2;
    }

    #cluster-select {
        width: 60;
    }

    #error-line {
        color: $error;
        padding: 0 2;
        height: auto;
    }

    #inventory-body {
        height: 1fr;
        padding: 1 2;
    }

    #applications-pane {
        width: 2fr;
    }

    #no-data-text {
        color: $text-muted;
        padding: 1 0;
    }

    #applications-table {
        height: 1fr;
    }

    #version-panel {
        width: 1fr;
        border: round $accent;
        padding: 0 1;
        margin-left: 1;
    }
    """

    def __init__(
        self,
        controller: InventoryController | None = None,
        state: SessionState | None = None,
    ) -> None:
        super().__init__()
        self.presenter = InventoryPresenter(self, controller or InventoryController(), state)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="cluster-bar"):
            yield Select[str](
                [],
                prompt=SELECT_CLUSTER_PROMPT,
                allow_blank=True,
                id="cluster-select",
            )
        yield Static("", id="error-line")
        with Horizontal(id="inventory-body"):
            with Vertical(id="applications-pane"):
                yield Static(NO_DATA_TEXT, id="no-data-text")
                yield DataTable(id="applications-table", cursor_type="row", zebra_stripes=True)
            with VerticalScroll(id="version-panel"):
                yield Static("", id="version-detail")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#applications-table", DataTable)
        for label, width in APPLICATION_TABLE_COLUMNS:
            table.add_column(label, width=width)
        self._render_applications(self.presenter.snapshot())
        self.presenter.refresh_catalog()

    # =========================================================================
    # Operator intents
    # =========================================================================

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "cluster-select":
            return
        value = event.value if isinstance(event.value, str) else None
        if value == self.presenter.snapshot().selected_cluster:
            return
        self.presenter.select_cluster(value)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        app_name = event.row_key.value
        if app_name:
            self.presenter.expand_application(app_name)

    def action_refresh(self) -> None:
        self.presenter.refresh_catalog()

    def action_refresh_versions(self) -> None:
        snapshot = self.presenter.snapshot()
        if snapshot.expanded_app is None:
            self.notify("Expand an application first.", severity="warning")
            return
        if not self.presenter.refresh_versions(snapshot.expanded_app):
            self.notify("Versions are already loading.", severity="information")

    def action_collapse(self) -> None:
        snapshot = self.presenter.snapshot()
        if snapshot.expanded_app is not None:
            self.presenter.expand_application(snapshot.expanded_app)

    # =========================================================================
    # Presenter messages
    # =========================================================================

    def on_catalog_loaded(self, event: CatalogLoaded) -> None:
        """Replace selector options without touching the session selection.

        Rebuilding the options resets the widget value; those changes are
        not operator intents, so ``Select.Changed`` is suppressed and the
        current selection is restored while it is still in the catalog.
        """
        selected = self.presenter.snapshot().selected_cluster
        with suppress(NoMatches, WrongType):
            select = self.query_one("#cluster-select", Select)
            with self.prevent(Select.Changed):
                select.set_options(
                    (cluster.label, cluster.name) for cluster in event.clusters
                )
                if selected is not None and any(
                    cluster.name == selected for cluster in event.clusters
                ):
                    select.value = selected

    def on_applications_loaded(self, _: ApplicationsLoaded) -> None:
        snapshot = self.presenter.snapshot()
        self._render_error(snapshot)
        self._render_applications(snapshot)
        self._render_versions(snapshot)

    def on_versions_updated(self, _: VersionsUpdated) -> None:
        self._render_versions(self.presenter.snapshot())

    def on_session_error_raised(self, _: SessionErrorRaised) -> None:
        self._render_error(self.presenter.snapshot())

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.state == WorkerState.ERROR:
            logger.error("Worker '%s' error: %s", event.worker.name, event.worker.error)
            self.notify(f"Unexpected error: {event.worker.error}", severity="error")

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_error(self, snapshot: SessionSnapshot) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#error-line", Static).update(
                escape(snapshot.error_message or "")
            )

    def _render_applications(self, snapshot: SessionSnapshot) -> None:
        with suppress(NoMatches, WrongType):
            table = self.query_one("#applications-table", DataTable)
            placeholder = self.query_one("#no-data-text", Static)
            table.clear()
            if snapshot.applications is None:
                placeholder.update(NO_DATA_TEXT)
                placeholder.display = True
                return
            placeholder.update(NO_APPLICATIONS_TEXT)
            placeholder.display = not snapshot.applications
            for app in snapshot.applications:
                table.add_row(*self.format_application_row(app), key=app.name)

    @staticmethod
    def format_application_row(app: ApplicationInfo) -> tuple[Text, ...]:
        return (
            Text(app.name),
            Text(app.namespace),
            Text(app.health_status),
            Text(app.sync_status),
            Text(app.current_version),
            Text("yes" if app.is_catalog_app else "no"),
        )

    def _render_versions(self, snapshot: SessionSnapshot) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#version-detail", Static).update(
                self.format_version_panel(snapshot)
            )

    @staticmethod
    def format_version_panel(snapshot: SessionSnapshot) -> str:
        """Build the markup for the expanded application's detail panel."""
        app_name = snapshot.expanded_app
        if app_name is None or snapshot.applications is None:
            return ""
        app = next((a for a in snapshot.applications if a.name == app_name), None)
        if app is None:
            return ""

        lines = [
            f"[b]{escape(app.name)}[/b]",
            f"Current Version: {escape(app.current_version)}",
        ]
        if app.source.chart_name:
            lines.append(f"Chart: {escape(app.source.chart_name)}")
        if app.source.repo_url:
            lines.append(f"Repo: {escape(app.source.repo_url)}")
        if app.argocd_url:
            lines.append(f"Argo CD: {escape(app.argocd_url)}")
        lines.append("")

        state = snapshot.version_state(app_name)
        if state == VersionFetchState.LOADING:
            lines.append(LOADING_VERSIONS_TEXT)
        elif state == VersionFetchState.PRESENT:
            versions = snapshot.versions.get(app_name, ())
            lines.append("[b]Latest Versions:[/b]")
            if versions:
                lines.extend(f"  {escape(version)}" for version in versions)
            else:
                lines.append(NO_VERSIONS_TEXT)
        elif state == VersionFetchState.FAILED:
            lines.append("[red]Version lookup failed. Press v to retry.[/red]")
        return "\n".join(lines)


__all__ = [
    "InventoryScreen",
]
