"""Interactive web page for Bibtex Sorter."""
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import dash
import dash_bootstrap_components as dbc
from dash import dcc, html, Input, Output, State, dash_table
from dash.exceptions import PreventUpdate

from .bibtex_processor import sort_bibtex
from .index import INDEX_COLUMNS, entries_to_frame

logger = logging.getLogger(__name__)

COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"
COPY_RESET_MS = 2000
HIDDEN = {"display": "none"}
VISIBLE = {"display": "block"}

# Writes the sorted text with the async Clipboard API and reports success
# through the copy-status store; failures are only logged to the console.
COPY_TO_CLIPBOARD_JS = """
function(n_clicks, text) {
    if (!n_clicks || !text || !navigator.clipboard) {
        return window.dash_clientside.no_update;
    }
    navigator.clipboard.writeText(text).then(function() {
        window.dash_clientside.set_props('copy-status', {data: {copied: true, clicks: n_clicks}});
    }).catch(function(err) {
        console.error('Failed to copy text: ', err);
    });
    return window.dash_clientside.no_update;
}
"""


def default_port() -> int:
    """Port from DASHBOARD_PORT, falling back to 8050."""
    try:
        return int(os.getenv("DASHBOARD_PORT", "8050"))
    except ValueError:
        logger.warning("Ignoring invalid DASHBOARD_PORT value")
        return 8050


def create_error_alert(message: str) -> dbc.Alert:
    """Render an error banner for a failed sort."""
    return dbc.Alert([
        html.Strong("Error: "),
        message
    ], color="danger", className="mt-3")


def create_layout() -> html.Div:
    """Build the page layout."""
    return html.Div([
        dcc.Interval(id='copy-reset-interval', interval=COPY_RESET_MS, disabled=True),
        dcc.Store(id='copy-request'),
        dcc.Store(id='copy-status'),

        dbc.Container(className="p-4", style={"maxWidth": "768px"}, children=[
            html.H1("BibTeX Reference Sorter", className="fw-bold"),
            html.P(
                "Paste the contents of your `.bib` file below and click \"Sort\" "
                "to arrange the entries alphabetically by their citation ID.",
                className="my-4 text-muted"
            ),

            dcc.Textarea(
                id='bibtex-input',
                placeholder="Paste your BibTeX entries here...",
                value="",
                style={"width": "100%", "height": "16rem", "fontFamily": "monospace"},
                className="p-2 border rounded"
            ),
            dbc.Button("Sort References", id='sort-button', color="primary", className="mt-3"),

            html.Div(id='sort-error'),

            html.Div(id='sorted-section', style=HIDDEN, children=[
                html.Div([
                    html.H2("Sorted References", className="fw-bold mb-0"),
                    html.Div([
                        dbc.Badge(id='entry-count', color="secondary", className="me-2"),
                        dbc.Button(COPY_LABEL, id='copy-button', color="light", size="sm"),
                    ], className="d-flex align-items-center"),
                ], className="d-flex justify-content-between align-items-center mt-4 mb-2"),
                html.Pre(
                    id='sorted-output',
                    className="p-3 bg-light border rounded font-monospace",
                    style={"overflowX": "auto"}
                ),
                html.H5("Entry Index", className="mt-4"),
                dash_table.DataTable(
                    id='entry-index',
                    columns=[{"name": col, "id": col} for col in INDEX_COLUMNS],
                    data=[],
                    page_size=20,
                    style_cell={"fontFamily": "monospace", "textAlign": "left"},
                ),
            ]),
        ]),
    ])


def handle_sort(n_clicks: Optional[int], text: Optional[str]) -> Tuple[Any, str, Dict[str, str], str, List[Dict], str]:
    """Sort the textarea contents and build every output of the sort callback.

    Returns:
        (error banner, sorted text, section style, entry count label,
        index table rows, copy button label)
    """
    if not n_clicks:
        raise PreventUpdate

    result = sort_bibtex(text or "")

    if not result.ok:
        alert = create_error_alert(result.message) if result.message else None
        return alert, "", HIDDEN, "", [], COPY_LABEL

    table_data = entries_to_frame(result.entries).to_dict('records')
    count_label = f"{len(result.entries)} entries"
    return None, result.rendered_text, VISIBLE, count_label, table_data, COPY_LABEL


def handle_copy(status: Optional[Dict[str, Any]]) -> Tuple[str, bool]:
    """Switch the copy label to its confirmation text and start the reset timer.

    Only called with a status the browser reports after a successful write;
    a failed write leaves the label unchanged.
    """
    if not status or not status.get("copied"):
        raise PreventUpdate
    logger.debug(f"Browser confirmed copy #{status.get('clicks')}")
    return COPIED_LABEL, False


def handle_copy_reset(n_intervals: Optional[int]) -> Tuple[str, bool]:
    """Restore the copy label and stop the reset timer."""
    if not n_intervals:
        raise PreventUpdate
    return COPY_LABEL, True


def register_callbacks(app: dash.Dash) -> None:
    """Register all Dash callbacks.

    Args:
        app: Dash application
    """
    @app.callback(
        [Output('sort-error', 'children'),
         Output('sorted-output', 'children'),
         Output('sorted-section', 'style'),
         Output('entry-count', 'children'),
         Output('entry-index', 'data'),
         Output('copy-button', 'children')],
        [Input('sort-button', 'n_clicks')],
        [State('bibtex-input', 'value')],
        prevent_initial_call=True
    )
    def sort_references(n_clicks, text):
        """Sort the pasted entries and show the result or an error."""
        return handle_sort(n_clicks, text)

    app.clientside_callback(
        COPY_TO_CLIPBOARD_JS,
        Output('copy-request', 'data'),
        Input('copy-button', 'n_clicks'),
        State('sorted-output', 'children'),
        prevent_initial_call=True
    )

    @app.callback(
        [Output('copy-button', 'children', allow_duplicate=True),
         Output('copy-reset-interval', 'disabled')],
        [Input('copy-status', 'data')],
        prevent_initial_call=True
    )
    def confirm_copy(status):
        """Show the copy confirmation once the browser reports success."""
        return handle_copy(status)

    @app.callback(
        [Output('copy-button', 'children', allow_duplicate=True),
         Output('copy-reset-interval', 'disabled', allow_duplicate=True)],
        [Input('copy-reset-interval', 'n_intervals')],
        prevent_initial_call=True
    )
    def reset_copy_label(n_intervals):
        """Reset the copy label once the timer fires."""
        return handle_copy_reset(n_intervals)


def create_dashboard() -> dash.Dash:
    """Create and configure the Dash application.

    Returns:
        Configured Dash application
    """
    app = dash.Dash(
        __name__,
        external_stylesheets=[dbc.themes.BOOTSTRAP],
        title="BibTeX Sorter",
        update_title=None
    )
    app.layout = create_layout()
    register_callbacks(app)
    return app


def run_dashboard(debug: bool = False, port: Optional[int] = None) -> None:
    """Run the dashboard.

    Args:
        debug: Whether to run in debug mode
        port: Port to run the dashboard on (default: DASHBOARD_PORT or 8050)
    """
    app = create_dashboard()
    app.run(debug=debug, port=port or default_port())


if __name__ == "__main__":
    run_dashboard(debug=True)
