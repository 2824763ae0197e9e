"""CLI entrypoint: Typer app definition and command registration"""

import typer

from panelify.cli.commands import (
    export_cmd, init_cmd, last_cmd, main_callback, move_cmd,
    open_cmd, recent_cmd, reset_cmd, sections_cmd, sync_cmd,
)


app = typer.Typer(name="panelify", no_args_is_help=True, help="Markdown sections as dashboard panels")

app.callback()(main_callback)
app.command(name="init")(init_cmd)
app.command(name="sections")(sections_cmd)
app.command(name="open")(open_cmd)
app.command(name="sync")(sync_cmd)
app.command(name="move")(move_cmd)
app.command(name="reset")(reset_cmd)
app.command(name="export")(export_cmd)
app.command(name="recent")(recent_cmd)
app.command(name="last")(last_cmd)
