"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdview.cli.commands import blocks_cmd, main_callback, render_cmd, search_cmd, stats_cmd, toc_cmd


app = typer.Typer(name="mdview", no_args_is_help=True, help="Extended-markdown preview renderer")

app.callback()(main_callback)
app.command(name="render")(render_cmd)
app.command(name="toc")(toc_cmd)
app.command(name="blocks")(blocks_cmd)
app.command(name="search")(search_cmd)
app.command(name="stats")(stats_cmd)
