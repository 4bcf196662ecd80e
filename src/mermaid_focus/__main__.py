"""CLI entry point for mermaid-focus."""

import logging
import sys

import click

from mermaid_focus.config import RenderConfig
from mermaid_focus.session import ViewSession


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--hide-all", "hide_all", is_flag=True, help="Start with every node hidden")
@click.option("--show", "show", multiple=True, help="Show this node id (repeatable)")
@click.option("--descendants", "descendants", multiple=True, help="Show this node and everything downstream of it")
@click.option("--ancestors", "ancestors", multiple=True, help="Show this node and everything upstream of it")
@click.option("--hide", "hide", multiple=True, help="Hide this node id (repeatable, applied last)")
@click.option("--list", "list_nodes", is_flag=True, help="List declared nodes and their visibility instead of rendering")
@click.option("--no-click-hooks", "no_click_hooks", is_flag=True, help="Do not emit click directives")
@click.option("--callback", "callback", type=str, default="onNodeClick", help="Callback name used in click directives")
@click.option("--diagnostics", is_flag=True, help="Report lines the parser dropped on stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
def main(
    input: str | None,
    hide_all: bool,
    show: tuple[str, ...],
    descendants: tuple[str, ...],
    ancestors: tuple[str, ...],
    hide: tuple[str, ...],
    list_nodes: bool,
    no_click_hooks: bool,
    callback: str,
    diagnostics: bool,
    verbose: bool,
    output: str | None,
) -> None:
    """Filter a Mermaid flowchart down to a subset of its nodes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        config = RenderConfig(click_hooks=not no_click_hooks, click_callback=callback)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    session = ViewSession.from_text(text, config=config)

    if diagnostics:
        for dropped in session.model.dropped:
            click.echo(f"line {dropped.lineno}: {dropped.reason}: {dropped.text}", err=True)

    if hide_all:
        session.state.hide_all()
    for node_id in show:
        session.state.set_visible(node_id, True)
    for node_id in descendants:
        session.state.show_descendants(node_id, session.index)
    for node_id in ancestors:
        session.state.show_ancestors(node_id, session.index)
    for node_id in hide:
        session.state.set_visible(node_id, False)

    if list_nodes:
        lines = [f"[{'x' if e.visible else ' '}] {e.id} — {e.label}" for e in session.sidebar_entries()]
        rendered = "\n".join(lines) + "\n" if lines else ""
    else:
        rendered = session.text()

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
