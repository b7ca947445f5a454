"""
Command Line Interface for rem.
"""

import click
from functools import wraps
from .version import VERSION
from .data import DataCore
from .ordering import STATUS_ORDER
from .recovery import RemError


def _handle_errors(func):
    """Report remcli errors as a message and exit status instead of a traceback."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RemError as e:
            click.echo(f"❌ {e}", err=True)
            raise SystemExit(1)
    return wrapper


def _open_board(ctx, include_done=True):
    return DataCore.board(ctx.obj['root'], include_done=include_done)


@click.group()
@click.version_option(version=VERSION, prog_name="rem")
@click.option('--root', type=click.Path(file_okay=False), default=None,
              help='Task storage directory (default: ~/.rem-cli/tasks)')
@click.pass_context
def main(ctx, root):
    """
    rem - a personal task tracker keeping one Markdown file per task.
    """
    ctx.ensure_object(dict)
    ctx.obj['root'] = root


@main.command(name='list')
@click.option('--all', 'show_all', is_flag=True, help='Include done tasks')
@click.pass_context
@_handle_errors
def list_tasks(ctx, show_all):
    """List tasks grouped by status."""
    board = _open_board(ctx, include_done=show_all)
    statuses = STATUS_ORDER if show_all else STATUS_ORDER[:2]

    for status in statuses:
        click.echo(f" {status.label} ")
        group = [t for t in board.tasks if t.status == status]
        if not group:
            click.echo("   (empty)")
        for task in group:
            click.echo(f"   {task.short_id}  {task.name}")


@main.command()
@click.argument('name', nargs=-1, required=True)
@click.pass_context
@_handle_errors
def add(ctx, name):
    """Add a new task."""
    board = _open_board(ctx, include_done=False)
    task = board.add_task(" ".join(name).strip())
    if task is None:
        click.echo("❌ Task name cannot be empty", err=True)
        raise SystemExit(1)
    click.echo(f"✅ Added {task.short_id}  {task.name}")
    click.echo(f"   📍 {board.repository.path_for(task)}")


def _transition(ctx, task_id, forward):
    board = _open_board(ctx)
    board.select(board.find(task_id))
    task = board.selected()
    moved = board.forward_selected() if forward else board.backward_selected()
    if moved:
        click.echo(f"✅ {task.short_id}  {task.name} -> {task.status.label}")
    else:
        click.echo(f"💡 {task.short_id}  {task.name} is already {task.status.label}")


@main.command()
@click.argument('task_id')
@click.pass_context
@_handle_errors
def forward(ctx, task_id):
    """Move a task to its next status."""
    _transition(ctx, task_id, forward=True)


@main.command()
@click.argument('task_id')
@click.pass_context
@_handle_errors
def backward(ctx, task_id):
    """Move a task back to its previous status."""
    _transition(ctx, task_id, forward=False)


@main.command()
@click.argument('task_id')
@click.pass_context
@_handle_errors
def path(ctx, task_id):
    """Print the path of a task's file."""
    board = _open_board(ctx)
    click.echo(str(board.repository.path_for(board.find(task_id))))


@main.command()
@click.argument('task_id')
@click.pass_context
@_handle_errors
def show(ctx, task_id):
    """Show a task and its notes."""
    board = _open_board(ctx)
    task = board.find(task_id)
    click.echo(f"📝 {task.name}")
    click.echo(f"   🆔 {task.id}")
    click.echo(f"   📋 Status: {task.status.label}")
    click.echo(f"   📅 Created: {task.created_at.isoformat()}")
    click.echo(f"   🔄 Updated: {task.updated_at.isoformat()}")
    preview = board.repository.read_preview(task)
    if preview.strip():
        click.echo("")
        click.echo(preview.rstrip("\n"))


@main.command()
@click.argument('task_id')
@click.pass_context
@_handle_errors
def edit(ctx, task_id):
    """Open a task's file in $EDITOR."""
    board = _open_board(ctx)
    board.select(board.find(task_id))
    click.edit(filename=str(board.selected_path()))
    task = board.reload_selected()
    click.echo(f"✅ Saved {task.short_id}  {task.name}")


@main.command()
@click.pass_context
@_handle_errors
def init(ctx):
    """Create the task storage directories."""
    root = DataCore.init_storage(ctx.obj['root'])
    click.echo(f"📁 Task storage ready at {root}")


if __name__ == "__main__":
    main()
