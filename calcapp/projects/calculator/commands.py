import click
from calcapp.projects.calculator.core.display import format_display, summary_line
from calcapp.projects.calculator.core.engine import INITIAL_STATE, perform
from calcapp.projects.calculator.core.keymap import resolve_key
import logging

logger = logging.getLogger(__name__)

@click.group(name='calculator')
def calculator_cli():
    """Calculator commands."""
    pass

@calculator_cli.command('replay')
@click.argument('keys', nargs=-1, required=True)
@click.option('--summary', is_flag=True, help='Also print the pending operand/operator line')
def replay_command(keys, summary):
    """Feed KEYS (keyboard key names, e.g. 3 + 4 Enter) through the calculator."""
    state = INITIAL_STATE
    for key in keys:
        binding = resolve_key(key)
        if binding is None:
            click.echo(f"{key!r}: not bound, skipped", err=True)
            continue

        state = perform(state, binding.action, binding.value)
        line = f"{key:>9}  {format_display(state.display)}"
        if summary:
            line += f"  [{summary_line(state)}]"
        click.echo(line)

    logger.info("Replayed %d keys, final display %s", len(keys), state.display)
