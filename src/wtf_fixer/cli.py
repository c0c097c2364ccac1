"""Command-line interface for WTF."""

from __future__ import annotations

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from thefuzz import fuzz, process

from wtf_fixer import __version__
from wtf_fixer.config import ConfigError, UserConfig
from wtf_fixer.corrections.engine import Correction, find_corrections
from wtf_fixer.corrections.tables import is_builtin_typo
from wtf_fixer.executor import ExecutionError, execute_command
from wtf_fixer.history import HistoryError, get_last_command
from wtf_fixer.shellrc import (
    HISTAPPEND_LINE,
    PROMPT_COMMAND_LINE,
    append_bash_history_config,
    default_bashrc,
    needs_bash_history_config,
)

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

# Minimum thefuzz ratio (0-100) for "did you mean" hints
SIMILAR_KEY_THRESHOLD = 60


class AliasedGroup(click.Group):
    """Command group that also accepts short aliases for subcommands."""

    ALIASES = {
        "a": "add",
        "rm": "remove",
        "ls": "list",
        "cls": "clear",
        "cfg": "config",
        "s": "save",
        "am": "auto-mode",
        "ta": "toggle-auto",
        "ch": "config-history",
    }

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the canonical name rather than the alias
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args


def _error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def _save(config: UserConfig) -> None:
    try:
        config.save()
    except ConfigError as e:
        _error(str(e))
        sys.exit(1)


def _setup_logging(debug: bool) -> None:
    package_logger = logging.getLogger("wtf_fixer")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def display_corrections(last_cmd: str, corrections: list[Correction]) -> None:
    console.print("[red]Previous command:[/red]")
    console.print(f"  [yellow]{escape(last_cmd)}[/yellow]")
    console.print()

    for i, correction in enumerate(corrections, 1):
        console.print(
            f"[cyan]\\[{i}][/cyan] [green]Suggested fix:[/green] "
            f"[bold]{escape(correction.fixed_cmd)}[/bold] "
            f"[dim]({escape(correction.reason)})[/dim]"
        )
    console.print()


def display_no_suggestions(last_cmd: str) -> None:
    console.print(f"[yellow]¯\\_(ツ)_/¯[/yellow] No suggestions found for: {escape(last_cmd)}")
    console.print("[dim]The command might be correct or too complex to fix automatically.[/dim]")
    console.print()
    console.print("[cyan]Tip: Add your own fix with:[/cyan]")
    console.print(f'  wtf add "{escape(last_cmd)}" "<correct_command>"')


def parse_selection(answer: str, count: int) -> int | None:
    """Turn a prompt answer into a zero-based index, or None to cancel.

    An empty answer picks the first suggestion.
    """
    answer = answer.strip().lower()

    if answer in ("n", "no"):
        return None

    if not answer:
        return 0 if count > 0 else None

    if answer.isdecimal():
        num = int(answer)
        if 0 < num <= count:
            return num - 1

    return None


def prompt_selection(count: int) -> int | None:
    try:
        answer = console.input(f"[cyan]Select a fix[/cyan] \\[1-{count}] (or 'n' to cancel): ")
    except EOFError:
        return None
    return parse_selection(answer, count)


def _check_first_run(config: UserConfig) -> None:
    if config.first_run_complete:
        return

    config.mark_first_run_complete()
    try:
        config.save()
    except ConfigError as e:
        logger.warning(f"Could not record first run: {e}")

    if sys.platform != "win32" and needs_bash_history_config(
        os.getenv("SHELL", ""), default_bashrc()
    ):
        console.print("[yellow]Tip: bash only writes history when the shell exits.[/yellow]")
        console.print("[yellow]Run 'wtf config-history' so wtf can see your latest command.[/yellow]")
        console.print()


def _fix_last_command(config: UserConfig, auto_yes: bool, debug: bool) -> None:
    try:
        last_cmd = get_last_command()
    except HistoryError as e:
        _error(str(e))
        sys.exit(1)

    if debug:
        console.print(f"Last command: {escape(last_cmd)}")

    corrections = find_corrections(last_cmd, config.overrides)
    if not corrections:
        display_no_suggestions(last_cmd)
        return

    display_corrections(last_cmd, corrections)

    selected = 0 if auto_yes else prompt_selection(len(corrections))
    if selected is None:
        console.print("[yellow]Cancelled.[/yellow]")
        return

    cmd_to_run = corrections[selected].fixed_cmd
    console.print(f"[bold green]Running:[/bold green] {escape(cmd_to_run)}")
    console.print()

    try:
        exit_code = execute_command(cmd_to_run)
    except ExecutionError as e:
        _error(str(e))
        sys.exit(1)

    if exit_code != 0:
        _error(f"Command exited with status: {exit_code}")
        sys.exit(1)


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wtf")
@click.option("--yes", "-y", is_flag=True, help="Run the first suggestion without confirmation")
@click.option("--debug", "-d", is_flag=True, help="Show debug information")
@click.pass_context
def cli(ctx: click.Context, yes: bool, debug: bool) -> None:
    """Fix typos in your previous command.

    Run without a subcommand to fix the last command in your shell history.
    """
    _setup_logging(debug)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config"] = UserConfig.load()

    if ctx.invoked_subcommand is None:
        config = ctx.obj["config"]
        _check_first_run(config)
        _fix_last_command(config, auto_yes=yes or config.auto_mode, debug=debug)


@cli.command()
@click.argument("wrong")
@click.argument("correct")
@click.pass_context
def add(ctx: click.Context, wrong: str, correct: str) -> None:
    """Add a custom typo fix (alias: a)."""
    config: UserConfig = ctx.obj["config"]

    if is_builtin_typo(wrong, correct):
        console.print("[cyan]This typo is already in the built-in database, adding to your custom list.[/cyan]")

    config.add_typo(wrong, correct)

    _save(config)
    console.print(f"[green]✓ Added:[/green] [yellow]{escape(wrong)}[/yellow] → {escape(correct)}")


@cli.command()
@click.argument("wrong")
@click.pass_context
def remove(ctx: click.Context, wrong: str) -> None:
    """Remove a custom typo fix (alias: rm)."""
    config: UserConfig = ctx.obj["config"]

    if not config.remove_typo(wrong):
        _error(f"Typo '{wrong}' not found in custom list")

        known = [w for w, _ in config.custom_typos]
        matches = process.extract(wrong, known, scorer=fuzz.ratio, limit=3) if known else []
        similar = [match for match, score in matches if score >= SIMILAR_KEY_THRESHOLD]
        if similar:
            err_console.print(f"[dim]Did you mean: {escape(', '.join(similar))}?[/dim]")
        sys.exit(1)

    _save(config)
    console.print(f"[green]✓ Removed:[/green] [yellow]{escape(wrong)}[/yellow]")


@cli.command(name="list")
@click.pass_context
def list_typos(ctx: click.Context) -> None:
    """List all custom typos (alias: ls)."""
    typos = ctx.obj["config"].custom_typos

    if not typos:
        console.print("[yellow]No custom typos configured.[/yellow]")
        console.print()
        console.print("[dim]Add one with:[/dim]")
        console.print('  wtf add "wrong_cmd" "correct_cmd"')
        return

    console.print("[bold cyan]Custom Typos:[/bold cyan]")
    console.print()
    for i, (wrong, correct) in enumerate(typos, 1):
        console.print(f"[bright_black]\\[{i}][/bright_black] [yellow]{escape(wrong)}[/yellow] → [green]{escape(correct)}[/green]")
    console.print()
    console.print(f"{len(typos)} custom typo(s)")


@cli.command()
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Clear all custom typos (alias: cls)."""
    config: UserConfig = ctx.obj["config"]
    count = config.clear_typos()
    _save(config)
    console.print(f"[green]✓[/green] Cleared {count} custom typo(s)")


@cli.command()
def config() -> None:
    """Show config file location (alias: cfg)."""
    console.print("[cyan]Config file location:[/cyan]")
    console.print(f"  {escape(UserConfig.get_config_path_display())}")


@cli.command()
@click.argument("correct")
@click.pass_context
def save(ctx: click.Context, correct: str) -> None:
    """Save the previous command as a typo of CORRECT (alias: s)."""
    config: UserConfig = ctx.obj["config"]

    try:
        last_cmd = get_last_command()
    except HistoryError as e:
        _error(str(e))
        sys.exit(1)

    if ctx.obj.get("debug"):
        console.print(f"Last command: {escape(last_cmd)}")

    config.add_typo(last_cmd, correct)
    _save(config)

    console.print(f"[green]✓ Added:[/green] [yellow]{escape(last_cmd)}[/yellow] → {escape(correct)}")
    console.print()
    console.print("[cyan]Now you can use 'wtf' to fix this typo in the future![/cyan]")


@cli.command(name="auto-mode")
@click.argument("enabled", type=click.BOOL)
@click.pass_context
def auto_mode(ctx: click.Context, enabled: bool) -> None:
    """Enable or disable auto-mode, which runs the first suggestion (alias: am)."""
    config: UserConfig = ctx.obj["config"]
    config.set_auto_mode(enabled)
    _save(config)

    if enabled:
        console.print("[green]✓ Auto-mode enabled![/green]")
        console.print("[dim]This is equivalent to always using 'wtf -y'[/dim]")
    else:
        console.print("[green]✓ Auto-mode disabled![/green]")
        console.print("[cyan]wtf will now prompt before running suggestions.[/cyan]")


@cli.command(name="toggle-auto")
@click.pass_context
def toggle_auto(ctx: click.Context) -> None:
    """Toggle auto-mode on/off (alias: ta)."""
    config: UserConfig = ctx.obj["config"]
    enabled = config.toggle_auto_mode()
    _save(config)

    state = "ON" if enabled else "OFF"
    console.print(f"[green]✓ Auto-mode toggled {state}![/green]")


@cli.command(name="config-history")
def config_history() -> None:
    """Configure bash to write history after every command (alias: ch)."""
    if sys.platform == "win32":
        console.print("[yellow]This command is only available on Linux/Unix systems.[/yellow]")
        return

    shell = os.getenv("SHELL", "")
    if "bash" not in shell:
        console.print("[yellow]Bash history configuration is only for bash shell.[/yellow]")
        console.print(f"[dim]Your current shell: {escape(shell)}[/dim]")
        return

    bashrc = default_bashrc()
    if not bashrc.exists():
        console.print("[yellow]~/.bashrc not found.[/yellow]")
        console.print("[dim]Please create it first or configure manually.[/dim]")
        return

    try:
        added = append_bash_history_config(bashrc)
    except OSError as e:
        _error(f"Failed to update .bashrc: {e}")
        err_console.print("[yellow]You can manually add these lines to ~/.bashrc:[/yellow]")
        err_console.print(f"  {HISTAPPEND_LINE}")
        err_console.print(f"  {PROMPT_COMMAND_LINE}")
        sys.exit(1)

    if not added:
        console.print("[green]✓ Bash history is already configured![/green]")
        return

    console.print("[green]✓ Bash configuration updated![/green]")
    for line in added:
        console.print(f"  [dim]{escape(line)}[/dim]")
    console.print()
    console.print("[cyan]Run this to apply changes:[/cyan]")
    console.print("  source ~/.bashrc")


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
