# src/cb/cli/main.py
import click
import logging
import sys
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..cb_token import EOF, ILLEGAL
from ..config import load_config
from ..errors import CBError, ConfigError, IllegalCharacterError
from ..lexer import Lexer
from ..repl import start

console = Console()
logger = logging.getLogger("cb.cli")


def _read_source(file):
    # Bytes keep offsets byte-accurate; the lexer decodes them one-to-one
    with open(file, 'rb') as f:
        return f.read()


@click.group()
@click.version_option(version=__version__, prog_name="CB")
@click.option('-v', '--verbose', is_flag=True, help="Enable debug logging")
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help="Path to a cb.json settings file")
@click.pass_context
def cli(ctx, verbose, config_path):
    """CB language tools - tokenize and inspect CB source"""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


@cli.command()
@click.option('--prompt', default=None, help="Prompt shown before each line")
@click.pass_obj
def repl(config, prompt):
    """Start the CB token REPL"""
    prompt = prompt if prompt is not None else config.prompt
    console.print("[bold green]CB REPL[/bold green] - type a line to see its tokens")
    try:
        start(sys.stdin, sys.stdout, prompt=prompt)
    except KeyboardInterrupt:
        console.print("\nGoodbye!")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def tokens(config, file):
    """Show tokens of a CB file"""
    try:
        lexer = Lexer(_read_source(file))

        table = Table(title="Tokens")
        table.add_column("Type", style="cyan")
        table.add_column("Literal", style="green")
        table.add_column("Offset", style="yellow")

        while True:
            token = lexer.next_token()
            if token.type == EOF:
                break
            if config.strict and token.type == ILLEGAL:
                raise IllegalCharacterError(token, lexer.token_start)
            table.add_row(escape(token.type), escape(token.literal), str(lexer.token_start))

        console.print(table)

    except CBError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check a CB file for illegal characters"""
    source_code = _read_source(file)
    lexer = Lexer(source_code)

    illegal = []
    while True:
        token = lexer.next_token()
        if token.type == EOF:
            break
        if token.type == ILLEGAL:
            illegal.append((lexer.token_start, token))

    logger.debug("checked %s: %d illegal character(s)", file, len(illegal))

    if illegal:
        console.print("[bold red]Illegal characters found:[/bold red]")
        for offset, token in illegal:
            console.print(f"  offset {offset}: {escape(repr(token.literal))}")
        sys.exit(1)

    console.print("[bold green]No illegal characters.[/bold green]")


if __name__ == "__main__":
    cli()
