import click

from paramguard.cli.check import check
from paramguard.cli.show import show


@click.group(invoke_without_command=True)
@click.version_option(package_name="paramguard")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """paramguard CLI"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
cli.add_command(show)


if __name__ == "__main__":
    cli()
