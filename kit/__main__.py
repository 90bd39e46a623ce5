from kit.cli import cli

cli()
