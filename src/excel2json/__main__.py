from excel2json.cli.apps.convert import cli

cli()
