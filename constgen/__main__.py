from constgen.main import cli

cli()
