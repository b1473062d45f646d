from docviewer.cli import cli

cli()
