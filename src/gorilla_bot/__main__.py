from gorilla_bot.main import cli

cli()
