from shini.cli.app import app

app(prog_name="shini")
