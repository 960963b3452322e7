from crush.cli.app import app

app(prog_name="crush")
