from litmark.cli import app

app(prog_name="litmark")
