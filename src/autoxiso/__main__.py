from autoxiso.cli import app

app(prog_name="autoxiso")
