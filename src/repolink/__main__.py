from repolink.cli import app

app()
